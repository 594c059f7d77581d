"""API Routes — filter-and-sort, related query, checklist, and health endpoints.

Tests cover:
    - Filter/sort endpoint passes null work items through and applies UI filter state
    - Related query uses default seed fields and settings sort field
    - Form service errors surface as 502 with the structured envelope
    - Checklist GET/PUT normalize, PUT rejects mismatched ids and stale etags
    - Health and readiness probes
"""

from witquery.core.errors import FormServiceError


# ─── filter and sort ─────────────────────────────────────────────

async def test_filter_with_null_work_items_returns_null(client):
    res = await client.post("/api/v1/work-items/filter", json={
        "work_items": None,
        "sort_state": {"sort_key": "System.Id"},
    })
    assert res.status_code == 200
    assert res.json() == {"work_items": None}


async def test_filter_and_sort_applies_filter_state(client):
    res = await client.post("/api/v1/work-items/filter", json={
        "work_items": [
            {"id": 5, "fields": {"System.Title": "Login bug", "System.State": "Active"}},
            {"id": 1, "fields": {"System.Title": "Crash bug", "System.State": "active"}},
            {"id": 3, "fields": {"System.Title": "Docs", "System.State": "Active"}},
            {"id": 2, "fields": {"System.Title": "Old bug", "System.State": "Closed"}},
        ],
        "filter_state": {
            "keyword": {"value": "BUG"},
            "System.State": {"value": ["Active"]},
        },
        "sort_state": {"sort_key": "System.Id", "is_sorted_descending": True},
    })
    assert res.status_code == 200
    assert [w["id"] for w in res.json()["work_items"]] == [5, 1]


async def test_filter_unassigned(client):
    res = await client.post("/api/v1/work-items/filter", json={
        "work_items": [
            {"id": 1, "fields": {"System.AssignedTo": "Jordan Lee"}},
            {"id": 2, "fields": {}},
        ],
        "filter_state": {"System.AssignedTo": {"value": ["Unassigned"]}},
    })
    assert [w["id"] for w in res.json()["work_items"]] == [2]


async def test_filter_rejects_malformed_body(client):
    res = await client.post("/api/v1/work-items/filter", json={
        "work_items": [{"fields": {}}],
    })
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


# ─── related query ───────────────────────────────────────────────

async def test_related_query_with_default_seed_fields(client, form_provider):
    res = await client.post(
        "/api/v1/work-items/42/related-query", json={"project": "ProjA"},
    )
    assert res.status_code == 200
    query = res.json()["query"]
    assert "[System.TeamProject] = 'ProjA'" in query
    assert "[System.ID] <> 42" in query
    assert (
        "AND [System.WorkItemType] = 'Bug' AND [System.State] = 'Active' "
        "AND [System.AreaPath] = 'Proj\\Web'"
    ) in query
    assert query.endswith("order by [System.ChangedDate] desc")


async def test_related_query_with_tags_and_sort_field(client):
    res = await client.post("/api/v1/work-items/42/related-query", json={
        "project": "ProjA",
        "fields_to_seek": ["System.Tags"],
        "sort_by_field": "System.CreatedDate",
    })
    query = res.json()["query"]
    assert "([System.Tags] CONTAINS 'ui' OR [System.Tags] CONTAINS 'login')" in query
    assert query.endswith("order by [System.CreatedDate] desc")


async def test_related_query_form_service_error_is_502(client, form_provider):
    form_provider.error = FormServiceError("HTTP 500", "get_field_values")
    res = await client.post(
        "/api/v1/work-items/42/related-query", json={"project": "ProjA"},
    )
    assert res.status_code == 502
    assert res.json()["error"]["code"] == "FORM_SERVICE_ERROR"


async def test_related_query_requires_project(client):
    res = await client.post(
        "/api/v1/work-items/42/related-query", json={"project": "   "},
    )
    assert res.status_code == 400


# ─── checklist ───────────────────────────────────────────────────

async def test_get_missing_checklist_returns_empty(client):
    res = await client.get("/api/v1/work-items/42/checklist")
    assert res.status_code == 200
    assert res.json() == {"id": "42", "checklistItems": [], "__etag": None}


async def test_put_then_get_checklist_normalized(client):
    res = await client.put("/api/v1/work-items/42/checklist", json={
        "id": "42",
        "checklistItems": [
            {"id": "1", "text": "Write tests", "checked": True},
            {"id": "2", "text": "Review", "state": ""},
        ],
    })
    assert res.status_code == 200
    body = res.json()
    assert body["__etag"] == 1
    assert [i["state"] for i in body["checklistItems"]] == ["Completed", "New"]

    res = await client.get("/api/v1/work-items/42/checklist")
    assert [i["state"] for i in res.json()["checklistItems"]] == ["Completed", "New"]


async def test_put_checklist_id_mismatch_is_400(client):
    res = await client.put(
        "/api/v1/work-items/42/checklist", json={"id": "7", "checklistItems": []},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_put_checklist_stale_etag_is_409(client):
    await client.put("/api/v1/work-items/42/checklist", json={"id": "42", "checklistItems": []})
    await client.put(
        "/api/v1/work-items/42/checklist",
        json={"id": "42", "checklistItems": [], "__etag": 1},
    )
    res = await client.put(
        "/api/v1/work-items/42/checklist",
        json={"id": "42", "checklistItems": [], "__etag": 1},
    )
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "CONCURRENCY_CONFLICT"


# ─── health ──────────────────────────────────────────────────────

async def test_health(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"
