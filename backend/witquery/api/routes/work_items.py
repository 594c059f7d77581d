"""Work Item Routes — filter-and-sort over a posted collection and related-query synthesis.

Invariants:
    - POST /work-items/filter never fails on missing specs; null work_items → null
    - POST /work-items/{id}/related-query surfaces form service errors as-is (502)
    - Routes contain no filtering, sorting, or rendering logic
"""

import logging

from fastapi import APIRouter, Depends

from witquery.config import Settings, get_settings
from witquery.core.domain_types import DEFAULT_FIELDS_TO_SEEK
from witquery.core.repository_protocols import FormValueProvider
from witquery.core.work_item_sort import apply_filter_and_sort
from witquery.api.dependencies import get_form_value_provider
from witquery.schemas.work_item import (
    FilterAndSortRequest, FilterAndSortResponse, RelatedQueryRequest,
    RelatedQueryResponse, WorkItemPayload,
)
from witquery.services.related_work_items import create_query

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/work-items", tags=["work-items"])


@router.post("/filter", response_model=FilterAndSortResponse)
async def filter_and_sort(body: FilterAndSortRequest):
    """Apply filter state then sort state to the posted work items."""
    work_items = (
        [w.to_domain() for w in body.work_items]
        if body.work_items is not None else None
    )
    sort_spec = body.sort_state.to_domain() if body.sort_state else None
    result = apply_filter_and_sort(work_items, body.filter_spec(), sort_spec)
    if result is None:
        return FilterAndSortResponse(work_items=None)
    return FilterAndSortResponse(
        work_items=[WorkItemPayload.from_domain(w) for w in result],
    )


@router.post("/{work_item_id}/related-query", response_model=RelatedQueryResponse)
async def related_query(
    work_item_id: int,
    body: RelatedQueryRequest,
    provider: FormValueProvider = Depends(get_form_value_provider),
    settings: Settings = Depends(get_settings),
):
    """Build the WIQL query for work items related to work_item_id."""
    fields_to_seek = (
        body.fields_to_seek if body.fields_to_seek is not None
        else list(DEFAULT_FIELDS_TO_SEEK)
    )
    sort_by_field = body.sort_by_field or settings.default_sort_field
    query = await create_query(provider, body.project, fields_to_seek, sort_by_field)
    logger.info(
        "Related query built",
        extra={"work_item_id": work_item_id, "project": body.project},
    )
    return RelatedQueryResponse(query=query)
