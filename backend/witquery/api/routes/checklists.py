"""Checklist Routes — read and write the checklist document of a work item.

Invariants:
    - GET returns an empty checklist (not 404) when none is stored
    - PUT body id must equal the path work item id (400 otherwise)
    - Stale "__etag" on PUT → 409; store failures → 502/503
    - Responses are always normalized (every item has a state)
"""

import logging

from fastapi import APIRouter, Depends

from witquery.config import Settings, get_settings
from witquery.core.errors import ErrorContext, QueryValidationError
from witquery.core.repository_protocols import DocumentStore
from witquery.api.dependencies import get_document_store
from witquery.schemas.checklist import ChecklistPayload
from witquery.services.checklist_data_source import (
    fetch_work_item_checklist, update_work_item_checklist,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/work-items", tags=["checklists"])


@router.get("/{work_item_id}/checklist", response_model=ChecklistPayload)
async def get_checklist(
    work_item_id: int,
    store: DocumentStore = Depends(get_document_store),
    settings: Settings = Depends(get_settings),
):
    checklist = await fetch_work_item_checklist(
        store, work_item_id, settings.checklist_collection,
    )
    return ChecklistPayload.from_domain(checklist)


@router.put("/{work_item_id}/checklist", response_model=ChecklistPayload)
async def put_checklist(
    work_item_id: int,
    body: ChecklistPayload,
    store: DocumentStore = Depends(get_document_store),
    settings: Settings = Depends(get_settings),
):
    if body.id != str(work_item_id):
        raise QueryValidationError(
            f"Checklist id '{body.id}' does not match work item {work_item_id}",
            "id", ErrorContext(work_item_id=work_item_id),
        )
    updated = await update_work_item_checklist(
        store, body.to_domain(), settings.checklist_collection,
    )
    return ChecklistPayload.from_domain(updated)
