"""Checklist Data Source — loads and saves work item checklists through a DocumentStore.

Invariants:
    - Documents live in the checklist collection keyed by str(work_item_id)
    - A missing document reads as ChecklistDocument.empty(work_item_id)
    - Every loaded or saved checklist is normalized before it is returned
    - Store errors propagate unchanged (no retry, no re-wrap)
    - Concurrent fetches for the same work item share one store round-trip
    - Writes are never shared: each update reaches the store with its own body
"""

import logging

from witquery.core.checklist import ChecklistDocument, normalize_checklist
from witquery.core.repository_protocols import DocumentStore
from witquery.infrastructure.memoize import memoize_coroutine

logger = logging.getLogger(__name__)

CHECKLIST_COLLECTION = "CheckListItems"


@memoize_coroutine(
    lambda store, work_item_id, collection=CHECKLIST_COLLECTION:
        f"fetch_work_item_checklist_{collection}_{work_item_id}",
)
async def fetch_work_item_checklist(
    store: DocumentStore,
    work_item_id: int,
    collection: str = CHECKLIST_COLLECTION,
) -> ChecklistDocument:
    """Read the checklist of a work item, repairing legacy item states."""
    payload = await store.read_document(
        collection, str(work_item_id),
        ChecklistDocument.empty(work_item_id).to_dict(), False,
    )
    checklist = ChecklistDocument.from_dict(payload)
    normalize_checklist(checklist)
    logger.info(
        f"Loaded checklist with {len(checklist.checklist_items)} item(s)",
        extra={"work_item_id": work_item_id, "collection": collection},
    )
    return checklist


async def update_work_item_checklist(
    store: DocumentStore,
    checklist: ChecklistDocument,
    collection: str = CHECKLIST_COLLECTION,
) -> ChecklistDocument:
    """Write the checklist and return the stored version, normalized."""
    stored = await store.add_or_update_document(
        collection, checklist.to_dict(), False,
    )
    updated = ChecklistDocument.from_dict(stored)
    normalize_checklist(updated)
    logger.info(
        f"Saved checklist {updated.id} (etag {updated.etag})",
        extra={"collection": collection},
    )
    return updated
