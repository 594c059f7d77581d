"""Related Work Items — builds the related-work-item query for the active work item.

Invariants:
    - Exactly two external calls: seed field values and the active work item id
    - Both complete before rendering; a failure of either propagates unchanged
    - No retries, no timeouts here (the provider owns its transport timeout)
"""

import asyncio
import logging
from typing import Sequence

from witquery.core.query_builder import render_query
from witquery.core.repository_protocols import FormValueProvider

logger = logging.getLogger(__name__)


async def create_query(
    provider: FormValueProvider,
    project: str,
    fields_to_seek: Sequence[str],
    sort_by_field: str,
) -> str:
    """Fetch the seed values and active id, then render the WIQL string."""
    field_values, work_item_id = await asyncio.gather(
        provider.get_field_values(list(fields_to_seek), True),
        provider.get_id(),
    )
    query = render_query(
        project, fields_to_seek, field_values, work_item_id, sort_by_field,
    )
    logger.debug(
        f"Built related query seeded by {len(fields_to_seek)} field(s)",
        extra={"work_item_id": work_item_id, "project": project},
    )
    return query
