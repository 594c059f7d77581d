"""Related Work Item Query — renders the WIQL string from fetched seed field values.

Invariants:
    - Projection is always DEFAULT_FIELDS_TO_RETRIEVE, bracket-quoted, comma-joined, no spaces
    - System.Tags (name matched case-insensitively) → "(... CONTAINS 'a' OR ... CONTAINS 'b')"
    - EXCLUDED_FIELDS and absent/empty values render no clause
    - str values single-quoted; numbers and booleans bare; datetimes single-quoted ISO 8601
    - Seed clauses joined with " AND " and prefixed "AND " only when present
    - Values interpolated verbatim (quotes inside values are not escaped)

Design Decisions:
    - Pure render separated from the two async fetches (services/related_work_items.py)
"""

from datetime import datetime
from typing import Iterable, Mapping

from witquery.core.domain_types import (
    CoreFieldRefNames, DEFAULT_FIELDS_TO_RETRIEVE, EXCLUDED_FIELDS,
)
from witquery.core.work_item import FieldValue

TAG_SEPARATOR = ";"


def render_query(
    project: str,
    fields_to_seek: Iterable[str],
    field_values: Mapping[str, FieldValue],
    work_item_id: int,
    sort_by_field: str,
    fields_to_retrieve: Iterable[str] = DEFAULT_FIELDS_TO_RETRIEVE,
    excluded_fields: frozenset[str] = EXCLUDED_FIELDS,
) -> str:
    """Build the related-work-item query for the active work item."""
    fields_to_retrieve_string = ",".join(f"[{f}]" for f in fields_to_retrieve)

    clauses = []
    for field_ref_name in fields_to_seek:
        clause = render_seed_clause(
            field_ref_name, field_values.get(field_ref_name), excluded_fields,
        )
        if clause is not None:
            clauses.append(clause)

    seed_predicate = f"AND {' AND '.join(clauses)}" if clauses else ""
    return (
        f"SELECT {fields_to_retrieve_string} FROM WorkItems "
        f"where [{CoreFieldRefNames.TEAM_PROJECT}] = '{project}' "
        f"AND [System.ID] <> {work_item_id} "
        f"{seed_predicate} order by [{sort_by_field}] desc"
    )


def render_seed_clause(
    field_ref_name: str,
    value: FieldValue,
    excluded_fields: frozenset[str] = EXCLUDED_FIELDS,
) -> str | None:
    """One predicate clause for a seed field, or None when it contributes nothing."""
    if field_ref_name.casefold() == CoreFieldRefNames.TAGS.casefold():
        return _render_tags_clause(value)
    if field_ref_name in excluded_fields:
        return None
    if value is None or value == "":
        return None
    return f"[{field_ref_name}] = {format_literal(value)}"


def format_literal(value: FieldValue) -> str:
    if isinstance(value, str):
        return f"'{value}'"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        return f"'{value.isoformat()}'"
    return str(value)


def _render_tags_clause(value: FieldValue) -> str | None:
    if not value:
        return None
    tags = str(value).split(TAG_SEPARATOR)
    joined = " OR ".join(
        f"[{CoreFieldRefNames.TAGS}] CONTAINS '{tag}'" for tag in tags
    )
    return f"({joined})"
