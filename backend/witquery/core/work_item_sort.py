"""Work Item Sort — type-aware comparer and the combined filter-and-sort entry point.

Invariants:
    - System.Id sorts by WorkItem.id; every other key by WorkItem.fields[key]
    - Missing values sort first in both directions (never flipped)
    - Comparison strategy comes from the FieldTypeRegistry, never from the value itself
    - Unregistered sort key → 0 (items keep their relative order)
    - NUMBER resolves strict ">" only: equal values compare as -1
    - apply_filter_and_sort(None, ...) is None; the input list is never mutated

Design Decisions:
    - pyuca (Unicode Collation Algorithm, root order) on casefolded text for
      string order; the process locale plays no part
    - Comparer returns -1/0/1 and is adapted with functools.cmp_to_key for list.sort
"""

import logging
from datetime import datetime, timezone
from functools import cmp_to_key, lru_cache

from pyuca import Collator

from witquery.core.domain_types import CoreFieldRefNames, FieldType
from witquery.core.field_types import DEFAULT_FIELD_TYPES, FieldTypeRegistry
from witquery.core.work_item import (
    FieldValue, FilterSpec, SortSpec, WorkItem, WorkItemField,
)
from witquery.core.work_item_filter import work_item_matches_filter

logger = logging.getLogger(__name__)


def field_name_comparer(a: WorkItemField, b: WorkItemField) -> int:
    """Order field metadata by upper-cased display name."""
    a_upper = a.name.upper()
    b_upper = b.name.upper()
    if a_upper < b_upper:
        return -1
    if a_upper > b_upper:
        return 1
    return 0


def apply_filter_and_sort(
    work_items: list[WorkItem] | None,
    filter_spec: FilterSpec | None = None,
    sort_spec: SortSpec | None = None,
    registry: FieldTypeRegistry = DEFAULT_FIELD_TYPES,
) -> list[WorkItem] | None:
    """Filter then sort into a new list. None in, None out."""
    if work_items is None:
        return None

    items = list(work_items)
    if filter_spec is not None:
        items = [w for w in items if work_item_matches_filter(w, filter_spec)]

    if sort_spec is not None:
        items.sort(key=cmp_to_key(
            lambda w1, w2: work_item_comparer(w1, w2, sort_spec, registry),
        ))

    return items


def work_item_comparer(
    work_item1: WorkItem,
    work_item2: WorkItem,
    sort_spec: SortSpec,
    registry: FieldTypeRegistry = DEFAULT_FIELD_TYPES,
) -> int:
    """Compare two work items by sort_spec.sort_key; negated when descending."""
    sort_key = sort_spec.sort_key
    v1 = _sort_value(work_item1, sort_key)
    v2 = _sort_value(work_item2, sort_key)

    # missing values lead in both directions; only typed comparisons are flipped
    if v1 is None and v2 is None:
        return 0
    if v1 is None:
        return -1
    if v2 is None:
        return 1

    compare_value = _compare_typed(v1, v2, registry.type_of(sort_key), sort_key)
    return -compare_value if sort_spec.is_sorted_descending else compare_value


def locale_ignore_case_comparer(a: str, b: str) -> int:
    """Collated, case-insensitive string order as -1/0/1 (accented letters sort with their base)."""
    collator = _collator()
    ka = collator.sort_key(a.casefold())
    kb = collator.sort_key(b.casefold())
    return (ka > kb) - (ka < kb)


def date_comparer(a: datetime, b: datetime) -> int:
    ta, tb = _timestamp(a), _timestamp(b)
    return (ta > tb) - (ta < tb)


# ─── Internal helpers ───────────────────────────────────────────

@lru_cache(maxsize=1)
def _collator() -> Collator:
    # loads the collation table once per process
    return Collator()


def _sort_value(work_item: WorkItem, sort_key: str) -> FieldValue:
    if sort_key == CoreFieldRefNames.ID:
        return work_item.id
    return work_item.get(sort_key)


def _compare_typed(
    v1: FieldValue, v2: FieldValue, field_type: FieldType | None, sort_key: str,
) -> int:
    if field_type is FieldType.STRING:
        return locale_ignore_case_comparer(str(v1), str(v2))
    if field_type is FieldType.DATE:
        d1, d2 = _as_datetime(v1), _as_datetime(v2)
        if d1 is None or d2 is None:
            return locale_ignore_case_comparer(str(v1), str(v2))
        return date_comparer(d1, d2)
    if field_type is FieldType.BOOLEAN:
        b1 = "True" if v1 else "False"
        b2 = "True" if v2 else "False"
        return locale_ignore_case_comparer(b1, b2)
    if field_type is FieldType.NUMBER:
        n1, n2 = _as_number(v1), _as_number(v2)
        if n1 is None or n2 is None:
            return locale_ignore_case_comparer(str(v1), str(v2))
        return 1 if n1 > n2 else -1

    logger.debug(f"No comparison type registered for sort key {sort_key}")
    return 0


def _as_datetime(value: FieldValue) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


def _as_number(value: FieldValue) -> float | None:
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _timestamp(value: datetime) -> float:
    # naive datetimes are UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()
