"""Work Item Filter — decides whether a work item satisfies a FilterSpec.

Invariants:
    - No FilterSpec → every work item matches
    - Clauses are conjunctive; the first failing clause returns False
    - Empty keyword / empty value list imposes no constraint
    - Missing assigned-to compares as "Unassigned"; other missing fields match nothing
    - Never raises, no side effects
"""

from witquery.core.domain_types import (
    CoreFieldRefNames, MULTI_VALUE_FILTER_FIELDS, UNASSIGNED,
)
from witquery.core.work_item import FieldValue, FilterSpec, WorkItem


def work_item_matches_filter(
    work_item: WorkItem, filter_spec: FilterSpec | None = None,
) -> bool:
    """Return True if work_item passes every clause of filter_spec."""
    if filter_spec is None:
        return True

    # keyword: title substring
    if filter_spec.keyword:
        title = work_item.get(CoreFieldRefNames.TITLE)
        if not _contains_ignore_case(title, filter_spec.keyword):
            return False

    for field_ref_name in MULTI_VALUE_FILTER_FIELDS:
        accepted = filter_spec.values_for(field_ref_name)
        if not accepted:
            continue
        value = work_item.get(field_ref_name)
        if field_ref_name == CoreFieldRefNames.ASSIGNED_TO:
            value = value or UNASSIGNED
        if not any(_equals_ignore_case(v, value) for v in accepted):
            return False

    return True


def _contains_ignore_case(text: FieldValue, keyword: str) -> bool:
    if text is None:
        return False
    return keyword.casefold() in str(text).casefold()


def _equals_ignore_case(expected: str, value: FieldValue) -> bool:
    if value is None:
        return False
    return str(expected).casefold() == str(value).casefold()
