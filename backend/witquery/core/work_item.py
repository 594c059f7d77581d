"""Work Item Model — records, field metadata, and filter/sort specifications.

Invariants:
    - WorkItem.id is immutable once assigned (frozen dataclass)
    - Field values are loosely typed; FieldTypeRegistry decides how they compare
    - A missing FilterSpec/SortSpec means "no filtering"/"no sorting", never an error

Design Decisions:
    - Pure dataclasses, not ORM or pydantic: the core never touches IO or validation
    - FilterSpec.from_filter_state accepts the UI filter-state shape {field: {"value": ...}}
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

FieldValue = str | int | float | bool | datetime | None

KEYWORD_FILTER_KEY = "keyword"


@dataclass(frozen=True)
class WorkItem:
    """A work item: integer id plus field reference name → value."""
    id: int
    fields: dict[str, FieldValue] = field(default_factory=dict, hash=False)

    def get(self, field_ref_name: str) -> FieldValue:
        return self.fields.get(field_ref_name)


@dataclass(frozen=True)
class WorkItemField:
    """Field metadata as returned by the work item tracking service."""
    name: str
    reference_name: str


@dataclass
class FilterSpec:
    """Keyword clause plus multi-value clauses, all conjunctive."""
    keyword: str | None = None
    values: dict[str, list[str]] = field(default_factory=dict)

    def values_for(self, field_ref_name: str) -> list[str]:
        return self.values.get(field_ref_name) or []

    @classmethod
    def from_filter_state(cls, filter_state: Mapping[str, Any] | None) -> "FilterSpec | None":
        """Build from {field: {"value": ...}}; the "keyword" entry holds the text clause."""
        if filter_state is None:
            return None
        keyword = None
        values: dict[str, list[str]] = {}
        for key, clause in filter_state.items():
            value = clause.get("value") if isinstance(clause, Mapping) else clause
            if key == KEYWORD_FILTER_KEY:
                keyword = value if isinstance(value, str) else None
            elif isinstance(value, (list, tuple, set, frozenset)):
                values[key] = [str(v) for v in value]
            elif isinstance(value, str):
                values[key] = [value]
        return cls(keyword=keyword, values=values)


@dataclass(frozen=True)
class SortSpec:
    """Sort key (field reference name) and direction."""
    sort_key: str
    is_sorted_descending: bool = False
