"""Field Type Registry — maps sortable field reference names to comparison types.

Invariants:
    - Read-only after construction (entries held in a MappingProxyType)
    - Every registered entry is a FieldType member, so it resolves to a known comparer
    - Lookup of an unregistered field returns None (caller degrades to "equal")

Design Decisions:
    - Explicit object passed to the comparer instead of a module-level mutable table
    - DEFAULT_FIELD_TYPES shared freely: immutable, no synchronization needed
"""

from types import MappingProxyType
from typing import Mapping

from witquery.core.domain_types import CoreFieldRefNames, FieldType


class FieldTypeRegistry:
    """Immutable field reference name → FieldType lookup."""

    def __init__(self, entries: Mapping[str, FieldType | str]):
        # FieldType(...) raises ValueError on an unknown type name
        self._entries = MappingProxyType(
            {name: FieldType(kind) for name, kind in entries.items()},
        )

    def type_of(self, field_ref_name: str) -> FieldType | None:
        return self._entries.get(field_ref_name)

    def with_entries(self, entries: Mapping[str, FieldType | str]) -> "FieldTypeRegistry":
        """Return a new registry with extra or overridden entries."""
        return FieldTypeRegistry({**self._entries, **entries})

    def __contains__(self, field_ref_name: object) -> bool:
        return field_ref_name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


DEFAULT_FIELD_TYPES = FieldTypeRegistry({
    CoreFieldRefNames.AREA_PATH: FieldType.STRING,
    CoreFieldRefNames.ASSIGNED_TO: FieldType.STRING,
    CoreFieldRefNames.TITLE: FieldType.STRING,
    CoreFieldRefNames.STATE: FieldType.STRING,
    CoreFieldRefNames.WORK_ITEM_TYPE: FieldType.STRING,
    CoreFieldRefNames.ID: FieldType.NUMBER,
    CoreFieldRefNames.CREATED_DATE: FieldType.DATE,
    CoreFieldRefNames.CHANGED_DATE: FieldType.DATE,
})
