"""Checklist — work item checklist document model and legacy state repair.

Invariants:
    - After normalize_checklist, no item has an unset state
    - Unset state is derived from legacy "checked": truthy → Completed, otherwise New
    - An item that already has a state is never touched (normalization is idempotent)
    - None document / empty item list → no-op; never raises

Design Decisions:
    - Store payloads use the "checklistItems" key and carry the store "__etag";
      from_dict/to_dict translate at this edge
    - Blank state strings load as None and get repaired like a missing state;
      unrecognized ones are kept verbatim so states from newer clients survive a save
"""

from dataclasses import dataclass, field
from typing import Any

from witquery.core.domain_types import ChecklistItemState

ETAG_KEY = "__etag"


@dataclass
class ChecklistItem:
    """One checkable entry; `checked` is kept only for old documents."""
    id: str
    text: str = ""
    required: bool = False
    state: ChecklistItemState | str | None = None
    checked: bool | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChecklistItem":
        return cls(
            id=str(data.get("id", "")),
            text=data.get("text") or "",
            required=bool(data.get("required", False)),
            state=parse_state(data.get("state")),
            checked=data.get("checked"),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "text": self.text,
            "required": self.required,
            "state": _state_value(self.state),
        }
        if self.checked is not None:
            data["checked"] = self.checked
        return data


@dataclass
class ChecklistDocument:
    """Per-work-item checklist; id is the work item id as a string."""
    id: str
    checklist_items: list[ChecklistItem] = field(default_factory=list)
    etag: int | None = None

    @classmethod
    def empty(cls, work_item_id: int) -> "ChecklistDocument":
        return cls(id=str(work_item_id))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChecklistDocument":
        items = data.get("checklistItems") or []
        return cls(
            id=str(data.get("id", "")),
            checklist_items=[ChecklistItem.from_dict(i) for i in items],
            etag=data.get(ETAG_KEY),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "checklistItems": [i.to_dict() for i in self.checklist_items],
        }
        if self.etag is not None:
            data[ETAG_KEY] = self.etag
        return data


def parse_state(raw: Any) -> ChecklistItemState | str | None:
    """Map a stored state string to the enum; blank → None, unrecognized kept as-is."""
    if isinstance(raw, ChecklistItemState):
        return raw
    if not isinstance(raw, str) or not raw.strip():
        return None
    try:
        return ChecklistItemState(raw.strip())
    except ValueError:
        return raw


def derive_state(checked: Any) -> ChecklistItemState:
    return ChecklistItemState.COMPLETED if checked else ChecklistItemState.NEW


def normalize_checklist(
    document: ChecklistDocument | None,
) -> ChecklistDocument | None:
    """Back-fill missing item states from the legacy checked flag, in place."""
    if document is None or not document.checklist_items:
        return document
    for item in document.checklist_items:
        if item.state is None:
            item.state = derive_state(item.checked)
    return document


def _state_value(state: ChecklistItemState | str | None) -> str | None:
    if isinstance(state, ChecklistItemState):
        return state.value
    return state
