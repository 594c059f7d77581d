"""Checklist Schemas — checklist document as exchanged with the client.

Invariants:
    - JSON keys match the stored document: "checklistItems" and "__etag"
    - state accepts any string; blank values are repaired, unrecognized ones kept
"""

from pydantic import BaseModel, ConfigDict, Field

from witquery.core.checklist import ChecklistDocument, ChecklistItem, parse_state


class ChecklistItemPayload(BaseModel):
    id: str = Field(min_length=1)
    text: str = ""
    required: bool = False
    state: str | None = None
    checked: bool | None = None

    def to_domain(self) -> ChecklistItem:
        return ChecklistItem(
            id=self.id, text=self.text, required=self.required,
            state=parse_state(self.state), checked=self.checked,
        )


class ChecklistPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    checklist_items: list[ChecklistItemPayload] = Field(
        default_factory=list, alias="checklistItems",
    )
    etag: int | None = Field(default=None, alias="__etag")

    def to_domain(self) -> ChecklistDocument:
        return ChecklistDocument(
            id=self.id,
            checklist_items=[i.to_domain() for i in self.checklist_items],
            etag=self.etag,
        )

    @classmethod
    def from_domain(cls, document: ChecklistDocument) -> "ChecklistPayload":
        return cls.model_validate(document.to_dict())
