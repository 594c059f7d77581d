"""Work Item Schemas — filter-and-sort and related-query request/response shapes.

Invariants:
    - filter_state keeps the UI shape {field: {"value": ...}}; "keyword" is the text clause
    - Missing work_items / filter_state / sort_state mean pass-through, never a 400
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from witquery.core.work_item import FilterSpec, SortSpec, WorkItem


class WorkItemPayload(BaseModel):
    """A work item as exchanged with the client."""
    id: int
    fields: dict[str, Any] = Field(default_factory=dict)

    def to_domain(self) -> WorkItem:
        return WorkItem(id=self.id, fields=dict(self.fields))

    @classmethod
    def from_domain(cls, work_item: WorkItem) -> "WorkItemPayload":
        return cls(id=work_item.id, fields=dict(work_item.fields))


class FilterClause(BaseModel):
    value: str | list[str] | None = None


class SortState(BaseModel):
    sort_key: str = Field(min_length=1)
    is_sorted_descending: bool = False

    def to_domain(self) -> SortSpec:
        return SortSpec(self.sort_key, self.is_sorted_descending)


class FilterAndSortRequest(BaseModel):
    work_items: list[WorkItemPayload] | None = None
    filter_state: dict[str, FilterClause] | None = None
    sort_state: SortState | None = None

    def filter_spec(self) -> FilterSpec | None:
        if self.filter_state is None:
            return None
        return FilterSpec.from_filter_state(
            {k: c.model_dump() for k, c in self.filter_state.items()},
        )


class FilterAndSortResponse(BaseModel):
    work_items: list[WorkItemPayload] | None


class RelatedQueryRequest(BaseModel):
    """Seed fields default to type/state/area; sort field defaults from settings."""
    project: str = Field(min_length=1, max_length=256)
    fields_to_seek: list[str] | None = None
    sort_by_field: str | None = None

    @field_validator("project")
    @classmethod
    def strip_project(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("project cannot be empty or whitespace")
        return v


class RelatedQueryResponse(BaseModel):
    query: str
