"""Work item builders shared by the core tests."""

from witquery.core.domain_types import CoreFieldRefNames
from witquery.core.work_item import WorkItem


def make_work_item(
    id: int,
    title: str | None = None,
    state: str | None = None,
    assigned_to: str | None = None,
    area_path: str | None = None,
    work_item_type: str | None = None,
    **extra,
) -> WorkItem:
    """Build a WorkItem; None arguments leave the field absent."""
    fields = {
        CoreFieldRefNames.TITLE: title,
        CoreFieldRefNames.STATE: state,
        CoreFieldRefNames.ASSIGNED_TO: assigned_to,
        CoreFieldRefNames.AREA_PATH: area_path,
        CoreFieldRefNames.WORK_ITEM_TYPE: work_item_type,
    }
    fields.update(extra)
    return WorkItem(id=id, fields={k: v for k, v in fields.items() if v is not None})


def bug(**overrides) -> WorkItem:
    values = dict(
        id=1, title="Fix the Bug now", state="Active",
        assigned_to="Jordan Lee", area_path="Proj\\Web", work_item_type="Bug",
    )
    values.update(overrides)
    return make_work_item(**values)
