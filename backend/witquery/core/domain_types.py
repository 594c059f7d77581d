"""Domain Types — field reference names, field types, and checklist states.

Invariants:
    - Field reference names are opaque strings; CoreFieldRefNames lists the ones the core reads
    - FieldType and ChecklistItemState are closed sets (str Enums)
    - UNASSIGNED is substituted for a missing assigned-to value before filter comparison

Design Decisions:
    - str Enums: serialize to JSON without custom encoders (document store payloads are JSON)
"""

from enum import Enum


# ─── Field Reference Names ───────────────────────────────────────

class CoreFieldRefNames:
    """Reference names of the system fields the core reads or renders."""
    AREA_PATH = "System.AreaPath"
    ASSIGNED_TO = "System.AssignedTo"
    TITLE = "System.Title"
    STATE = "System.State"
    WORK_ITEM_TYPE = "System.WorkItemType"
    ID = "System.Id"
    TAGS = "System.Tags"
    TEAM_PROJECT = "System.TeamProject"
    CHANGED_DATE = "System.ChangedDate"
    CREATED_DATE = "System.CreatedDate"
    CHANGED_BY = "System.ChangedBy"
    CREATED_BY = "System.CreatedBy"
    ITERATION_PATH = "System.IterationPath"
    REV = "System.Rev"
    REASON = "System.Reason"
    HISTORY = "System.History"
    DESCRIPTION = "System.Description"
    WATERMARK = "System.Watermark"
    AUTHORIZED_DATE = "System.AuthorizedDate"
    REVISED_DATE = "System.RevisedDate"
    ATTACHED_FILE_COUNT = "System.AttachedFileCount"
    EXTERNAL_LINK_COUNT = "System.ExternalLinkCount"
    HYPERLINK_COUNT = "System.HyperLinkCount"
    RELATED_LINK_COUNT = "System.RelatedLinkCount"
    BOARD_COLUMN = "System.BoardColumn"
    BOARD_COLUMN_DONE = "System.BoardColumnDone"
    BOARD_LANE = "System.BoardLane"


UNASSIGNED = "Unassigned"

# Multi-value filter fields, evaluated in this order
MULTI_VALUE_FILTER_FIELDS: tuple[str, ...] = (
    CoreFieldRefNames.STATE,
    CoreFieldRefNames.ASSIGNED_TO,
    CoreFieldRefNames.AREA_PATH,
    CoreFieldRefNames.WORK_ITEM_TYPE,
)


# ─── Related work item query defaults ────────────────────────────

DEFAULT_FIELDS_TO_RETRIEVE: tuple[str, ...] = (
    CoreFieldRefNames.ID,
    CoreFieldRefNames.TITLE,
    CoreFieldRefNames.STATE,
    CoreFieldRefNames.CREATED_DATE,
    CoreFieldRefNames.CHANGED_DATE,
    CoreFieldRefNames.ASSIGNED_TO,
    CoreFieldRefNames.AREA_PATH,
    CoreFieldRefNames.WORK_ITEM_TYPE,
)

DEFAULT_FIELDS_TO_SEEK: tuple[str, ...] = (
    CoreFieldRefNames.WORK_ITEM_TYPE,
    CoreFieldRefNames.STATE,
    CoreFieldRefNames.AREA_PATH,
)

DEFAULT_SORT_BY_FIELD = CoreFieldRefNames.CHANGED_DATE

# Seed fields that never produce a predicate clause (case-sensitive match)
EXCLUDED_FIELDS: frozenset[str] = frozenset({
    CoreFieldRefNames.ID,
    CoreFieldRefNames.REV,
    CoreFieldRefNames.WATERMARK,
    CoreFieldRefNames.HISTORY,
    CoreFieldRefNames.DESCRIPTION,
    CoreFieldRefNames.CHANGED_DATE,
    CoreFieldRefNames.CREATED_DATE,
    CoreFieldRefNames.AUTHORIZED_DATE,
    CoreFieldRefNames.REVISED_DATE,
    CoreFieldRefNames.ATTACHED_FILE_COUNT,
    CoreFieldRefNames.EXTERNAL_LINK_COUNT,
    CoreFieldRefNames.HYPERLINK_COUNT,
    CoreFieldRefNames.RELATED_LINK_COUNT,
    CoreFieldRefNames.BOARD_COLUMN,
    CoreFieldRefNames.BOARD_COLUMN_DONE,
    CoreFieldRefNames.BOARD_LANE,
    CoreFieldRefNames.TEAM_PROJECT,
})


# ─── Enums ───────────────────────────────────────────────────────

class FieldType(str, Enum):
    """Comparison type of a sortable field."""
    STRING = "string"
    DATE = "date"
    BOOLEAN = "boolean"
    NUMBER = "number"


class ChecklistItemState(str, Enum):
    """Checklist item states — stored by value in checklist documents."""
    NEW = "New"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    NOT_APPLICABLE = "N/A"
