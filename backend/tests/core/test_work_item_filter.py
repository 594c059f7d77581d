"""Work Item Filter — pure tests for work_item_matches_filter.

Tests cover:
    - No FilterSpec / empty FilterSpec matches everything
    - Keyword is a case-insensitive title substring
    - Multi-value clauses match case-insensitively, empty lists impose nothing
    - Missing assigned-to compares as "Unassigned"
    - Clauses are conjunctive
"""

from witquery.core.domain_types import CoreFieldRefNames
from witquery.core.work_item import FilterSpec
from witquery.core.work_item_filter import work_item_matches_filter

from tests.core.builders import bug, make_work_item


# ─── pass-through ────────────────────────────────────────────────

def test_no_filter_matches():
    """No FilterSpec is a pass-through filter."""
    assert work_item_matches_filter(bug(), None) is True


def test_empty_filter_matches():
    """A FilterSpec with no clauses matches."""
    assert work_item_matches_filter(bug(), FilterSpec()) is True


def test_empty_filter_matches_item_without_fields():
    """An item with no fields still passes an empty filter."""
    assert work_item_matches_filter(make_work_item(9), FilterSpec()) is True


# ─── keyword ─────────────────────────────────────────────────────

def test_keyword_matches_title_case_insensitively():
    """Keyword matches any casing of a title substring."""
    assert work_item_matches_filter(bug(), FilterSpec(keyword="bug")) is True
    assert work_item_matches_filter(bug(), FilterSpec(keyword="THE BUG")) is True


def test_keyword_not_in_title_fails():
    """A keyword absent from the title rejects the item."""
    assert work_item_matches_filter(bug(), FilterSpec(keyword="crash")) is False


def test_empty_keyword_passes():
    """An empty keyword imposes nothing."""
    assert work_item_matches_filter(bug(), FilterSpec(keyword="")) is True


def test_keyword_fails_when_title_missing():
    """No title means a non-empty keyword cannot match."""
    item = make_work_item(2, state="Active")
    assert work_item_matches_filter(item, FilterSpec(keyword="bug")) is False


# ─── multi-value clauses ─────────────────────────────────────────

def test_state_matches_any_value_case_insensitively():
    """State matches any listed value, ignoring case."""
    spec = FilterSpec(values={CoreFieldRefNames.STATE: ["closed", "ACTIVE"]})
    assert work_item_matches_filter(bug(), spec) is True


def test_state_not_in_values_fails():
    """A state outside the listed values rejects the item."""
    spec = FilterSpec(values={CoreFieldRefNames.STATE: ["Closed"]})
    assert work_item_matches_filter(bug(), spec) is False


def test_empty_value_list_imposes_nothing():
    """Empty value lists are not constraints."""
    spec = FilterSpec(values={
        CoreFieldRefNames.STATE: [],
        CoreFieldRefNames.WORK_ITEM_TYPE: [],
    })
    assert work_item_matches_filter(bug(), spec) is True


def test_area_path_and_type_clauses():
    """Area path and work item type clauses apply together."""
    spec = FilterSpec(values={
        CoreFieldRefNames.AREA_PATH: ["proj\\web"],
        CoreFieldRefNames.WORK_ITEM_TYPE: ["Task"],
    })
    assert work_item_matches_filter(bug(), spec) is False
    spec.values[CoreFieldRefNames.WORK_ITEM_TYPE] = ["bug"]
    assert work_item_matches_filter(bug(), spec) is True


def test_missing_assigned_to_matches_unassigned():
    """Missing assigned-to compares as Unassigned."""
    item = bug(assigned_to=None)
    spec = FilterSpec(values={CoreFieldRefNames.ASSIGNED_TO: ["Unassigned"]})
    assert work_item_matches_filter(item, spec) is True


def test_empty_assigned_to_matches_unassigned_case_insensitively():
    """Empty assigned-to matches "unassigned" in any case."""
    item = make_work_item(3, **{CoreFieldRefNames.ASSIGNED_TO: ""})
    spec = FilterSpec(values={CoreFieldRefNames.ASSIGNED_TO: ["unassigned"]})
    assert work_item_matches_filter(item, spec) is True


def test_assigned_item_does_not_match_unassigned():
    """An assigned item fails an Unassigned-only clause."""
    spec = FilterSpec(values={CoreFieldRefNames.ASSIGNED_TO: ["Unassigned"]})
    assert work_item_matches_filter(bug(), spec) is False


def test_missing_state_fails_non_empty_state_clause():
    """Missing state gets no substitute and fails."""
    item = bug(state=None)
    spec = FilterSpec(values={CoreFieldRefNames.STATE: ["Active"]})
    assert work_item_matches_filter(item, spec) is False


def test_unknown_field_clause_is_ignored():
    """Clauses on non-core fields are not evaluated."""
    spec = FilterSpec(values={"Custom.Severity": ["1 - Critical"]})
    assert work_item_matches_filter(bug(), spec) is True


# ─── conjunction ─────────────────────────────────────────────────

def test_all_clauses_must_pass():
    """Keyword and value clauses are conjunctive."""
    spec = FilterSpec(
        keyword="bug",
        values={
            CoreFieldRefNames.STATE: ["Active"],
            CoreFieldRefNames.ASSIGNED_TO: ["jordan lee"],
        },
    )
    assert work_item_matches_filter(bug(), spec) is True
    spec.values[CoreFieldRefNames.ASSIGNED_TO] = ["Sam Ortiz"]
    assert work_item_matches_filter(bug(), spec) is False


def test_filter_does_not_mutate_work_item():
    """Unassigned substitution never writes to the item."""
    item = bug(assigned_to=None)
    spec = FilterSpec(values={CoreFieldRefNames.ASSIGNED_TO: ["Unassigned"]})
    work_item_matches_filter(item, spec)
    assert CoreFieldRefNames.ASSIGNED_TO not in item.fields
