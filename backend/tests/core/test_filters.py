"""Filter Builders - query parameters to MongoDB filter documents.

Tests:
    - Empty parameters -> empty filter; unknown keys ignored
    - Boolean vocabulary accepted in every casing form, anything else rejected
    - Date ranges are half-open and require both ends, in order
    - Month default covers the calendar month of `now`, including December rollover
"""

from datetime import datetime, timezone

import pytest
from bson import ObjectId

from expense_tracker.core.errors import InvalidArgumentError
from expense_tracker.core.filters import (
    build_category_filter, build_expense_filter, build_project_filter,
    build_project_member_filter, build_user_filter, current_month_window,
    parse_bool, parse_date, parse_date_window, parse_object_id, resolve_active_flag,
    resolve_details_window,
)


def utc(year, month, day):
    return datetime(year, month, day, tzinfo=timezone.utc)


# ─── Scalars ─────────────────────────────────────────────────────

@pytest.mark.parametrize("value", ["1", "t", "T", "true", "TRUE", "True"])
def test_parse_bool_true_forms(value):
    assert parse_bool(value, "is_active") is True


@pytest.mark.parametrize("value", ["0", "f", "F", "false", "FALSE", "False"])
def test_parse_bool_false_forms(value):
    assert parse_bool(value, "is_active") is False


@pytest.mark.parametrize("value", ["maybe", "yes", "", "tRuE"])
def test_parse_bool_rejects_other_values(value):
    with pytest.raises(InvalidArgumentError) as exc_info:
        parse_bool(value, "is_active")
    assert exc_info.value.field == "is_active"
    assert exc_info.value.http_status == 400


def test_parse_date_is_utc_midnight():
    assert parse_date("2024-01-15", "date") == utc(2024, 1, 15)


@pytest.mark.parametrize("value", [
    "2024-13-01", "15-01-2024", "2024/01/15", "soon", "2024-1-5", "2024-01-5", " 2024-01-05",
])
def test_parse_date_rejects_bad_layout(value):
    with pytest.raises(InvalidArgumentError, match="expected YYYY-MM-DD"):
        parse_date(value, "start")


def test_parse_object_id():
    oid = ObjectId()
    assert parse_object_id(str(oid)) == oid


def test_parse_object_id_rejects_malformed():
    with pytest.raises(InvalidArgumentError) as exc_info:
        parse_object_id("not-an-id", "category_id")
    assert exc_info.value.field == "category_id"


# ─── Users / Categories / Projects ───────────────────────────────

def test_user_filter_empty_params():
    assert build_user_filter({}) == {}


def test_user_filter_active_and_role():
    assert build_user_filter({"is_active": "false", "role": "ADMIN"}) == {
        "is_active": False, "role": "ADMIN",
    }


def test_user_filter_ignores_unknown_keys():
    assert build_user_filter({"page": "2"}) == {}


def test_user_filter_rejects_bad_boolean():
    with pytest.raises(InvalidArgumentError):
        build_user_filter({"is_active": "maybe"})


def test_category_filter_by_name():
    assert build_category_filter({"name": "Food"}) == {"name": "Food"}
    assert build_category_filter({}) == {}


def test_project_filter_name_searches_title():
    assert build_project_filter({"name": "Office Move"}) == {"title": "Office Move"}


def test_project_filter_title_wins_over_name():
    assert build_project_filter({"title": "A", "name": "B"}) == {"title": "A"}


def test_project_filter_active_flag():
    assert build_project_filter({"is_active": "1"}) == {"is_active": True}


def test_member_filter_always_scoped_to_project():
    pid = ObjectId()
    assert build_project_member_filter(pid, {}) == {"project_id": pid}
    assert build_project_member_filter(pid, {"is_active": "t"}) == {
        "project_id": pid, "is_active": True,
    }


# ─── Expense date ranges ─────────────────────────────────────────

def test_expense_filter_without_range_matches_all():
    assert build_expense_filter({}) == {}
    assert build_expense_filter({"unrelated": "x"}) == {}


def test_expense_filter_half_open_range():
    f = build_expense_filter({"start": "2024-01-01", "end": "2024-02-01"})
    assert f == {"date": {"$gte": utc(2024, 1, 1), "$lt": utc(2024, 2, 1)}}


def test_expense_filter_start_without_end():
    with pytest.raises(InvalidArgumentError, match="Specify the end period"):
        build_expense_filter({"start": "2024-01-01"})


def test_expense_filter_end_without_start():
    with pytest.raises(InvalidArgumentError, match="Specify the start period"):
        build_expense_filter({"end": "2024-01-01"})


def test_expense_filter_rejects_inverted_range():
    with pytest.raises(InvalidArgumentError, match="end must not be before start"):
        build_expense_filter({"start": "2024-01-01", "end": "2023-12-31"})


def test_equal_start_and_end_is_an_empty_window():
    window = parse_date_window({"start": "2024-01-01", "end": "2024-01-01"})
    assert window.start == window.end == utc(2024, 1, 1)


# ─── Details defaults ────────────────────────────────────────────

def test_current_month_window_mid_month():
    window = current_month_window(datetime(2024, 1, 20, 15, 30, tzinfo=timezone.utc))
    assert window.start == utc(2024, 1, 1)
    assert window.end == utc(2024, 2, 1)


def test_current_month_window_december_rolls_year():
    window = current_month_window(datetime(2023, 12, 31, 23, 59, tzinfo=timezone.utc))
    assert window.start == utc(2023, 12, 1)
    assert window.end == utc(2024, 1, 1)


def test_details_window_defaults_to_month_of_now():
    window = resolve_details_window({}, now=utc(2024, 2, 29))
    assert (window.start, window.end) == (utc(2024, 2, 1), utc(2024, 3, 1))


def test_details_window_explicit_range_wins():
    window = resolve_details_window(
        {"start": "2023-05-01", "end": "2023-06-01"}, now=utc(2024, 2, 29),
    )
    assert window.start == utc(2023, 5, 1)


def test_active_flag_defaults_true():
    assert resolve_active_flag({}) is True
    assert resolve_active_flag({"is_active": "false"}) is False
