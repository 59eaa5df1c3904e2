"""Filter Builders - translate optional query parameters into MongoDB filter documents.

Invariants:
    - Empty parameter mapping -> empty filter (matches every document)
    - Unrecognized keys are ignored; recognized keys are parsed strictly
    - Malformed booleans or dates raise InvalidArgumentError, never a silently dropped key
    - Date ranges need both `start` and `end` (zero-padded YYYY-MM-DD); half-open: start <= date < end
    - start == end is a valid, empty window; end before start is rejected

Design Decisions:
    - One builder per entity over a generic key map: each entity owns its vocabulary
    - Boolean vocabulary: 1/t/T/true/TRUE/True and 0/f/F/false/FALSE/False, nothing else
    - Month default lives in resolve_details_window, not in the generic date parser
"""

from collections.abc import Mapping
from datetime import datetime, timezone

from bson import ObjectId

from expense_tracker.core.domain_types import DATE_LAYOUT, DateWindow
from expense_tracker.core.errors import InvalidArgumentError

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


# ─── Scalar parsers ──────────────────────────────────────────────

def parse_bool(value: str, field: str) -> bool:
    """Parse a query-string boolean or raise InvalidArgumentError."""
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise InvalidArgumentError(
        f"invalid boolean value {value!r} for '{field}'", field,
    )


def parse_date(value: str, field: str) -> datetime:
    """Parse YYYY-MM-DD into a UTC midnight datetime."""
    try:
        parsed = datetime.strptime(value, DATE_LAYOUT)
    except (TypeError, ValueError):
        parsed = None
    if parsed is None or parsed.strftime(DATE_LAYOUT) != value:
        raise InvalidArgumentError(
            f"invalid date {value!r} for '{field}', expected YYYY-MM-DD", field,
        )
    return parsed.replace(tzinfo=timezone.utc)


def parse_object_id(value: str, field: str = "id") -> ObjectId:
    """Parse a 24-char hex string into an ObjectId."""
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise InvalidArgumentError(f"invalid id {value!r} for '{field}'", field)
    return ObjectId(value)


# ─── Date windows ────────────────────────────────────────────────

def current_month_window(now: datetime) -> DateWindow:
    """Calendar month containing `now`: first instant inclusive, next month exclusive."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    if start.month == 12:
        end = start.replace(year=start.year + 1, month=1)
    else:
        end = start.replace(month=start.month + 1)
    return DateWindow(start=start, end=end)


def parse_date_window(params: Mapping[str, str]) -> DateWindow | None:
    """Both `start` and `end`, or neither (None). One alone is an error."""
    has_start = "start" in params
    has_end = "end" in params
    if not has_start and not has_end:
        return None
    if not has_start:
        raise InvalidArgumentError("Specify the start period", "start")
    if not has_end:
        raise InvalidArgumentError("Specify the end period", "end")
    start = parse_date(params["start"], "start")
    end = parse_date(params["end"], "end")
    if end < start:
        raise InvalidArgumentError("end must not be before start", "end")
    return DateWindow(start=start, end=end)


def resolve_details_window(params: Mapping[str, str], now: datetime) -> DateWindow:
    """Window for project details; defaults to the current calendar month."""
    return parse_date_window(params) or current_month_window(now)


def resolve_active_flag(params: Mapping[str, str], default: bool = True) -> bool:
    if "is_active" not in params:
        return default
    return parse_bool(params["is_active"], "is_active")


def date_range_filter(window: DateWindow) -> dict:
    return {"date": {"$gte": window.start, "$lt": window.end}}


# ─── Entity builders ─────────────────────────────────────────────

def build_user_filter(params: Mapping[str, str]) -> dict:
    """Users: is_active (bool), role (string)."""
    if not params:
        return {}
    f: dict = {}
    if "is_active" in params:
        f["is_active"] = parse_bool(params["is_active"], "is_active")
    if "role" in params:
        f["role"] = params["role"]
    return f


def build_category_filter(params: Mapping[str, str]) -> dict:
    """Categories: name."""
    if not params:
        return {}
    f: dict = {}
    if "name" in params:
        f["name"] = params["name"]
    return f


def build_project_filter(params: Mapping[str, str]) -> dict:
    """Projects: name or title (both match the title field), is_active (bool)."""
    if not params:
        return {}
    f: dict = {}
    if "title" in params:
        f["title"] = params["title"]
    elif "name" in params:
        f["title"] = params["name"]
    if "is_active" in params:
        f["is_active"] = parse_bool(params["is_active"], "is_active")
    return f


def build_project_member_filter(project_id: ObjectId, params: Mapping[str, str]) -> dict:
    """Members are always scoped to their project; optional is_active (bool)."""
    f: dict = {"project_id": project_id}
    if "is_active" in params:
        f["is_active"] = parse_bool(params["is_active"], "is_active")
    return f


def build_expense_filter(params: Mapping[str, str]) -> dict:
    """Expenses: start + end date range, or everything."""
    if not params:
        return {}
    window = parse_date_window(params)
    if window is None:
        return {}
    return date_range_filter(window)
