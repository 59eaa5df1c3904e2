"""Domain Types - enums and value types shared across schemas, models and filters.

Invariants:
    - Roles and expense statuses are closed sets encoded as Enums
    - DateWindow is half-open: start <= date < end

Design Decisions:
    - str Enums: serialize to JSON and BSON without custom encoders
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    """Acceptable roles for users and project members."""
    ADMIN = "ADMIN"
    SUPERVISOR = "SUPERVISOR"
    STAFF = "STAFF"
    USER = "USER"


class ExpenseStatus(str, Enum):
    """Expense lifecycle states."""
    PENDING = "pending"
    CONFIRMED = "confirmed"


# ─── Value Types ─────────────────────────────────────────────────

DATE_LAYOUT = "%Y-%m-%d"


@dataclass(frozen=True)
class DateWindow:
    """Half-open date interval used by expense listing and project details."""
    start: datetime
    end: datetime
