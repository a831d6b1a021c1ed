from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily attendance status stored in the database."""

    PRESENT = "present"
    ABSENT = "absent"
    HALF_DAY = "half-day"


class PeriodType(str, Enum):
    """Label of a wage calculation period (does not constrain the dates)."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class PaymentMethod(str, Enum):
    CASH = "cash"
    BANK = "bank"
    CHEQUE = "cheque"
