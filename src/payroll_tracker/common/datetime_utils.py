from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta

from ..core.enums import PeriodType


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def default_period(period_type: PeriodType, today: date) -> tuple[date, date]:
    """Suggested [start, end] for a period type around ``today``.

    Weeks run Sunday to Saturday; months cover the whole calendar month.
    """
    if period_type == PeriodType.DAILY:
        return today, today
    if period_type == PeriodType.WEEKLY:
        # date.weekday(): Monday=0 .. Sunday=6
        start = today - timedelta(days=(today.weekday() + 1) % 7)
        return start, start + timedelta(days=6)
    last_day = calendar.monthrange(today.year, today.month)[1]
    return today.replace(day=1), today.replace(day=last_day)


def month_to_date(today: date) -> tuple[date, date]:
    return today.replace(day=1), today


def format_display_date(value: date) -> str:
    """Human readable date, e.g. ``Jan 5, 2025``."""
    return f"{value.strftime('%b')} {value.day}, {value.year}"
