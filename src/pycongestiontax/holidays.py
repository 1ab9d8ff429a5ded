"""Toll-free date lookup."""

from __future__ import annotations

from datetime import date, datetime

from .const import DEFAULT_CALENDAR
from .models import HolidayCalendar

SATURDAY = 5
SUNDAY = 6


def is_weekend(value: date) -> bool:
    return value.weekday() in (SATURDAY, SUNDAY)


def is_toll_free_date(value: date | datetime, calendar: HolidayCalendar = DEFAULT_CALENDAR) -> bool:
    day = value.date() if isinstance(value, datetime) else value
    return is_weekend(day) or calendar.is_holiday(day)
