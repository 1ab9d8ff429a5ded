"""Library exceptions."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date


class CongestionTaxError(Exception):
    """Base exception for the library."""

    error_type = "unknown"
    default_code: str | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: str | None = None,
        detail: str | None = None,
        user_message: str | None = None,
    ) -> None:
        self.detail = detail if detail is not None else message
        super().__init__(message if message is not None else self.detail or "")
        self.error_code = error_code if error_code is not None else self.default_code
        self.user_message = user_message


class ValidationError(CongestionTaxError):
    """Raised when inputs fail validation."""

    error_type = "validation"
    default_code = "validation_error"


class CrossDayError(ValidationError):
    """Raised when passages for one evaluation span more than one date."""

    default_code = "cross_day"

    def __init__(self, dates: Iterable[date], **kwargs: str) -> None:
        self.dates = tuple(sorted(set(dates)))
        rendered = ", ".join(day.isoformat() for day in self.dates)
        kwargs.setdefault("user_message", "All passages must be on the same day.")
        super().__init__(f"Passages span more than one date: {rendered}.", **kwargs)


class ScheduleError(CongestionTaxError):
    """Raised when a fee schedule is misconfigured."""

    error_type = "configuration"
    default_code = "schedule_error"
