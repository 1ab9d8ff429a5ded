"""pyCongestionTax package."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .calculator import CongestionTaxCalculator, daily_tax
from .exceptions import CongestionTaxError, CrossDayError, ScheduleError, ValidationError
from .models import (
    BillingGroup,
    FeeBracket,
    GroupCharge,
    HolidayCalendar,
    TaxResult,
    Vehicle,
    VehicleType,
)

try:
    __version__ = version("pycongestiontax")
except PackageNotFoundError:  # pragma: no cover - not installed
    __version__ = "0.0.0"

__all__ = [
    "BillingGroup",
    "CongestionTaxCalculator",
    "CongestionTaxError",
    "CrossDayError",
    "FeeBracket",
    "GroupCharge",
    "HolidayCalendar",
    "ScheduleError",
    "TaxResult",
    "ValidationError",
    "Vehicle",
    "VehicleType",
    "__version__",
    "daily_tax",
]
