"""Exemption checks and the per-passage toll fee."""

from __future__ import annotations

from collections.abc import Sequence, Set
from datetime import datetime

from .const import DEFAULT_CALENDAR, FEE_SCHEDULE, TOLL_FREE_VEHICLE_TYPES
from .holidays import is_toll_free_date
from .models import FeeBracket, HolidayCalendar, Vehicle, VehicleType
from .schedule import fee_for


def is_toll_free_vehicle(
    vehicle: Vehicle | None,
    toll_free_types: Set[VehicleType] = TOLL_FREE_VEHICLE_TYPES,
) -> bool:
    """A missing vehicle is exempt; an unspecified category is not."""
    if vehicle is None:
        return True
    return vehicle.vehicle_type in toll_free_types


def is_exempt(
    passage: datetime,
    vehicle: Vehicle | None,
    *,
    calendar: HolidayCalendar = DEFAULT_CALENDAR,
    toll_free_types: Set[VehicleType] = TOLL_FREE_VEHICLE_TYPES,
) -> bool:
    return is_toll_free_date(passage, calendar) or is_toll_free_vehicle(vehicle, toll_free_types)


def toll_fee(
    passage: datetime,
    vehicle: Vehicle | None,
    *,
    schedule: Sequence[FeeBracket] = FEE_SCHEDULE,
    calendar: HolidayCalendar = DEFAULT_CALENDAR,
    toll_free_types: Set[VehicleType] = TOLL_FREE_VEHICLE_TYPES,
) -> int:
    if is_exempt(passage, vehicle, calendar=calendar, toll_free_types=toll_free_types):
        return 0
    return fee_for(passage, schedule)
