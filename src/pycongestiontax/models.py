"""Public data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum


class VehicleType(str, Enum):
    CAR = "car"
    MOTORCYCLE = "motorcycle"
    BUS = "bus"
    EMERGENCY = "emergency"
    DIPLOMAT = "diplomat"
    FOREIGN = "foreign"
    MILITARY = "military"


@dataclass(frozen=True, slots=True)
class Vehicle:
    vehicle_type: VehicleType | None = None


@dataclass(frozen=True, slots=True)
class FeeBracket:
    """Half-open ``[start, end)`` time-of-day interval charged at ``fee``."""

    start: time
    end: time
    fee: int

    def contains(self, value: time) -> bool:
        return self.start <= value < self.end


@dataclass(frozen=True, slots=True)
class HolidayCalendar:
    """Static toll-free dates on top of weekends."""

    days: frozenset[tuple[int, int, int]] = frozenset()
    months: frozenset[tuple[int, int]] = frozenset()

    def is_holiday(self, value: date) -> bool:
        if (value.year, value.month) in self.months:
            return True
        return (value.year, value.month, value.day) in self.days


@dataclass(frozen=True, slots=True)
class BillingGroup:
    passages: tuple[datetime, ...]

    @property
    def anchor(self) -> datetime:
        return self.passages[0]


@dataclass(frozen=True, slots=True)
class GroupCharge:
    group: BillingGroup
    fee: int


@dataclass(frozen=True, slots=True)
class TaxResult:
    total: int
    groups: tuple[GroupCharge, ...]
    capped: bool
