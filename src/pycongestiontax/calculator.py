"""Daily congestion tax evaluation."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence, Set
from datetime import datetime

from .const import (
    DAILY_MAXIMUM,
    DEFAULT_CALENDAR,
    FEE_SCHEDULE,
    SINGLE_CHARGE_WINDOW_MINUTES,
    TOLL_FREE_VEHICLE_TYPES,
)
from .exceptions import ValidationError
from .exemptions import toll_fee
from .grouping import group_passages
from .models import (
    BillingGroup,
    FeeBracket,
    GroupCharge,
    HolidayCalendar,
    TaxResult,
    Vehicle,
    VehicleType,
)
from .schedule import validate_schedule
from .util import (
    ensure_single_day,
    normalize_passages,
    normalize_vehicle,
    normalize_vehicle_types,
    validate_positive_int,
)

_LOGGER = logging.getLogger(__name__)


def _category(vehicle: Vehicle | None) -> str | None:
    if vehicle is None or vehicle.vehicle_type is None:
        return None
    return vehicle.vehicle_type.value


class CongestionTaxCalculator:
    """Computes the capped congestion tax for one vehicle and one day."""

    def __init__(
        self,
        *,
        fee_schedule: Sequence[FeeBracket] = FEE_SCHEDULE,
        holiday_calendar: HolidayCalendar = DEFAULT_CALENDAR,
        toll_free_vehicle_types: Iterable[VehicleType | str] = TOLL_FREE_VEHICLE_TYPES,
        daily_maximum: int = DAILY_MAXIMUM,
        window_minutes: int = SINGLE_CHARGE_WINDOW_MINUTES,
    ) -> None:
        if not isinstance(holiday_calendar, HolidayCalendar):
            raise ValidationError("holiday_calendar must be a HolidayCalendar.")
        self._fee_schedule = validate_schedule(fee_schedule)
        self._holiday_calendar = holiday_calendar
        self._toll_free_vehicle_types = normalize_vehicle_types(toll_free_vehicle_types)
        self._daily_maximum = validate_positive_int(daily_maximum, "daily_maximum")
        self._window_minutes = validate_positive_int(window_minutes, "window_minutes")

    @property
    def fee_schedule(self) -> tuple[FeeBracket, ...]:
        return self._fee_schedule

    @property
    def holiday_calendar(self) -> HolidayCalendar:
        return self._holiday_calendar

    @property
    def toll_free_vehicle_types(self) -> Set[VehicleType]:
        return self._toll_free_vehicle_types

    @property
    def daily_maximum(self) -> int:
        return self._daily_maximum

    @property
    def window_minutes(self) -> int:
        return self._window_minutes

    def get_toll_fee(
        self,
        passage: datetime | str,
        vehicle: Vehicle | VehicleType | str | None,
    ) -> int:
        """Return the fee for a single passage, ignoring grouping and the cap."""
        return self._toll_fee(normalize_passages([passage])[0], normalize_vehicle(vehicle))

    def get_tax(
        self,
        vehicle: Vehicle | VehicleType | str | None,
        passages: Iterable[datetime | str] | None,
    ) -> int:
        """Return the total congestion tax for one day of passages."""
        return self.evaluate(vehicle, passages).total

    def evaluate(
        self,
        vehicle: Vehicle | VehicleType | str | None,
        passages: Iterable[datetime | str] | None,
    ) -> TaxResult:
        """Return the total together with the charge for every billing group.

        Raises CrossDayError when the passages are not all on one date.
        """
        normalized_vehicle = normalize_vehicle(vehicle)
        normalized = normalize_passages(passages)
        if not normalized:
            return TaxResult(total=0, groups=(), capped=False)
        ensure_single_day(normalized)
        _LOGGER.debug(
            "Evaluation started for %s with %d passages",
            _category(normalized_vehicle),
            len(normalized),
        )

        groups = group_passages(normalized, self._window_minutes)
        _LOGGER.debug("Passages grouped into %d billing groups", len(groups))
        charges: list[GroupCharge] = []
        total = 0
        for group in groups:
            fee = self._group_fee(group, normalized_vehicle)
            charges.append(GroupCharge(group=group, fee=fee))
            total += fee

        capped = total >= self._daily_maximum
        if capped:
            _LOGGER.debug("Daily maximum %d reached at %d", self._daily_maximum, total)
        total = min(total, self._daily_maximum)
        _LOGGER.debug("Evaluation completed with total %d", total)
        return TaxResult(total=total, groups=tuple(charges), capped=capped)

    def _group_fee(self, group: BillingGroup, vehicle: Vehicle | None) -> int:
        return max(self._toll_fee(passage, vehicle) for passage in group.passages)

    def _toll_fee(self, passage: datetime, vehicle: Vehicle | None) -> int:
        return toll_fee(
            passage,
            vehicle,
            schedule=self._fee_schedule,
            calendar=self._holiday_calendar,
            toll_free_types=self._toll_free_vehicle_types,
        )


_DEFAULT_CALCULATOR = CongestionTaxCalculator()


def daily_tax(
    vehicle: Vehicle | VehicleType | str | None,
    passages: Iterable[datetime | str] | None,
) -> int:
    """Return the daily tax using the canonical tariff."""
    return _DEFAULT_CALCULATOR.get_tax(vehicle, passages)
