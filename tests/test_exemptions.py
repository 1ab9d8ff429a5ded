from datetime import date, datetime

import pytest

from pycongestiontax.exemptions import is_exempt, is_toll_free_vehicle, toll_fee
from pycongestiontax.holidays import is_toll_free_date, is_weekend
from pycongestiontax.models import HolidayCalendar, Vehicle, VehicleType

CAR = Vehicle(VehicleType.CAR)
WEEKDAY_RUSH = datetime(2013, 2, 7, 7, 33, 27)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (date(2013, 2, 8), False),
        (date(2013, 2, 9), True),
        (date(2013, 2, 10), True),
        (date(2013, 2, 11), False),
    ],
)
def test_is_weekend(value: date, expected: bool) -> None:
    assert is_weekend(value) is expected


@pytest.mark.parametrize(
    "value",
    [
        date(2013, 1, 1),
        date(2013, 3, 28),
        date(2013, 3, 29),
        date(2013, 4, 1),
        date(2013, 4, 30),
        date(2013, 5, 1),
        date(2013, 5, 8),
        date(2013, 5, 9),
        date(2013, 6, 5),
        date(2013, 6, 6),
        date(2013, 6, 21),
        date(2013, 7, 1),
        date(2013, 7, 31),
        date(2013, 11, 1),
        date(2013, 12, 24),
        date(2013, 12, 25),
        date(2013, 12, 26),
        date(2013, 12, 31),
    ],
)
def test_holidays_2013_are_toll_free(value: date) -> None:
    assert is_toll_free_date(value) is True


def test_holidays_are_scoped_to_their_year() -> None:
    # 2014-12-24 is a Wednesday.
    assert is_toll_free_date(date(2014, 12, 24)) is False
    assert is_toll_free_date(date(2013, 3, 26)) is False


def test_custom_calendar() -> None:
    calendar = HolidayCalendar(days=frozenset({(2014, 12, 24)}), months=frozenset({(2014, 8)}))
    assert is_toll_free_date(datetime(2014, 12, 24, 8, 0), calendar) is True
    assert is_toll_free_date(date(2014, 8, 12), calendar) is True
    assert is_toll_free_date(date(2013, 12, 23), calendar) is False


def test_toll_free_vehicle() -> None:
    assert is_toll_free_vehicle(None) is True
    assert is_toll_free_vehicle(Vehicle(VehicleType.EMERGENCY)) is True
    assert is_toll_free_vehicle(CAR) is False
    assert is_toll_free_vehicle(Vehicle()) is False


def test_is_exempt() -> None:
    assert is_exempt(WEEKDAY_RUSH, CAR) is False
    assert is_exempt(WEEKDAY_RUSH, Vehicle(VehicleType.DIPLOMAT)) is True
    assert is_exempt(datetime(2013, 2, 9, 7, 33), CAR) is True
    assert is_exempt(WEEKDAY_RUSH, CAR, toll_free_types=frozenset({VehicleType.CAR})) is True


def test_toll_fee() -> None:
    assert toll_fee(WEEKDAY_RUSH, CAR) == 18
    assert toll_fee(WEEKDAY_RUSH, None) == 0
    assert toll_fee(datetime(2013, 3, 28, 7, 33), CAR) == 0
    assert toll_fee(datetime(2013, 2, 7, 21, 0), CAR) == 0
