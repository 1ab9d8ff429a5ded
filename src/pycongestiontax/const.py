"""Canonical tariff constants."""

from datetime import time

from .models import FeeBracket, HolidayCalendar, VehicleType

DAILY_MAXIMUM = 60
SINGLE_CHARGE_WINDOW_MINUTES = 60

TOLL_FREE_VEHICLE_TYPES = frozenset(
    {
        VehicleType.MOTORCYCLE,
        VehicleType.BUS,
        VehicleType.EMERGENCY,
        VehicleType.DIPLOMAT,
        VehicleType.FOREIGN,
        VehicleType.MILITARY,
    }
)

FEE_SCHEDULE = (
    FeeBracket(time(6, 0), time(6, 30), 8),
    FeeBracket(time(6, 30), time(7, 0), 13),
    FeeBracket(time(7, 0), time(8, 0), 18),
    FeeBracket(time(8, 0), time(8, 30), 13),
    FeeBracket(time(8, 30), time(15, 0), 8),
    FeeBracket(time(15, 0), time(15, 30), 13),
    FeeBracket(time(15, 30), time(17, 0), 18),
    FeeBracket(time(17, 0), time(18, 0), 13),
    FeeBracket(time(18, 0), time(18, 30), 8),
)

# Public holidays and the days before them, 2013. July is toll free as a whole.
HOLIDAYS_2013 = HolidayCalendar(
    days=frozenset(
        {
            (2013, 1, 1),
            (2013, 3, 28),
            (2013, 3, 29),
            (2013, 4, 1),
            (2013, 4, 30),
            (2013, 5, 1),
            (2013, 5, 8),
            (2013, 5, 9),
            (2013, 6, 5),
            (2013, 6, 6),
            (2013, 6, 21),
            (2013, 11, 1),
            (2013, 12, 24),
            (2013, 12, 25),
            (2013, 12, 26),
            (2013, 12, 31),
        }
    ),
    months=frozenset({(2013, 7)}),
)

DEFAULT_CALENDAR = HOLIDAYS_2013
