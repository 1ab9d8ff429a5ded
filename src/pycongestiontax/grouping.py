"""Grouping of passages into single-charge billing groups."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta

from .const import SINGLE_CHARGE_WINDOW_MINUTES
from .models import BillingGroup
from .util import validate_positive_int


def group_passages(
    passages: Iterable[datetime],
    window_minutes: int = SINGLE_CHARGE_WINDOW_MINUTES,
) -> list[BillingGroup]:
    """Partition passages into groups anchored at their earliest member.

    A passage joins the current group when it is strictly less than
    ``window_minutes`` after the group's anchor; otherwise it anchors a new
    group. Anchors never move once set.
    """
    window = timedelta(minutes=validate_positive_int(window_minutes, "window_minutes"))
    groups: list[BillingGroup] = []
    current: list[datetime] = []
    for passage in sorted(passages):
        if current and passage - current[0] >= window:
            groups.append(BillingGroup(tuple(current)))
            current = []
        current.append(passage)
    if current:
        groups.append(BillingGroup(tuple(current)))
    return groups
