"""Shared utilities for validation and normalization."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime

from .exceptions import CrossDayError, ValidationError
from .models import Vehicle, VehicleType


def parse_timestamp(value: str) -> datetime:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Timestamp must be a non-empty string.")
    raw = value.strip()
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError as exc:
        raise ValidationError(f"Timestamp {raw!r} is not a valid ISO 8601 value.") from exc
    if parsed.tzinfo is not None:
        raise ValidationError("Timestamp must be naive local time.")
    return parsed


def normalize_passage(value: datetime | str) -> datetime:
    if isinstance(value, str):
        return parse_timestamp(value)
    if not isinstance(value, datetime):
        raise ValidationError("Passage must be a datetime or an ISO 8601 string.")
    if value.tzinfo is not None:
        raise ValidationError("Timestamp must be naive local time.")
    return value


def normalize_passages(values: Iterable[datetime | str] | None) -> list[datetime]:
    if values is None:
        return []
    if isinstance(values, (str, datetime)):
        raise ValidationError("Passages must be a sequence of timestamps.")
    return [normalize_passage(value) for value in values]


def parse_vehicle_type(token: str) -> VehicleType:
    if not isinstance(token, str):
        raise ValidationError("Vehicle type must be a string.")
    normalized = token.strip().lower()
    if normalized == "motorbike":
        normalized = VehicleType.MOTORCYCLE.value
    try:
        return VehicleType(normalized)
    except ValueError as exc:
        raise ValidationError(f"Unknown vehicle type {token!r}.") from exc


def normalize_vehicle(value: Vehicle | VehicleType | str | None) -> Vehicle | None:
    if value is None:
        return None
    if isinstance(value, Vehicle):
        if value.vehicle_type is None or isinstance(value.vehicle_type, VehicleType):
            return value
        return Vehicle(parse_vehicle_type(value.vehicle_type))
    if isinstance(value, VehicleType):
        return Vehicle(value)
    return Vehicle(parse_vehicle_type(value))


def normalize_vehicle_types(values: Iterable[VehicleType | str]) -> frozenset[VehicleType]:
    if values is None or isinstance(values, str):
        raise ValidationError("Vehicle types must be a collection of vehicle types.")
    try:
        members = list(values)
    except TypeError as exc:
        raise ValidationError("Vehicle types must be a collection of vehicle types.") from exc
    return frozenset(
        member if isinstance(member, VehicleType) else parse_vehicle_type(member)
        for member in members
    )


def ensure_single_day(passages: Iterable[datetime]) -> date | None:
    days = {passage.date() for passage in passages}
    if len(days) > 1:
        raise CrossDayError(days)
    return next(iter(days), None)


def validate_positive_int(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f"{name} must be a positive integer.")
    return value
