"""
Custom GraphQL scalars and value conversion helpers
"""

import math
import re
import uuid
from typing import Any, NewType

import strawberry
from strawberry.types.scalar import ScalarDefinition

# Validated id text; the caller's spelling is kept until the store converts it
UUID = NewType("UUID", str)

# Canonical RFC 4122 textual form, versions 1-5
UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def parse_uuid(value: Any) -> UUID:
    """Validate client input, rejecting anything but the canonical UUID form."""
    if not isinstance(value, str) or not UUID_PATTERN.fullmatch(value):
        raise ValueError(f"Invalid UUID: {value!r}")
    return UUID(value)


def serialize_uuid(value: Any) -> str:
    if isinstance(value, uuid.UUID):
        return str(value)
    return parse_uuid(value)


def to_uuid(value: uuid.UUID | str) -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    return uuid.UUID(parse_uuid(value))


UUID_SCALAR: ScalarDefinition = strawberry.scalar(
    name="UUID",
    description="UUID in canonical 8-4-4-4-12 hexadecimal form",
    serialize=serialize_uuid,
    parse_value=parse_uuid,
)

SCALAR_MAP = {UUID: UUID_SCALAR}


def format_number(value: float | int | None) -> str | None:
    """Render a stored number as text; integral floats drop the trailing '.0'."""
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_flag(value: bool) -> str:
    return "true" if value else "false"


def parse_number(value: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Expected a number, got {value!r}") from None
    if not math.isfinite(number):
        raise ValueError(f"Expected a finite number, got {value!r}")
    return number


_TRUE_VALUES = {"true", "1", "yes"}
_FALSE_VALUES = {"false", "0", "no"}


def parse_flag(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Expected a boolean, got {value!r}")


def parse_year(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Expected an integer year, got {value!r}") from None
