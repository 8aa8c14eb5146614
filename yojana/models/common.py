"""
Shared enumerations and lenient coercion helpers for scheme and user models

The helpers never raise: values that cannot be interpreted come back as
None, which the matcher treats as "does not match".
"""
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional, Union


class Gender(str, Enum):
    """Closed set of gender categories"""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


def parse_gender(value: Any) -> Optional[Gender]:
    """Normalize a gender value (trimmed, case-insensitive) to the enum"""
    if isinstance(value, Gender):
        return value
    if not isinstance(value, str):
        return None
    try:
        return Gender(value.strip().lower())
    except ValueError:
        return None


def to_int_or_none(value: Any) -> Optional[int]:
    """Coerce ints, integral floats and numeric strings; anything else is None"""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def to_number_or_none(value: Any) -> Optional[Union[int, float]]:
    """Like to_int_or_none but keeps fractional values"""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
        return int(number) if number.is_integer() else number
    return None


def to_text_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def parse_date(value: Any) -> Optional[date]:
    """
    Interpret a date of birth.

    Accepts date, datetime and ISO-8601 strings (a trailing "Z" is allowed).
    Returns None for anything missing or unparseable.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None
