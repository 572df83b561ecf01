"""
Date normalisation for query filters and datetime parsing for API records
"""

from datetime import date, datetime
from typing import Any, Optional

from .errors import ValidationError


def check_date(value: Any) -> Optional[str]:
    """
    Normalise a date filter to the wire format expected by the API

    Args:
        value: date, datetime, ISO formatted string or None

    Returns:
        String in YYYY-MM-DD format, or None when no value was given

    Raises:
        ValidationError: If the value cannot be interpreted as a date
    """
    if value is None:
        return None

    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime):
        return value.date().isoformat()

    if isinstance(value, date):
        return value.isoformat()

    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text).isoformat()
        except ValueError:
            pass
        try:
            return _parse_iso_datetime(text).date().isoformat()
        except ValueError:
            raise ValidationError(f"Invalid date: {value!r}, expected format YYYY-MM-DD")

    raise ValidationError(f"Invalid date type: {type(value).__name__}")


def check_datetime(value: Any) -> Optional[datetime]:
    """
    Parse a datetime returned by the API

    Raises:
        ValueError: If the value is not an ISO formatted datetime
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected an ISO datetime string, got {type(value).__name__}")
    return _parse_iso_datetime(value)


def _parse_iso_datetime(text: str) -> datetime:
    # API timestamps use a trailing Z for UTC
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)
