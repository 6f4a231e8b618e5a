"""
Type Conversion Utilities for Domain Model Factories

Strict field readers used by the ``from_dict`` factories in
domain.models. Unlike lenient converters, every reader here raises
DataDecodeError on a missing key or a value of the wrong type: the
documents are part of the build, so a bad value is a packaging defect
and must stop startup rather than be papered over with a default.

Usage:
    ```python
    from domain.converters import require_str, require_int, optional_iso_date

    name = require_str(raw, "name")              # raises if absent or not a str
    launch = optional_iso_date(raw, "launchDate")  # None if absent
    ```
"""

import re
from datetime import date
from typing import Any, Mapping, Optional

from domain.errors import DataDecodeError

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def require_mapping(value: Any, context: str) -> Mapping[str, Any]:
    """Return value if it is a JSON object, else raise DataDecodeError."""
    if not isinstance(value, Mapping):
        raise DataDecodeError(f"{context}: expected an object, got {type(value).__name__}")
    return value


def require_str(raw: Mapping[str, Any], key: str) -> str:
    """
    Read a required string field.

    Args:
        raw: Decoded JSON object
        key: Field name

    Returns:
        The string value

    Raises:
        DataDecodeError: If the key is missing or the value is not a string
    """
    if key not in raw:
        raise DataDecodeError(f"missing required field '{key}'")
    value = raw[key]
    if not isinstance(value, str):
        raise DataDecodeError(f"field '{key}' must be a string, got {type(value).__name__}")
    return value


def require_int(raw: Mapping[str, Any], key: str) -> int:
    """Read a required integer field. Booleans are rejected."""
    if key not in raw:
        raise DataDecodeError(f"missing required field '{key}'")
    value = raw[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise DataDecodeError(f"field '{key}' must be an integer, got {type(value).__name__}")
    return value


def require_list(raw: Mapping[str, Any], key: str) -> list:
    """Read a required JSON array field."""
    if key not in raw:
        raise DataDecodeError(f"missing required field '{key}'")
    value = raw[key]
    if not isinstance(value, list):
        raise DataDecodeError(f"field '{key}' must be a list, got {type(value).__name__}")
    return value


def optional_iso_date(raw: Mapping[str, Any], key: str) -> Optional[date]:
    """
    Read an optional ``YYYY-MM-DD`` date field.

    An absent key or a JSON null yields None. A present value that is not
    a valid ISO calendar date is a decode error, not an absent date.

    Examples:
        >>> optional_iso_date({"launchDate": "1968-12-21"}, "launchDate")
        datetime.date(1968, 12, 21)
        >>> optional_iso_date({}, "launchDate") is None
        True
    """
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise DataDecodeError(f"field '{key}' must be a date string, got {type(value).__name__}")
    if not _ISO_DATE.fullmatch(value):
        raise DataDecodeError(f"field '{key}' is not a valid YYYY-MM-DD date: {value!r}")
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise DataDecodeError(f"field '{key}' is not a valid YYYY-MM-DD date: {value!r}") from e
