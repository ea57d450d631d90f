"""Input validation helpers for admin requests."""
from __future__ import annotations
import re
from typing import Any, Mapping, Optional

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_page(raw: Optional[str], default: int = 1) -> int:
    """Parse a page query parameter.

    Leading decimal digits are honored ("3abc" -> 3). Absent, non-numeric and
    zero values fall back to ``default``. Hex prefixes are not recognized, so
    "0x10" yields ``default`` rather than 16.

    Args:
        raw: Raw query string value
        default: Page used when parsing yields nothing usable

    Returns:
        Page number
    """
    match = _LEADING_INT.match(raw or "")
    if not match:
        return default
    return int(match.group(1)) or default


def require_fields(payload: Mapping[str, Any], *names: str) -> tuple:
    """Return the values of required fields, in order.

    A field counts as missing when absent, null, or empty.

    Args:
        payload: Parsed JSON body
        *names: Required field names

    Returns:
        Tuple of field values

    Raises:
        ValueError: If any field is missing, with an "<a> and <b> required" message
    """
    values = tuple(payload.get(name) for name in names)
    if not all(values):
        raise ValueError(f"{' and '.join(names)} required")
    return values
