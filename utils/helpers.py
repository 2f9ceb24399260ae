"""Helper utility functions."""

import math
import re
from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")

_NUMBER_RE = re.compile(r'-?\d+(?:\.\d+)?')


def parse_number(value: Any) -> Optional[float]:
    """Pull the first finite number out of a value like ``350``, ``"350"`` or ``"350 kcal"``."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    else:
        match = _NUMBER_RE.search(str(value).replace(",", ""))
        if not match:
            return None
        number = float(match.group())
    return number if math.isfinite(number) else None


def maybe_int(value: Any) -> Optional[int]:
    """Rounded int form of a numeric-ish value, or None."""
    number = parse_number(value)
    if number is None:
        return None
    return int(round(number))


def to_int(value: Any, default: int) -> int:
    """Coerce a numeric-ish value to a rounded int, or return ``default``."""
    return first_or_default(maybe_int(value), default=default)


def first_or_default(*candidates: Optional[T], default: T) -> T:
    """Return the first candidate that is not None, else the default."""
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return default


def or_else(value: Optional[T], fallback: Callable[[], T]) -> T:
    """Return ``value`` when present, otherwise compute the fallback lazily."""
    return value if value is not None else fallback()
