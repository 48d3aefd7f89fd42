"""Domain guards for every supported colour representation.

Each guard returns the value it was given when it is acceptable and raises
:class:`~sgrcolor.errors.InvalidArgument` otherwise. The guards run before any
conversion so a malformed escape sequence can never be assembled.
"""

from __future__ import annotations

import re
from numbers import Real
from typing import Any

from .errors import InvalidArgument

__all__ = [
    "HEX_COLOR_REGEX",
    "HEX_COLOR_PATTERN",
    "MAX_COMPONENT",
    "MAX_PACKED",
    "check_component",
    "check_packed",
    "check_hex",
    "check_hsv",
]

HEX_COLOR_REGEX = r"^#([A-Fa-f0-9]{6})$"
HEX_COLOR_PATTERN = re.compile(HEX_COLOR_REGEX)

MAX_COMPONENT = 255
MAX_PACKED = 0xFFFFFF
MAX_HUE = 360.0


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_real(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def check_component(value: Any) -> int:
    """Guard a palette index or a single RGB channel."""

    if not _is_int(value):
        raise InvalidArgument(
            f"Color component or index must be an integer, got {type(value).__name__}"
        )
    if not 0 <= value <= MAX_COMPONENT:
        raise InvalidArgument("Color component or index must be >= 0 and <= 255")
    return value


def check_packed(value: Any) -> int:
    """Guard a 24-bit packed RGB value."""

    if not _is_int(value):
        raise InvalidArgument(f"Color must be an integer, got {type(value).__name__}")
    if not 0 <= value <= MAX_PACKED:
        raise InvalidArgument(f"Color must be >= 0 and <= {MAX_PACKED}")
    return value


def check_hex(text: Any) -> str:
    """Guard a ``#rrggbb`` string; digits are case-insensitive."""

    if not isinstance(text, str) or HEX_COLOR_PATTERN.fullmatch(text) is None:
        raise InvalidArgument("Color must be in the format '#ffcc00'")
    return text


def _check_bound(name: str, value: Any, upper: float) -> float:
    # NaN fails the chained comparison as well
    if not _is_real(value) or not 0.0 <= value <= upper:
        raise InvalidArgument(f"{name} must be >= 0.0 and <= {upper:.1f}.")
    return float(value)


def check_hsv(hue: Any, saturation: Any, value: Any) -> tuple[float, float, float]:
    """Guard an HSV triple, reporting the first parameter that is out of range."""

    return (
        _check_bound("Hue", hue, MAX_HUE),
        _check_bound("Saturation", saturation, 1.0),
        _check_bound("Value", value, 1.0),
    )
