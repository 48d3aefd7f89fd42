"""Conversions from the supported colour representations to RGB components."""

from __future__ import annotations

from typing import Tuple

from .validate import check_component, check_hex, check_hsv, check_packed

__all__ = ["indexed", "packed_to_rgb", "hex_to_rgb", "hsv_to_rgb", "rgb_to_hex"]

RGB = Tuple[int, int, int]


def indexed(index: int) -> Tuple[int]:
    """Return ``index`` as a one-element component set."""

    return (check_component(index),)


def packed_to_rgb(color: int) -> RGB:
    """Split a packed ``0xRRGGBB`` value (0 - 16777215) into its channels."""

    color = check_packed(color)
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def hex_to_rgb(hex_color: str) -> RGB:
    """Parse a ``#ffcc00`` style string into its channels."""

    hex_color = check_hex(hex_color)
    return tuple(int(hex_color[i:i + 2], 16) for i in (1, 3, 5))  # type: ignore[return-value]


def rgb_to_hex(red: int, green: int, blue: int) -> str:
    """Format channels as a lowercase ``#rrggbb`` string."""

    r, g, b = (check_component(c) for c in (red, green, blue))
    return f"#{r:02x}{g:02x}{b:02x}"


def hsv_to_rgb(hue: float, saturation: float, value: float) -> RGB:
    """Convert HSV (hue in degrees, saturation/value in 0..1) to RGB.

    Channels are scaled by 255 and truncated rather than rounded, so e.g.
    ``hsv_to_rgb(48.0, 1.0, 1.0)`` is ``(255, 204, 0)``. A hue of 360 wraps
    to the same sector as 0.

    See https://www.cs.rit.edu/~ncs/color/t_convert.html
    """

    hue, saturation, value = check_hsv(hue, saturation, value)

    position = (hue / 60.0) % 6
    sector = int(position)
    f = position - sector
    p = value * (1 - saturation)
    q = value * (1 - f * saturation)
    t = value * (1 - (1 - f) * saturation)

    if sector == 0:
        rgb = (value, t, p)
    elif sector == 1:
        rgb = (q, value, p)
    elif sector == 2:
        rgb = (p, value, t)
    elif sector == 3:
        rgb = (p, q, value)
    elif sector == 4:
        rgb = (t, p, value)
    else:
        rgb = (value, p, q)
    return tuple(int(channel * 255) for channel in rgb)  # type: ignore[return-value]
