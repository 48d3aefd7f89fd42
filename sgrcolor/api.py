"""Public entry points returning foreground/background colour sequences.

Every function is pure: the same arguments always yield the same string and
the only failure mode is :class:`~sgrcolor.errors.InvalidArgument`::

    print(fg_hex("#ffcc00") + "Hello!" + reset())
"""

from __future__ import annotations

from typing import Optional

from .convert import hex_to_rgb, hsv_to_rgb, indexed, packed_to_rgb
from .errors import InvalidArgument
from .inputs import ColorInput, Hex, Hsv, Indexed, Packed, Rgb
from .sequence import RESET, Layer, build, reset

__all__ = [
    "set_indexed",
    "set_rgb",
    "set_packed",
    "set_hex",
    "set_hsv",
    "sequence_for",
    "fg",
    "bg",
    "fg_indexed",
    "fg_rgb",
    "fg_packed",
    "fg_hex",
    "fg_hsv",
    "bg_indexed",
    "bg_rgb",
    "bg_packed",
    "bg_hex",
    "bg_hsv",
    "paint",
    "reset",
]

_COLOR_INPUTS = (Indexed, Rgb, Packed, Hex, Hsv)


def set_indexed(layer: Layer, index: int) -> str:
    return build(layer, indexed(index))


def set_rgb(layer: Layer, red: int, green: int, blue: int) -> str:
    return build(layer, (red, green, blue))


def set_packed(layer: Layer, color: int) -> str:
    return build(layer, packed_to_rgb(color))


def set_hex(layer: Layer, hex_color: str) -> str:
    return build(layer, hex_to_rgb(hex_color))


def set_hsv(layer: Layer, hue: float, saturation: float, value: float) -> str:
    return build(layer, hsv_to_rgb(hue, saturation, value))


def sequence_for(layer: Layer, color: ColorInput) -> str:
    """Return the sequence for any tagged colour input on ``layer``."""

    if not isinstance(color, _COLOR_INPUTS):
        raise InvalidArgument(
            f"Expected Indexed, Rgb, Packed, Hex or Hsv, got {type(color).__name__}"
        )
    return build(layer, color.components())


def fg(color: ColorInput) -> str:
    return sequence_for(Layer.FOREGROUND, color)


def bg(color: ColorInput) -> str:
    return sequence_for(Layer.BACKGROUND, color)


def fg_indexed(index: int) -> str:
    return set_indexed(Layer.FOREGROUND, index)


def fg_rgb(red: int, green: int, blue: int) -> str:
    return set_rgb(Layer.FOREGROUND, red, green, blue)


def fg_packed(color: int) -> str:
    return set_packed(Layer.FOREGROUND, color)


def fg_hex(hex_color: str) -> str:
    return set_hex(Layer.FOREGROUND, hex_color)


def fg_hsv(hue: float, saturation: float, value: float) -> str:
    return set_hsv(Layer.FOREGROUND, hue, saturation, value)


def bg_indexed(index: int) -> str:
    return set_indexed(Layer.BACKGROUND, index)


def bg_rgb(red: int, green: int, blue: int) -> str:
    return set_rgb(Layer.BACKGROUND, red, green, blue)


def bg_packed(color: int) -> str:
    return set_packed(Layer.BACKGROUND, color)


def bg_hex(hex_color: str) -> str:
    return set_hex(Layer.BACKGROUND, hex_color)


def bg_hsv(hue: float, saturation: float, value: float) -> str:
    return set_hsv(Layer.BACKGROUND, hue, saturation, value)


def paint(
    text: str,
    *,
    fg: Optional[ColorInput] = None,
    bg: Optional[ColorInput] = None,
) -> str:
    """Wrap ``text`` in the given colours followed by a reset.

    Both colours are validated before anything is assembled. Without any
    colour the text is returned unchanged.
    """

    parts = []
    if fg is not None:
        parts.append(sequence_for(Layer.FOREGROUND, fg))
    if bg is not None:
        parts.append(sequence_for(Layer.BACKGROUND, bg))
    if not parts:
        return text
    return "".join(parts) + text + RESET
