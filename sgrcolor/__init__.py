"""ANSI SGR colour sequences from palette indices, RGB, packed ints, hex and HSV.

    >>> from sgrcolor import fg_hex, reset
    >>> fg_hex("#ffcc00") + "Hello!" + reset()
    '\\x1b[38;2;255;204;0mHello!\\x1b[0m'
"""

from __future__ import annotations

from .api import (
    bg,
    bg_hex,
    bg_hsv,
    bg_indexed,
    bg_packed,
    bg_rgb,
    fg,
    fg_hex,
    fg_hsv,
    fg_indexed,
    fg_packed,
    fg_rgb,
    paint,
    reset,
    sequence_for,
    set_hex,
    set_hsv,
    set_indexed,
    set_packed,
    set_rgb,
)
from .convert import hex_to_rgb, hsv_to_rgb, packed_to_rgb, rgb_to_hex
from .errors import InvalidArgument
from .inputs import ColorInput, Hex, Hsv, Indexed, Packed, Rgb, parse_color
from .sequence import ESC, RESET, Layer, build
from .validate import HEX_COLOR_REGEX
from .version import __version__

__all__ = [
    "__version__",
    "ESC",
    "RESET",
    "HEX_COLOR_REGEX",
    "InvalidArgument",
    "Layer",
    "ColorInput",
    "Indexed",
    "Rgb",
    "Packed",
    "Hex",
    "Hsv",
    "parse_color",
    "build",
    "reset",
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
    "packed_to_rgb",
    "hex_to_rgb",
    "hsv_to_rgb",
    "rgb_to_hex",
]
