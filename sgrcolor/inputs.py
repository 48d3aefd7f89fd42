"""Tagged colour inputs accepted by :func:`sgrcolor.fg` and :func:`sgrcolor.bg`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple, Union

from .convert import hex_to_rgb, hsv_to_rgb, indexed, packed_to_rgb
from .errors import InvalidArgument
from .validate import check_component

__all__ = ["Indexed", "Rgb", "Packed", "Hex", "Hsv", "ColorInput", "parse_color"]


@dataclass(frozen=True, slots=True)
class Indexed:
    """One of the 256 palette colours.

    See https://www.ditig.com/256-colors-cheat-sheet
    """

    index: int

    def components(self) -> Tuple[int, ...]:
        return indexed(self.index)


@dataclass(frozen=True, slots=True)
class Rgb:
    red: int
    green: int
    blue: int

    def components(self) -> Tuple[int, ...]:
        return tuple(check_component(c) for c in (self.red, self.green, self.blue))


@dataclass(frozen=True, slots=True)
class Packed:
    """A 24-bit ``0xRRGGBB`` value, e.g. from another colour library."""

    value: int

    def components(self) -> Tuple[int, ...]:
        return packed_to_rgb(self.value)


@dataclass(frozen=True, slots=True)
class Hex:
    text: str

    def components(self) -> Tuple[int, ...]:
        return hex_to_rgb(self.text)


@dataclass(frozen=True, slots=True)
class Hsv:
    hue: float
    saturation: float
    value: float

    def components(self) -> Tuple[int, ...]:
        return hsv_to_rgb(self.hue, self.saturation, self.value)


ColorInput = Union[Indexed, Rgb, Packed, Hex, Hsv]


def _numbers(body: str, kind: type, count: int, label: str) -> list:
    parts = [part.strip() for part in body.split(",")]
    if len(parts) != count:
        raise InvalidArgument(f"{label} needs {count} comma-separated numbers, got {body!r}")
    try:
        return [kind(part) for part in parts]
    except ValueError:
        raise InvalidArgument(f"{label} components must be numbers, got {body!r}") from None


def _fold_names(palette: Mapping[str, str]) -> Dict[str, str]:
    return {str(name).strip().lower(): notation for name, notation in palette.items()}


def parse_color(text: str, palette: Optional[Mapping[str, str]] = None) -> ColorInput:
    """Parse the textual colour notation used by the CLI and config files.

    Accepted forms: ``220`` (index), ``#ffcc00``, ``0xffcc00`` (packed),
    ``255,204,0`` (RGB), ``hsv:48,1,1`` and, when ``palette`` is given, a
    case-insensitive palette name. The result is validated before it is
    returned.
    """

    raw = (text or "").strip()
    lowered = raw.lower()
    color: ColorInput
    if lowered.startswith("hsv:"):
        color = Hsv(*_numbers(raw[4:], float, 3, "HSV"))
    elif raw.startswith("#"):
        color = Hex(raw)
    elif lowered.startswith("0x"):
        try:
            color = Packed(int(raw[2:], 16))
        except ValueError:
            raise InvalidArgument(f"Packed color must be hexadecimal, got {raw!r}") from None
    elif "," in raw:
        color = Rgb(*_numbers(raw, int, 3, "RGB"))
    elif raw.isascii() and raw.isdigit():
        # int() refuses very long digit strings
        try:
            color = Indexed(int(raw))
        except ValueError:
            raise InvalidArgument(f"Color index must be a small integer, got {raw[:16]!r}...") from None
    else:
        names = _fold_names(palette or {})
        if lowered in names:
            # palette values are plain notation; names never chain
            return parse_color(names[lowered])
        raise InvalidArgument(f"Unrecognised color {text!r}")
    color.components()
    return color
