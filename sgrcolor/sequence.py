"""Assembly of SGR extended-colour escape sequences."""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from .errors import InvalidArgument
from .validate import check_component

__all__ = ["ESC", "RESET", "Layer", "build", "reset"]

ESC = "\x1b"
RESET = f"{ESC}[0m"

_MODE_8BIT = "5"
_MODE_RGB = "2"


class Layer(str, Enum):
    """Target of a colour sequence; the value is the SGR parameter."""

    FOREGROUND = "38"
    BACKGROUND = "48"

    @classmethod
    def parse(cls, name: str) -> "Layer":
        key = (name or "").strip().lower()
        if key in {"fg", "foreground"}:
            return cls.FOREGROUND
        if key in {"bg", "background"}:
            return cls.BACKGROUND
        raise InvalidArgument(f"Layer must be 'fg' or 'bg', got {name!r}")


def build(layer: Layer, components: Sequence[int]) -> str:
    """Return ``ESC[{layer};{mode};{components}m`` for 1 (indexed) or 3 (RGB) values."""

    if len(components) == 1:
        mode = _MODE_8BIT
    elif len(components) == 3:
        mode = _MODE_RGB
    else:
        raise InvalidArgument(
            f"Expected 1 (indexed) or 3 (RGB) color components, got {len(components)}"
        )
    try:
        code = Layer(layer).value
    except ValueError:
        raise InvalidArgument(f"Unknown layer {layer!r}") from None
    joined = ";".join(str(check_component(c)) for c in components)
    return f"{ESC}[{code};{mode};{joined}m"


def reset() -> str:
    """Return the sequence that restores the terminal's default colours."""

    return RESET
