"""Command line front end for sgrcolor.

Prints the escape sequence for a colour (visibly escaped by default, raw with
``--raw``) or paints sample text with it::

    sgrcolor '#ffcc00'
    sgrcolor hsv:48,1,1 --bg 17 --text "Hello!"
    printf '%s' "$(sgrcolor --raw 220)"
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from .api import paint, sequence_for
from .config import ColorConfig, get_runtime_config, reload_config
from .errors import InvalidArgument
from .inputs import Indexed, parse_color
from .sequence import RESET, Layer
from .version import __version__

_LOGGER = logging.getLogger("sgrcolor.cli")

_ERROR_COLOR = Indexed(9)
_HEADING_COLOR = Indexed(11)


def _decorations_enabled(stream: TextIO) -> bool:
    if os.getenv("NO_COLOR") is not None:
        return False
    if os.getenv("FORCE_COLOR") is not None:
        return True
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def _decorate(text: str, color: Indexed, stream: TextIO) -> str:
    """Paint CLI headings and errors only for interactive terminals."""

    return paint(text, fg=color) if _decorations_enabled(stream) else text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sgrcolor",
        description="Generate ANSI SGR foreground/background colour sequences.",
    )
    parser.add_argument(
        "color",
        nargs="?",
        help="Colour as N, #rrggbb, 0xRRGGBB, r,g,b, hsv:h,s,v or a palette name.",
    )
    parser.add_argument("--bg", default=None, help="Optional background colour (same syntax).")
    parser.add_argument(
        "--layer",
        choices=["fg", "bg"],
        default="fg",
        help="Layer used for the positional colour (default: fg).",
    )
    parser.add_argument("--text", default=None, help="Print TEXT painted with the colours.")
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Write the raw escape sequence instead of its escaped form.",
    )
    parser.add_argument("--reset", action="store_true", help="Print the reset sequence and exit.")
    parser.add_argument("--config", type=Path, default=None, help="Explicit palette config file.")
    parser.add_argument(
        "--list-palette",
        action="store_true",
        help="List configured palette names with a swatch and exit.",
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Print the resolved configuration and exit.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = build_parser()
    return parser.parse_args(list(argv) if argv is not None else None)


def _visible(sequence: str) -> str:
    return sequence.encode("unicode_escape").decode("ascii")


def _emit(sequence: str, raw: bool) -> None:
    if raw:
        sys.stdout.write(sequence)
        sys.stdout.flush()
    else:
        print(_visible(sequence))


def _resolve_config(path: Optional[Path]) -> ColorConfig:
    if path is not None:
        return reload_config(path)
    return get_runtime_config()


def _print_runtime_config(config: ColorConfig) -> None:
    print(_decorate("Runtime configuration:", _HEADING_COLOR, sys.stdout))
    print(f"  source: {config.source or '(defaults)'}")
    print(f"  palette entries: {len(config.palette)}")


def _show_palette(config: ColorConfig) -> int:
    print(_decorate("Palette:", _HEADING_COLOR, sys.stdout))
    if not config.palette:
        print("  (no palette configured)")
        return 0
    for name in sorted(config.palette):
        notation = config.palette[name]
        swatch = paint("    ", bg=parse_color(notation))
        print(f"  {name:<16} {swatch} {notation}")
    return 0


def _report_error(message: str) -> int:
    print(_decorate(f"error: {message}", _ERROR_COLOR, sys.stderr), file=sys.stderr)
    return 2


def _run(args: argparse.Namespace) -> int:
    config = _resolve_config(args.config)
    if args.show_config:
        _print_runtime_config(config)
        return 0
    if args.list_palette:
        return _show_palette(config)
    if args.reset:
        _emit(RESET, args.raw)
        return 0
    if not args.color:
        return _report_error("a colour is required (see --help)")

    layer = Layer.parse(args.layer)
    color = parse_color(args.color, config.palette)
    background = parse_color(args.bg, config.palette) if args.bg else None
    if background is not None and layer is Layer.BACKGROUND:
        raise InvalidArgument("--bg cannot be combined with --layer bg")
    _LOGGER.debug("Resolved %r to %r on %s", args.color, color, layer.name)

    if args.text is not None:
        if layer is Layer.BACKGROUND:
            print(paint(args.text, bg=color))
        else:
            print(paint(args.text, fg=color, bg=background))
        return 0

    sequence = sequence_for(layer, color)
    if background is not None:
        sequence += sequence_for(Layer.BACKGROUND, background)
    _emit(sequence, args.raw)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )
    try:
        return _run(args)
    except InvalidArgument as exc:
        return _report_error(str(exc))


__all__ = ["build_parser", "parse_args", "main"]
