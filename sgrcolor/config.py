"""Runtime configuration loader for the sgrcolor CLI.

The only configurable piece is a palette of named colours, e.g.::

    {"palette": {"gold": "#ffcc00", "warning": "208", "sky": "hsv:200,0.5,1"}}
"""

from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

from .errors import InvalidArgument
from .inputs import parse_color

__all__ = [
    "ColorConfig",
    "config_candidates",
    "get_runtime_config",
    "reload_config",
]

_LOGGER = logging.getLogger("sgrcolor.config")

_CONFIG_ENV = "SGRCOLOR_CONFIG"
_CONFIG_NAME = "sgrcolor.json"


def _user_config_dir() -> Path:
    override = os.getenv("SGRCOLOR_CONFIG_HOME")
    if override:
        return Path(override).expanduser()
    home = Path.home()
    if sys.platform == "win32":
        return Path(os.getenv("APPDATA", home / "AppData" / "Roaming")) / "sgrcolor"
    if sys.platform == "darwin":
        return home / "Library/Application Support" / "sgrcolor"
    return Path(os.getenv("XDG_CONFIG_HOME", home / ".config")).expanduser() / "sgrcolor"


def config_candidates(explicit: Optional[Path] = None) -> List[Path]:
    """Return config files in lookup order: explicit, $SGRCOLOR_CONFIG, cwd, user dir."""

    env_path = os.getenv(_CONFIG_ENV)
    candidates = [
        explicit,
        Path(env_path) if env_path else None,
        Path(_CONFIG_NAME),
        Path("config") / _CONFIG_NAME,
        _user_config_dir() / _CONFIG_NAME,
    ]
    return [path for path in candidates if path is not None]


@dataclass(slots=True)
class ColorConfig:
    palette: Dict[str, str] = field(default_factory=dict)
    source: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: Optional[Path] = None) -> "ColorConfig":
        palette_raw = data.get("palette") if isinstance(data, dict) else None
        if not isinstance(palette_raw, dict):
            palette_raw = {}
        palette: Dict[str, str] = {}
        for name, notation in palette_raw.items():
            key = str(name).strip().lower()
            if not key:
                continue
            try:
                parse_color(str(notation))
            except InvalidArgument as exc:
                _LOGGER.warning("Dropping palette entry %r: %s", name, exc)
                continue
            palette[key] = str(notation).strip()
        return cls(palette=palette, source=source)


def _load_config(path: Optional[Path] = None) -> ColorConfig:
    for candidate in config_candidates(path):
        try:
            if not candidate.exists():
                continue
            data = json.loads(candidate.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            _LOGGER.debug("Skipping config %s: %s", candidate, exc)
            continue
        if isinstance(data, dict):
            _LOGGER.debug("Loaded config from %s", candidate)
            return ColorConfig.from_dict(data, source=candidate)
    return ColorConfig()


@lru_cache(maxsize=1)
def get_runtime_config() -> ColorConfig:
    """Return the cached runtime configuration."""

    return _load_config(None)


def reload_config(path: Optional[Path] = None) -> ColorConfig:
    """Reload configuration from disk, bypassing the cache."""

    get_runtime_config.cache_clear()  # type: ignore[attr-defined]
    return get_runtime_config() if path is None else _load_config(path)
