"""Persistent user configuration for termcards.

Settings live in a JSON file under the user's config directory. Loading
is cached for the life of the process; call ``clear_config_cache`` after
changing the file behind the cache's back.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.json"

_cached_config: Config | None = None


@dataclass
class Config:
    """User settings."""

    decks_path: str | None = None
    high_contrast: bool = False


# Accepted JSON value types per setting
_SETTING_TYPES: dict[str, tuple[type, ...]] = {
    "decks_path": (str, type(None)),
    "high_contrast": (bool,),
}


def _get_config_dir() -> Path:
    """Return the termcards config directory (XDG layout)."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / "termcards"


def _config_path() -> Path:
    return _get_config_dir() / CONFIG_FILENAME


def _valid_settings(raw: dict[str, Any], path: Path) -> dict[str, Any]:
    """Keep known settings whose values have the right type."""
    settings: dict[str, Any] = {}
    for name, value in raw.items():
        if name not in _SETTING_TYPES:
            continue
        if not isinstance(value, _SETTING_TYPES[name]):
            logger.warning(
                "Ignoring config %s: %s has invalid value %r", path, name, value
            )
            continue
        settings[name] = value
    return settings


def clear_config_cache() -> None:
    """Forget the cached config so the next load reads the file."""
    global _cached_config
    _cached_config = None


def load_config() -> Config:
    """Load the user config, falling back to defaults if unreadable."""
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    path = _config_path()
    config = Config()
    if path.exists():
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable config %s: %s", path, exc)
        else:
            if isinstance(raw, dict):
                config = Config(**_valid_settings(raw, path))
            else:
                logger.warning("Ignoring config %s: expected a JSON object", path)

    _cached_config = config
    return config


def save_config(config: Config) -> None:
    """Write the config file and update the cache."""
    global _cached_config
    path = _config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(config), indent=2), encoding="utf-8")
    _cached_config = config
