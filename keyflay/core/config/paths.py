"""Where keyflay keeps its layout settings.

The settings file is resolved in this order, first match wins:

1. ``$KEYFLAY_CONFIG_PATH`` names the file itself.
2. ``$KEYFLAY_CONFIG_DIR/config.json``.
3. ``$XDG_CONFIG_HOME/keyflay/config.json``.
4. ``~/.config/keyflay/config.json``.

Lookups read the environment on every call; nothing is cached, so tests can
repoint them with ``monkeypatch.setenv``.
"""

from __future__ import annotations

import os
from pathlib import Path

APP_DIR_NAME = "keyflay"
CONFIG_FILE_NAME = "config.json"


def _env_path(name: str) -> Path | None:
    value = os.environ.get(name)
    return Path(value) if value else None


def config_dir() -> Path:
    """Return the directory holding keyflay's settings (steps 2-4 above)."""

    override = _env_path("KEYFLAY_CONFIG_DIR")
    if override is not None:
        return override

    xdg = _env_path("XDG_CONFIG_HOME")
    base = xdg if xdg is not None else Path.home() / ".config"
    return base / APP_DIR_NAME


def config_file_path() -> Path:
    return _env_path("KEYFLAY_CONFIG_PATH") or config_dir() / CONFIG_FILE_NAME
