"""Configuration path resolution.

Resolves canonical paths to noted's own configuration. Uses environment
variables when available, falls back to conventional defaults.

Environment variables:
    NOTED_CONFIG_DIR - configuration directory (default: ~/.config/noted)
    NOTED_SETTINGS - settings file (default: <config dir>/settings.yaml)
"""

from __future__ import annotations

import os
from pathlib import Path

_DEFAULT_CONFIG_DIR = Path.home() / ".config" / "noted"

MARKER_FILE = ".notedconfig"
GITMODULES_FILE = ".gitmodules"


def config_dir() -> Path:
    """Return the noted configuration directory."""
    return Path(os.environ.get("NOTED_CONFIG_DIR", str(_DEFAULT_CONFIG_DIR)))


def settings_path() -> Path:
    """Return the path to settings.yaml."""
    env = os.environ.get("NOTED_SETTINGS")
    if env:
        return Path(env)
    return config_dir() / "settings.yaml"
