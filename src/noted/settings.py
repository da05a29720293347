"""Load user settings from settings.yaml."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from noted.paths import settings_path

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, str] = {
    "default_branch": "main",
    "remote_name": "origin",
    "github_visibility": "private",
    "parent_name": "Noted",
    "workspace_name": "untitled-workspace",
    "folder_name": "untitled-folder",
    "note_name": "untitled-note",
}


def load_settings(path: Path | str | None = None) -> dict[str, str]:
    """Load settings.yaml merged over the built-in defaults.

    Args:
        path: Path to the settings file. Defaults to ``paths.settings_path()``.

    Returns:
        Settings dict containing every key of DEFAULT_SETTINGS.

    Raises:
        ValueError: If the file is not a YAML mapping.
        yaml.YAMLError: If the YAML is malformed.
    """
    source = Path(path) if path else settings_path()
    settings = dict(DEFAULT_SETTINGS)
    if not source.is_file():
        logger.debug("No settings file at %s, using defaults", source)
        return settings

    with open(source) as f:
        data = yaml.safe_load(f)

    if data is None:
        return settings
    if not isinstance(data, dict):
        raise ValueError(f"settings file at {source} is not a YAML mapping")

    for key, value in data.items():
        if key not in DEFAULT_SETTINGS:
            logger.debug("Ignoring unknown setting %r", key)
            continue
        if value is not None:
            settings[key] = str(value)
    return settings
