"""Locating and loading the expense tracker's configuration."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

log = logging.getLogger(__name__)

APP_CONFIG_DIR = "expense"
CONFIG_FILE_NAME = "expense-config.yaml"
APP_DATA_DIR = "expense-tracker"
CSV_FILE_NAME = "expenses.csv"


def default_config_path() -> Path:
    """Return the config file path under $XDG_CONFIG_HOME or ~/.config."""
    config_home = os.environ.get("XDG_CONFIG_HOME", "")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / APP_CONFIG_DIR / CONFIG_FILE_NAME


def default_csv_path() -> Path:
    """Return the expenses CSV path under $XDG_DATA_HOME or ~/.local/share."""
    data_home = os.environ.get("XDG_DATA_HOME", "")
    base = Path(data_home) if data_home else Path.home() / ".local" / "share"
    return base / APP_DATA_DIR / CSV_FILE_NAME


def _read_config(path: Path) -> dict[str, Any] | None:
    """Return the config mapping with lower-cased keys, or None if unreadable."""
    try:
        with open(path, encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except (OSError, yaml.YAMLError):
        return None
    if data is None:
        return {}
    if not isinstance(data, dict):
        return None
    return {str(key).lower(): value for key, value in data.items()}


def load_config(config_path: str | Path | None = None, app_name: str = "expense") -> dict[str, Any]:
    """Load the YAML config, creating it when it cannot be read.

    The returned mapping always holds a non-empty ``file`` entry naming the
    expenses CSV file. Raises ``FileExistsError`` when the config file exists
    but cannot be read as a YAML mapping.
    """
    path = Path(config_path) if config_path else default_config_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        log.warning("%s", exc)

    config = _read_config(path)
    if config is None:
        config = {"appname": app_name}
        with open(path, "x", encoding="utf-8") as handle:
            yaml.safe_dump(config, handle)

    if not config.get("file"):
        config["file"] = str(default_csv_path())
    return config