"""Centralized settings loader for the application.

Infrastructure-level module: must not import from services/, repositories/,
config.py, or logging_config.py to avoid circular imports.
"""

import tomllib
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent
SETTINGS_PATH = PROJECT_ROOT / "settings.toml"

_cached_settings: dict[Path, dict] = {}


def _load_settings(settings_path: Path = SETTINGS_PATH) -> dict:
    """Load and cache settings from the TOML file."""
    settings_path = Path(settings_path)
    if settings_path in _cached_settings:
        return _cached_settings[settings_path]
    try:
        with open(settings_path, "rb") as f:
            _cached_settings[settings_path] = tomllib.load(f)
            return _cached_settings[settings_path]
    except Exception as e:
        logger.error("Failed to load settings from %s: %s", settings_path, e)
        raise


def clear_settings_cache() -> None:
    """Drop cached settings so the next read goes back to disk."""
    _cached_settings.clear()


def _resolve(path_str: str) -> Path:
    path = Path(path_str)
    return path if path.is_absolute() else PROJECT_ROOT / path


class SettingsService:
    """Read-only accessor for application settings.

    Settings are cached at module level after the first read. Relative
    paths in settings.toml are resolved against the project root.
    """

    def __init__(self, settings_path: str | Path = SETTINGS_PATH):
        self.settings = _load_settings(Path(settings_path))

    @property
    def log_level(self) -> str:
        return self.settings["env"]["log_level"]

    @property
    def env(self) -> str:
        return self.settings["env"]["env"]

    @property
    def data_dir(self) -> Path:
        return _resolve(self.settings["data"]["bundle_dir"])

    @property
    def astronauts_file(self) -> str:
        return self.settings["data"]["astronauts_file"]

    @property
    def missions_file(self) -> str:
        return self.settings["data"]["missions_file"]

    @property
    def images_dir(self) -> Path:
        return _resolve(self.settings["data"]["images_dir"])

    @property
    def preferences_path(self) -> Path:
        return _resolve(self.settings["preferences"]["path"])

    @property
    def view_mode_key(self) -> str:
        return self.settings["preferences"]["view_mode_key"]

    @property
    def grid_columns(self) -> int:
        return int(self.settings["display"]["grid_columns"])

    @property
    def app_title(self) -> str:
        return self.settings["display"]["title"]
