"""
View-State Store

The one persisted user preference: whether the mission collection shows
as a grid (True) or a list (False). The value lives in a small JSON
preferences file so it survives app restarts.

The store is an explicit object handed to the root screen rather than
ambient global storage. The toggle control is its only writer and the
root screen's render pass its only reader; subscribers are notified
synchronously after each write.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Callable

from config import DEFAULT_SHOWING_GRID
from domain.enums import ViewMode
from logging_config import setup_logging

logger = setup_logging(__name__, log_file="view_state.log")

DEFAULT_VIEW_MODE_KEY = "showingGrid"

Listener = Callable[[bool], None]


class ViewStateStore:
    """
    Persisted grid/list flag.

    Reads go to disk every time, so a fresh store over the same file sees
    the last value written by any earlier store.

    Attributes:
        path: Location of the JSON preferences file
        key: Preference key holding the flag
        default: Value returned before anything has been written
    """

    def __init__(self, path: str | Path, key: str = DEFAULT_VIEW_MODE_KEY, default: bool = DEFAULT_SHOWING_GRID):
        self.path = Path(path)
        self.key = key
        self.default = default
        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _read_preferences(self) -> dict:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                prefs = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            # Preferences are user state; a damaged file falls back to defaults
            logger.warning("Ignoring unreadable preferences file %s: %s", self.path, e)
            return {}
        if not isinstance(prefs, dict):
            logger.warning("Ignoring preferences file %s: not a JSON object", self.path)
            return {}
        return prefs

    def _write_preferences(self, prefs: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".prefs-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(prefs, f, indent=2)
            os.replace(tmp_path, self.path)
        except Exception:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def showing_grid(self) -> bool:
        value = self._read_preferences().get(self.key)
        if isinstance(value, bool):
            return value
        return self.default

    @showing_grid.setter
    def showing_grid(self, value: bool) -> None:
        value = bool(value)
        prefs = self._read_preferences()
        prefs[self.key] = value
        self._write_preferences(prefs)
        logger.info("View mode set to %s", ViewMode.from_flag(value).name.lower())
        for listener in list(self._listeners):
            listener(value)

    @property
    def view_mode(self) -> ViewMode:
        return ViewMode.from_flag(self.showing_grid)

    def toggle(self) -> bool:
        """Flip the flag, persist it, and return the new value."""
        self.showing_grid = not self.showing_grid
        return self.showing_grid

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback run after every write.

        Args:
            listener: Called with the new flag value

        Returns:
            Zero-argument function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
