"""
Navigation State

Tracks which of the two screens is showing. The only stored value is the
id of the selected mission: present means the detail screen, absent
means the collection. Session state is injected so tests can pass a
plain dict.
"""

from typing import MutableMapping, Optional

import streamlit as st

from domain.enums import Screen
from logging_config import setup_logging

logger = setup_logging(__name__, log_file="navigation.log")

SELECTED_MISSION_KEY = "selected_mission_id"


class Navigator:
    """Collection <-> Detail transitions for one session."""

    def __init__(self, session: Optional[MutableMapping] = None):
        self.session = st.session_state if session is None else session

    @property
    def selected_mission_id(self) -> Optional[int]:
        return self.session.get(SELECTED_MISSION_KEY)

    def current(self) -> Screen:
        if self.selected_mission_id is None:
            return Screen.COLLECTION
        return Screen.DETAIL

    def push(self, mission_id: int) -> None:
        """Open the detail screen for ``mission_id``."""
        if self.current() is Screen.DETAIL:
            logger.debug("Replacing detail for %s with %s", self.selected_mission_id, mission_id)
        self.session[SELECTED_MISSION_KEY] = mission_id
        logger.debug("Navigated to mission %s", mission_id)

    def pop(self) -> None:
        """Return to the collection screen. No-op when already there."""
        if SELECTED_MISSION_KEY in self.session:
            del self.session[SELECTED_MISSION_KEY]
            logger.debug("Navigated back to collection")
