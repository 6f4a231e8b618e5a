"""
Root Screen

Holds the loaded catalog and branches on two pieces of state:

- the Navigator: a selected mission shows the detail screen
- the ViewStateStore: otherwise the grid (True) or list (False) screen

The store and navigator are passed in at construction; this screen does
not reach for global storage itself.
"""

import streamlit as st

from domain.enums import Screen, ViewMode
from domain.models import MissionCatalog
from logging_config import setup_logging
from screens.grid_layout import render_grid_layout
from screens.list_layout import render_list_layout
from screens.mission_view import render_mission_view
from state.navigation import Navigator
from state.view_state import ViewStateStore

logger = setup_logging(__name__, log_file="content.log")

TOGGLE_BUTTON_KEY = "toggle_view_mode"


class ContentScreen:
    """
    Root view of the app.

    Attributes:
        catalog: Astronauts and missions, shared by reference with child screens
        navigator: Collection/Detail state for the session
        view_state: Persisted grid/list preference
        title: Heading shown above the collection
        grid_columns: Cells per row in grid mode
    """

    def __init__(
        self,
        catalog: MissionCatalog,
        navigator: Navigator,
        view_state: ViewStateStore,
        title: str = "Moonshot",
        grid_columns: int = 3,
    ):
        self.catalog = catalog
        self.navigator = navigator
        self.view_state = view_state
        self.title = title
        self.grid_columns = grid_columns

    def render(self) -> None:
        if self.navigator.current() is Screen.DETAIL:
            mission = self.catalog.mission_by_id(self.navigator.selected_mission_id)
            if mission is not None:
                render_mission_view(mission, self.catalog.astronauts, on_back=self.navigator.pop)
                return
            # Stale selection from an earlier session
            logger.warning("Unknown mission id %s selected; returning to collection",
                           self.navigator.selected_mission_id)
            self.navigator.pop()

        self.render_collection()

    def render_collection(self) -> None:
        mode = self.view_state.view_mode

        col1, col2 = st.columns([0.8, 0.2], vertical_alignment="bottom")
        with col1:
            st.title(self.title)
        with col2:
            st.button(
                mode.toggle_label,
                key=TOGGLE_BUTTON_KEY,
                icon=mode.toggle_icon,
                on_click=self.view_state.toggle,
            )

        if mode is ViewMode.GRID:
            render_grid_layout(self.catalog.missions, self.navigator.push, columns=self.grid_columns)
        else:
            render_list_layout(self.catalog.missions, self.navigator.push)
