"""
Grid Screen

Missions as bordered cards in a fixed number of columns, filled row by
row in mission order.
"""

from typing import Sequence

import streamlit as st

from domain.models import Mission
from ui.components import OpenMission, render_grid_cell


def render_grid_layout(
    missions: Sequence[Mission],
    on_open: OpenMission,
    columns: int = 3,
) -> None:
    """
    Render the mission grid.

    Args:
        missions: Missions in display order
        on_open: Called with a mission id when a cell is selected
        columns: Cells per row
    """
    columns = max(1, columns)
    for start in range(0, len(missions), columns):
        row = missions[start:start + columns]
        cols = st.columns(columns)
        for col, mission in zip(cols, row):
            with col:
                render_grid_cell(mission, on_open)
