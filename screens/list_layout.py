"""
List Screen

Missions as plain rows in mission order.
"""

from typing import Sequence

import streamlit as st

from domain.models import Mission
from ui.components import OpenMission, render_list_row


def render_list_layout(
    missions: Sequence[Mission],
    on_open: OpenMission,
) -> None:
    for index, mission in enumerate(missions):
        if index:
            st.divider()
        render_list_row(mission, on_open)
