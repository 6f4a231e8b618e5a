"""
Presentation Components

Reusable Streamlit fragments for the screens: grid cell, list row,
divider, mission badge and crew roster. No logic beyond formatting;
navigation is wired through the ``on_open`` callback the screen passes in.
"""

from typing import Callable, Sequence

import streamlit as st

from domain.models import CrewMember, Mission
from ui.formatters import (
    crew_entry_heading,
    divider_html,
    format_launch_date,
    resolve_image_path,
)

OpenMission = Callable[[int], None]


def open_button_key(mission: Mission) -> str:
    return f"open_mission_{mission.id}"


def render_mission_image(mission: Mission, width: int | str = "stretch") -> None:
    """Mission badge, or a placeholder caption when no image is bundled."""
    image_path = resolve_image_path(mission.image)
    if image_path is not None:
        st.image(str(image_path), width=width)
    else:
        st.caption(f":material/image: {mission.image}")


def render_divider() -> None:
    st.markdown(divider_html(), unsafe_allow_html=True)


def render_grid_cell(mission: Mission, on_open: OpenMission) -> None:
    """Bordered card with badge, name and launch date; the name opens the detail."""
    with st.container(border=True):
        render_mission_image(mission)
        st.button(
            mission.display_name,
            key=open_button_key(mission),
            on_click=on_open,
            args=(mission.id,),
            type="tertiary",
            width="stretch",
        )
        launch_label = format_launch_date(mission.launch_date)
        if launch_label is not None:
            st.caption(launch_label)


def render_list_row(mission: Mission, on_open: OpenMission) -> None:
    """Compact row: small badge, headline name and launch date."""
    col1, col2 = st.columns([0.1, 0.9], vertical_alignment="center")
    with col1:
        render_mission_image(mission, width=40)
    with col2:
        st.button(
            f"**{mission.display_name}**",
            key=open_button_key(mission),
            on_click=on_open,
            args=(mission.id,),
            type="tertiary",
        )
        launch_label = format_launch_date(mission.launch_date)
        if launch_label is not None:
            st.caption(launch_label)


def render_crew_roster(crew: Sequence[CrewMember]) -> None:
    """Enumerated roster; each entry expands to the astronaut's biography."""
    for index, member in enumerate(crew, start=1):
        with st.expander(f"{index}. {crew_entry_heading(member)}"):
            st.markdown(f"**{member.astronaut.name}**")
            st.caption(member.role)
            st.write(member.astronaut.description)
