"""
Detail Screen

One mission: badge, launch date, highlights and the crew roster.

The crew is resolved against the astronaut roster before anything is
drawn. A crew reference to an unknown astronaut is a data packaging
defect: the screen shows a hard error and stops instead of rendering a
partial roster.
"""

from typing import Callable, Mapping

import streamlit as st

from domain.errors import CrewIntegrityError
from domain.models import Astronaut, Mission
from logging_config import setup_logging
from services.crew_service import build_mission_detail
from ui.components import render_crew_roster, render_divider, render_mission_image

logger = setup_logging(__name__, log_file="mission_view.log")

BACK_BUTTON_KEY = "back_to_missions"


def render_mission_view(
    mission: Mission,
    astronauts: Mapping[str, Astronaut],
    on_back: Callable[[], None],
) -> None:
    """
    Render the detail screen for ``mission``.

    Args:
        mission: The selected mission
        astronauts: Full astronaut roster keyed by id
        on_back: Called when the back action is used
    """
    st.button("Missions", key=BACK_BUTTON_KEY, icon=":material/arrow_back:", on_click=on_back)

    try:
        detail = build_mission_detail(mission, astronauts)
    except CrewIntegrityError as e:
        logger.error("Aborting detail for %s: %s", mission.display_name, e)
        st.error(f"Mission data is corrupt: {e}")
        st.stop()

    st.title(detail.title)

    _, image_col, _ = st.columns([0.2, 0.6, 0.2])
    with image_col:
        render_mission_image(mission)

    if detail.launch_date_label is not None:
        st.markdown(f":material/calendar_today: {detail.launch_date_label}")

    st.subheader("Mission Highlights")
    render_divider()
    st.write(detail.description)
    render_divider()

    st.subheader("Crew")
    render_crew_roster(detail.crew)
