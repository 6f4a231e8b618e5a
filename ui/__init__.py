"""
UI Package

Presentation layer components for the Streamlit screens: formatting
utilities and reusable view fragments.

This package keeps screens focused on layout and navigation.
"""

from ui.formatters import (
    DARK_BACKGROUND,
    LIGHT_BACKGROUND,
    crew_entry_heading,
    divider_html,
    format_launch_date,
    resolve_image_path,
)
from ui.components import (
    open_button_key,
    render_crew_roster,
    render_divider,
    render_grid_cell,
    render_list_row,
    render_mission_image,
)

__all__ = [
    # Formatters
    "DARK_BACKGROUND",
    "LIGHT_BACKGROUND",
    "crew_entry_heading",
    "divider_html",
    "format_launch_date",
    "resolve_image_path",
    # Components
    "open_button_key",
    "render_crew_roster",
    "render_divider",
    "render_grid_cell",
    "render_list_row",
    "render_mission_image",
]
