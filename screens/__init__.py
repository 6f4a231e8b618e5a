"""
Screens Package

Top-level views of the app. ContentScreen is the root: it branches on
the view-state flag into the grid or list screen, or shows the detail
screen for the selected mission.
"""

from screens.content import ContentScreen
from screens.grid_layout import render_grid_layout
from screens.list_layout import render_list_layout
from screens.mission_view import render_mission_view

__all__ = [
    "ContentScreen",
    "render_grid_layout",
    "render_list_layout",
    "render_mission_view",
]
