"""
Domain Enums

Enumerations for the two pieces of view state the app tracks: how the
mission collection is laid out, and which screen is showing.
"""

from enum import Enum, auto


class ViewMode(Enum):
    """
    Layout of the mission collection.

    The persisted preference is a single boolean (``showingGrid``); this
    enum maps it to display properties for the toggle control.
    """
    GRID = auto()
    LIST = auto()

    @classmethod
    def from_flag(cls, showing_grid: bool) -> "ViewMode":
        return cls.GRID if showing_grid else cls.LIST

    @property
    def toggle_label(self) -> str:
        """Label of the control that switches away from this mode."""
        return "Show as table" if self == ViewMode.GRID else "Show as grid"

    @property
    def toggle_icon(self) -> str:
        """Material icon for the control that switches away from this mode."""
        return ":material/list:" if self == ViewMode.GRID else ":material/grid_view:"


class Screen(Enum):
    """
    The two screen states.

    COLLECTION -> DETAIL by selecting a mission; DETAIL -> COLLECTION by
    going back. There are no other transitions.
    """
    COLLECTION = auto()
    DETAIL = auto()
