"""
UI Formatting Utilities

Helpers for consistent display across screens: date labels, image
lookup, palette colours and small HTML fragments.

Design Principles:
- Pure functions with no side effects
- Return simple types (str, Path, None) for flexibility
"""

from datetime import date
from pathlib import Path
from typing import Optional

from config import IMAGE_EXTENSIONS, get_settings_service
from domain.models import CrewMember, format_complete_date

# Palette shared with .streamlit/config.toml
DARK_BACKGROUND = "#1A1A33"
LIGHT_BACKGROUND = "#33334D"


def format_launch_date(launch_date: Optional[date]) -> Optional[str]:
    """
    Format a launch date as a complete calendar date without time.

    Args:
        launch_date: Launch date, or None for missions that never flew

    Returns:
        e.g. "Saturday, December 21, 1968", or None when there is no date
        (callers omit the label entirely)
    """
    if launch_date is None:
        return None
    return format_complete_date(launch_date)


def resolve_image_path(image_key: str, images_dir: Optional[Path] = None) -> Optional[Path]:
    """
    Find the image file for an asset key such as "apollo11".

    Args:
        image_key: Asset key without extension
        images_dir: Directory to search; defaults to [data] images_dir

    Returns:
        Path of the first existing file, or None if there is no image
    """
    images_dir = images_dir or get_settings_service().images_dir
    for ext in IMAGE_EXTENSIONS:
        candidate = Path(images_dir) / f"{image_key}{ext}"
        if candidate.is_file():
            return candidate
    return None


def divider_html(color: str = LIGHT_BACKGROUND, height: int = 2) -> str:
    """Solid rule with vertical padding, used between detail sections."""
    return (
        f"<div style='height: {height}px; background-color: {color}; "
        f"margin: 1em 0;'></div>"
    )


def crew_entry_heading(member: CrewMember) -> str:
    """Roster entry heading, e.g. 'Neil A. Armstrong - Commander'."""
    return f"{member.astronaut.name} - {member.role}"
