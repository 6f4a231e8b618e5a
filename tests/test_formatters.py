"""
Tests for UI formatting utilities
"""
from datetime import date

from domain.models import Astronaut, CrewMember
from ui.formatters import (
    LIGHT_BACKGROUND,
    crew_entry_heading,
    divider_html,
    format_launch_date,
    resolve_image_path,
)


def test_format_launch_date_full_calendar_date():
    assert format_launch_date(date(1968, 12, 21)) == "Saturday, December 21, 1968"


def test_format_launch_date_has_no_time_component():
    label = format_launch_date(date(1969, 7, 16))
    assert ":" not in label
    assert label == "Wednesday, July 16, 1969"


def test_format_launch_date_absent():
    assert format_launch_date(None) is None


def test_resolve_image_path_prefers_png(tmp_path):
    (tmp_path / "apollo11.jpg").write_bytes(b"jpg")
    (tmp_path / "apollo11.png").write_bytes(b"png")
    assert resolve_image_path("apollo11", images_dir=tmp_path) == tmp_path / "apollo11.png"


def test_resolve_image_path_missing(tmp_path):
    assert resolve_image_path("apollo11", images_dir=tmp_path) is None


def test_divider_html_uses_light_background():
    html = divider_html()
    assert LIGHT_BACKGROUND in html
    assert "height: 2px" in html


def test_crew_entry_heading():
    member = CrewMember(role="Commander", astronaut=Astronaut("armstrong", "Neil A. Armstrong", ""))
    assert crew_entry_heading(member) == "Neil A. Armstrong - Commander"
