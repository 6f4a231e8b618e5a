"""
Pytest configuration file for the Moonshot project.
This file sets up the Python path so tests can import modules from the project root,
and provides small fixture bundles so tests don't depend on the shipped data.
"""
import sys
import json
import logging
from pathlib import Path
from datetime import date

import pytest

# Add the project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from domain.models import Astronaut, CrewRole, Mission, MissionCatalog


ARMSTRONG = {
    "id": "armstrong",
    "name": "Neil A. Armstrong",
    "description": "First person to walk on the Moon.",
}
ALDRIN = {
    "id": "aldrin",
    "name": "Edwin \"Buzz\" Aldrin",
    "description": "Lunar module pilot of Apollo 11.",
}


def write_bundle(bundle_dir: Path, astronauts, missions) -> Path:
    """Write astronauts.json / missions.json into bundle_dir. None skips a file."""
    bundle_dir.mkdir(parents=True, exist_ok=True)
    if astronauts is not None:
        (bundle_dir / "astronauts.json").write_text(json.dumps(astronauts), encoding="utf-8")
    if missions is not None:
        (bundle_dir / "missions.json").write_text(json.dumps(missions), encoding="utf-8")
    return bundle_dir


@pytest.fixture
def armstrong_bundle(tmp_path):
    """One astronaut, one mission: Apollo 11 commanded by armstrong."""
    return write_bundle(
        tmp_path / "bundle",
        {"armstrong": ARMSTRONG},
        [{"id": 11, "crew": [{"name": "armstrong", "role": "Commander"}], "description": "First landing."}],
    )


@pytest.fixture
def sample_catalog():
    """Two astronauts and two missions, one of which never launched."""
    armstrong = Astronaut(**ARMSTRONG)
    aldrin = Astronaut(**ALDRIN)
    missions = (
        Mission(id=1, launch_date=None, crew=(CrewRole("aldrin", "Pilot"),), description="Never flew."),
        Mission(
            id=11,
            launch_date=date(1969, 7, 16),
            crew=(CrewRole("armstrong", "Commander"), CrewRole("aldrin", "Lunar Module Pilot")),
            description="First landing.",
        ),
    )
    return MissionCatalog(astronauts={"armstrong": armstrong, "aldrin": aldrin}, missions=missions)


@pytest.fixture
def prefs_path(tmp_path):
    return tmp_path / "prefs" / "preferences.json"


@pytest.fixture(autouse=True)
def _restore_logging():
    """CLI commands disable INFO logging process-wide; undo it after each test."""
    yield
    logging.disable(logging.NOTSET)
