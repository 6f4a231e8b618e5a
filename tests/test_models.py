"""
Tests for domain models

Derived display strings, strict from_dict factories, and the read-only
MissionCatalog.
"""
from datetime import date

import pytest

from domain.errors import DataDecodeError
from domain.models import Astronaut, CrewRole, Mission, MissionCatalog, format_complete_date


class TestMissionDerivedAttributes:
    @pytest.mark.parametrize("mission_id", [1, 7, 11, 17])
    def test_display_name_and_image(self, mission_id):
        mission = Mission(id=mission_id, launch_date=None)
        assert mission.display_name == f"Apollo {mission_id}"
        assert mission.image == f"apollo{mission_id}"

    def test_formatted_launch_date_is_complete_date_without_time(self):
        mission = Mission(id=8, launch_date=date(1968, 12, 21))
        assert mission.formatted_launch_date == "Saturday, December 21, 1968"

    def test_formatted_launch_date_none_when_absent(self):
        assert Mission(id=1, launch_date=None).formatted_launch_date is None

    def test_single_digit_day_not_zero_padded(self):
        assert format_complete_date(date(1972, 12, 7)) == "Thursday, December 7, 1972"


class TestMissionFromDict:
    def test_full_record(self):
        mission = Mission.from_dict({
            "id": 11,
            "launchDate": "1969-07-16",
            "crew": [{"name": "armstrong", "role": "Commander"}, {"name": "aldrin", "role": "Lunar Module Pilot"}],
            "description": "First landing.",
        })
        assert mission.id == 11
        assert mission.launch_date == date(1969, 7, 16)
        assert mission.crew == (CrewRole("armstrong", "Commander"), CrewRole("aldrin", "Lunar Module Pilot"))
        assert mission.description == "First landing."

    def test_missing_launch_date_is_none(self):
        mission = Mission.from_dict({"id": 1, "crew": [], "description": "Never flew."})
        assert mission.launch_date is None

    def test_null_launch_date_is_none(self):
        mission = Mission.from_dict({"id": 1, "launchDate": None, "crew": [], "description": ""})
        assert mission.launch_date is None

    @pytest.mark.parametrize("bad", ["1968-13-01", "21/12/1968", "19681221", "1968-12-21T12:51:00", "", 19681221])
    def test_malformed_launch_date_is_decode_error(self, bad):
        with pytest.raises(DataDecodeError):
            Mission.from_dict({"id": 8, "launchDate": bad, "crew": [], "description": ""})

    @pytest.mark.parametrize("missing", ["id", "crew", "description"])
    def test_missing_required_field(self, missing):
        raw = {"id": 8, "crew": [], "description": "x"}
        del raw[missing]
        with pytest.raises(DataDecodeError, match=missing):
            Mission.from_dict(raw)

    def test_id_must_be_integer(self):
        with pytest.raises(DataDecodeError):
            Mission.from_dict({"id": "11", "crew": [], "description": ""})
        with pytest.raises(DataDecodeError):
            Mission.from_dict({"id": True, "crew": [], "description": ""})

    def test_crew_entry_needs_role(self):
        with pytest.raises(DataDecodeError, match="role"):
            Mission.from_dict({"id": 11, "crew": [{"name": "armstrong"}], "description": ""})


class TestAstronautFromDict:
    def test_builds_record(self):
        astronaut = Astronaut.from_dict({"id": "collins", "name": "Michael Collins", "description": "CMP"})
        assert astronaut == Astronaut("collins", "Michael Collins", "CMP")

    def test_rejects_non_object(self):
        with pytest.raises(DataDecodeError):
            Astronaut.from_dict(["collins"])

    def test_models_are_frozen(self):
        astronaut = Astronaut("collins", "Michael Collins", "CMP")
        with pytest.raises(AttributeError):
            astronaut.name = "Someone else"


class TestMissionCatalog:
    def test_astronauts_are_read_only(self, sample_catalog):
        with pytest.raises(TypeError):
            sample_catalog.astronauts["new"] = Astronaut("new", "New", "")

    def test_mission_by_id(self, sample_catalog):
        assert sample_catalog.mission_by_id(11).display_name == "Apollo 11"
        assert sample_catalog.mission_by_id(99) is None

    def test_missions_keep_order(self, sample_catalog):
        assert [m.id for m in sample_catalog.missions] == [1, 11]
