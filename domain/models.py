"""
Domain Models

Dataclasses for the bundled Apollo data: astronauts, the crew roles
embedded in each mission, and the missions themselves.

Design Principles:
1. Immutability (frozen=True) - loaded once, shared read-only by every screen
2. Factory methods - ``from_dict`` builds each model from a decoded JSON object
3. Computed properties - display strings derived on the model
"""

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Any, Mapping, Optional

from domain.converters import (
    optional_iso_date,
    require_int,
    require_list,
    require_mapping,
    require_str,
)

# Type aliases for clarity
AstronautID = str
MissionID = int


def format_complete_date(value: date) -> str:
    """Full calendar date with no time part, e.g. 'Saturday, December 21, 1968'."""
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


# =============================================================================
# Astronaut
# =============================================================================

@dataclass(frozen=True)
class Astronaut:
    """
    Biographical record for one crew member.

    Attributes:
        id: Stable identifier referenced from mission crew lists (e.g. "armstrong")
        name: Display name
        description: Biography text
    """
    id: AstronautID
    name: str
    description: str

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Astronaut":
        raw = require_mapping(raw, "astronaut")
        return cls(
            id=require_str(raw, "id"),
            name=require_str(raw, "name"),
            description=require_str(raw, "description"),
        )


# =============================================================================
# CrewRole - crew entry embedded in a Mission
# =============================================================================

@dataclass(frozen=True)
class CrewRole:
    """Pairs an astronaut id (``name``) with the role flown on a mission."""
    name: AstronautID
    role: str

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "CrewRole":
        raw = require_mapping(raw, "crew entry")
        return cls(name=require_str(raw, "name"), role=require_str(raw, "role"))


# =============================================================================
# Mission
# =============================================================================

@dataclass(frozen=True)
class Mission:
    """
    One Apollo flight.

    Attributes:
        id: Apollo mission number
        launch_date: Launch date, None for missions that never flew
        crew: Crew roles in roster order
        description: Mission highlights text
    """
    id: MissionID
    launch_date: Optional[date]
    crew: tuple[CrewRole, ...] = field(default_factory=tuple)
    description: str = ""

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Mission":
        """
        Factory method to create a Mission from a decoded JSON object.

        Field names follow the bundled document: ``id``, ``launchDate``,
        ``crew`` and ``description``.

        Raises:
            DataDecodeError: On a missing field, a wrong type, or a
                malformed launch date
        """
        raw = require_mapping(raw, "mission")
        return cls(
            id=require_int(raw, "id"),
            launch_date=optional_iso_date(raw, "launchDate"),
            crew=tuple(CrewRole.from_dict(entry) for entry in require_list(raw, "crew")),
            description=require_str(raw, "description"),
        )

    @property
    def display_name(self) -> str:
        return f"Apollo {self.id}"

    @property
    def image(self) -> str:
        """Asset key for the mission badge."""
        return f"apollo{self.id}"

    @property
    def formatted_launch_date(self) -> Optional[str]:
        """Launch date label text, or None when the mission never launched."""
        if self.launch_date is None:
            return None
        return format_complete_date(self.launch_date)


# =============================================================================
# CrewMember - view-only pairing of a role with the resolved astronaut
# =============================================================================

@dataclass(frozen=True)
class CrewMember:
    role: str
    astronaut: Astronaut


# =============================================================================
# MissionCatalog - both bundled datasets, shared read-only
# =============================================================================

@dataclass(frozen=True)
class MissionCatalog:
    """
    The loaded astronaut roster and mission list.

    Built once at startup and handed to every screen by reference. The
    astronaut mapping is wrapped in a read-only proxy so no screen can
    mutate the shared dataset.

    Attributes:
        astronauts: Astronauts keyed by id
        missions: Missions in display order
    """
    astronauts: Mapping[AstronautID, Astronaut]
    missions: tuple[Mission, ...]

    def __post_init__(self):
        if not isinstance(self.astronauts, MappingProxyType):
            object.__setattr__(self, "astronauts", MappingProxyType(dict(self.astronauts)))
        object.__setattr__(self, "missions", tuple(self.missions))

    def mission_by_id(self, mission_id: MissionID) -> Optional[Mission]:
        for mission in self.missions:
            if mission.id == mission_id:
                return mission
        return None
