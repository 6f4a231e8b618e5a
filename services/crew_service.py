"""
Crew Service

Resolves a mission's crew roles against the astronaut roster.

Every astronaut id named in a mission's crew must exist in the roster.
A missing id is a defect in the bundled data, so resolution raises
CrewIntegrityError instead of skipping the entry or returning a shorter
roster.
"""

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from domain.errors import CrewIntegrityError
from domain.models import Astronaut, CrewMember, Mission
from logging_config import setup_logging

logger = setup_logging(__name__, log_file="crew_service.log")


def resolve_crew(mission: Mission, astronauts: Mapping[str, Astronaut]) -> tuple[CrewMember, ...]:
    """
    Pair each crew role of ``mission`` with its astronaut record.

    Args:
        mission: Mission whose crew to resolve
        astronauts: Astronauts keyed by id

    Returns:
        CrewMembers in the same order as ``mission.crew``

    Raises:
        CrewIntegrityError: If any crew role names an unknown astronaut id
    """
    crew = []
    for member in mission.crew:
        astronaut = astronauts.get(member.name)
        if astronaut is None:
            logger.error("Apollo %s references missing astronaut '%s'", mission.id, member.name)
            raise CrewIntegrityError(mission.id, member.name)
        crew.append(CrewMember(role=member.role, astronaut=astronaut))
    return tuple(crew)


@dataclass(frozen=True)
class MissionDetail:
    """Everything the detail screen renders for one mission."""
    mission: Mission
    crew: tuple[CrewMember, ...]

    @property
    def title(self) -> str:
        return self.mission.display_name

    @property
    def launch_date_label(self) -> Optional[str]:
        return self.mission.formatted_launch_date

    @property
    def description(self) -> str:
        return self.mission.description


def build_mission_detail(mission: Mission, astronauts: Mapping[str, Astronaut]) -> MissionDetail:
    """Resolve the crew and bundle it with the mission. Raises CrewIntegrityError."""
    return MissionDetail(mission=mission, crew=resolve_crew(mission, astronauts))


def find_integrity_faults(
    missions: Iterable[Mission], astronauts: Mapping[str, Astronaut]
) -> list[CrewIntegrityError]:
    """
    Check every crew reference of every mission.

    Unlike resolve_crew(), this collects all faults instead of stopping at
    the first, so a data check can report them together.
    """
    faults = []
    for mission in missions:
        for member in mission.crew:
            if member.name not in astronauts:
                faults.append(CrewIntegrityError(mission.id, member.name))
    return faults
