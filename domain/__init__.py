"""
Domain Models Package

Typed, immutable structures for the bundled Apollo data and the app's
view state.

Key Components:
- Models: Astronaut, CrewRole, Mission, CrewMember, MissionCatalog
- Enums: ViewMode, Screen
- Errors: StartupDataFault (ResourceNotFoundError, DataDecodeError),
  CrewIntegrityError
"""

from domain.enums import Screen, ViewMode
from domain.errors import (
    CrewIntegrityError,
    DataDecodeError,
    MoonshotError,
    ResourceNotFoundError,
    StartupDataFault,
)
from domain.models import (
    Astronaut,
    CrewMember,
    CrewRole,
    Mission,
    MissionCatalog,
    format_complete_date,
)

__all__ = [
    # Enums
    "Screen",
    "ViewMode",
    # Errors
    "MoonshotError",
    "StartupDataFault",
    "ResourceNotFoundError",
    "DataDecodeError",
    "CrewIntegrityError",
    # Models
    "Astronaut",
    "CrewRole",
    "Mission",
    "CrewMember",
    "MissionCatalog",
    "format_complete_date",
]
