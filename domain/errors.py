"""
Domain Errors

The two fault kinds the app recognises. Both describe defects in the
bundled data that ships with the app, so neither is retried or worked
around:

- StartupDataFault: a bundled document is missing or does not decode
  into the expected shape.
- CrewIntegrityError: a mission names a crew member that is absent from
  the astronaut document.
"""

from typing import Optional


class MoonshotError(Exception):
    """Base class for all application errors."""


class StartupDataFault(MoonshotError):
    """A bundled data file could not be loaded into its expected shape."""

    def __init__(self, message: str, resource: Optional[str] = None):
        super().__init__(message)
        self.resource = resource


class ResourceNotFoundError(StartupDataFault):
    """The named resource is not among the packaged assets."""


class DataDecodeError(StartupDataFault):
    """The resource exists but is not valid JSON or has the wrong shape."""


class CrewIntegrityError(MoonshotError):
    """A mission's crew references an astronaut id that does not exist."""

    def __init__(self, mission_id: int, astronaut_id: str):
        super().__init__(f"Missing {astronaut_id} (referenced by Apollo {mission_id})")
        self.mission_id = mission_id
        self.astronaut_id = astronaut_id
