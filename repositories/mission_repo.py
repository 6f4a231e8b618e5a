"""
Mission Repository

Owns access to the two bundled documents: the astronaut roster and the
mission list. Decoding goes through BundleDecoder; this class only knows
which resource holds which shape.

Design:
- Dependency Injection - receives a BundleDecoder, doesn't build one
- get_mission_repository() builds the default instance from settings.toml
  and is cached with @st.cache_resource (bundled data never changes at runtime)
"""

from typing import Mapping, Optional

import streamlit as st

from config import get_settings_service
from domain.models import Astronaut, Mission, MissionCatalog
from logging_config import setup_logging
from repositories.bundle import AstronautMap, BundleDecoder, MissionList
from settings_service import SettingsService

logger = setup_logging(__name__, log_file="mission_repo.log")

DEFAULT_ASTRONAUTS_FILE = "astronauts.json"
DEFAULT_MISSIONS_FILE = "missions.json"


class MissionRepository:
    """
    Loads astronauts and missions from the app bundle.

    Attributes:
        decoder: BundleDecoder for the packaged data directory
        astronauts_file: Resource name of the astronaut document
        missions_file: Resource name of the mission document
    """

    def __init__(
        self,
        decoder: BundleDecoder,
        astronauts_file: str = DEFAULT_ASTRONAUTS_FILE,
        missions_file: str = DEFAULT_MISSIONS_FILE,
    ):
        self.decoder = decoder
        self.astronauts_file = astronauts_file
        self.missions_file = missions_file

    def load_astronauts(self) -> Mapping[str, Astronaut]:
        return self.decoder.decode(self.astronauts_file, AstronautMap)

    def load_missions(self) -> tuple[Mission, ...]:
        return self.decoder.decode(self.missions_file, MissionList)

    def load_catalog(self) -> MissionCatalog:
        """
        Decode both documents into a MissionCatalog.

        Raises:
            StartupDataFault: If either document is missing or malformed
        """
        astronauts = self.load_astronauts()
        missions = self.load_missions()
        logger.info(
            "Loaded %d astronauts and %d missions from %s",
            len(astronauts), len(missions), self.decoder.bundle_dir,
        )
        return MissionCatalog(astronauts=astronauts, missions=missions)

    @classmethod
    def create_default(cls, settings: Optional[SettingsService] = None) -> "MissionRepository":
        """Build a repository over the bundle configured in settings.toml."""
        settings = settings or get_settings_service()
        return cls(
            BundleDecoder(settings.data_dir),
            astronauts_file=settings.astronauts_file,
            missions_file=settings.missions_file,
        )


@st.cache_resource
def get_mission_repository() -> MissionRepository:
    """Process-wide MissionRepository over the configured bundle."""
    return MissionRepository.create_default()
