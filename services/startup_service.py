"""
Startup Service

Loads the bundled catalog once and reports the outcome as a typed
StartupResult instead of terminating the process. The application shell
inspects the result before building any screen: on failure it shows a
hard startup-abort state and renders nothing else.
"""

from dataclasses import dataclass
from typing import Optional

import streamlit as st

from domain.errors import StartupDataFault
from domain.models import MissionCatalog
from logging_config import setup_logging
from repositories.mission_repo import MissionRepository, get_mission_repository

logger = setup_logging(__name__, log_file="startup.log")


@dataclass(frozen=True)
class StartupResult:
    """
    Outcome of the startup load: exactly one of ``catalog`` or ``fault`` is set.

    Use StartupResult.ok() / StartupResult.failed() to build one.
    """
    catalog: Optional[MissionCatalog] = None
    fault: Optional[StartupDataFault] = None

    def __post_init__(self):
        if (self.catalog is None) == (self.fault is None):
            raise ValueError("StartupResult needs exactly one of catalog or fault")

    @classmethod
    def ok(cls, catalog: MissionCatalog) -> "StartupResult":
        return cls(catalog=catalog)

    @classmethod
    def failed(cls, fault: StartupDataFault) -> "StartupResult":
        return cls(fault=fault)

    @property
    def is_ok(self) -> bool:
        return self.catalog is not None

    @property
    def message(self) -> str:
        """Human-readable description of the fault, empty on success."""
        return "" if self.fault is None else str(self.fault)


def load_catalog(repository: MissionRepository) -> StartupResult:
    """
    Decode the bundled documents through ``repository``.

    Startup data faults are captured in the result; any other exception
    propagates.
    """
    try:
        catalog = repository.load_catalog()
    except StartupDataFault as e:
        logger.error("Startup data fault: %s", e)
        return StartupResult.failed(e)
    return StartupResult.ok(catalog)


@st.cache_resource
def get_startup_result() -> StartupResult:
    """Load the configured bundle once per process and share the result."""
    return load_catalog(get_mission_repository())
