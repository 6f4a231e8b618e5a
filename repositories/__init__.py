"""
Repository Layer Package

Access to the read-only data bundled with the app.

Key Components:
- BundleDecoder: loads a named resource and decodes it into a requested shape
- MissionRepository: the astronaut roster and mission list
"""

from repositories.bundle import AstronautMap, BundleDecoder, MissionList, Shape
from repositories.mission_repo import MissionRepository, get_mission_repository

__all__ = [
    "AstronautMap",
    "BundleDecoder",
    "MissionList",
    "Shape",
    "MissionRepository",
    "get_mission_repository",
]
