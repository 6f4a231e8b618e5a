"""
Services Package

Logic between the bundled data and the screens.

Streamlit Caching Pattern:
- Plain functions take their dependencies as arguments (testable without Streamlit)
- Process-wide results are cached with @st.cache_resource wrappers

Available Services:
- crew_service: crew resolution and the detail view model
- startup_service: typed startup load result
- catalog_service: tabular catalog views for the CLI
"""

from services.crew_service import (
    MissionDetail,
    build_mission_detail,
    find_integrity_faults,
    resolve_crew,
)
from services.startup_service import (
    StartupResult,
    get_startup_result,
    load_catalog,
)
from services.catalog_service import astronaut_flights, missions_frame

__all__ = [
    # Crew
    "MissionDetail",
    "build_mission_detail",
    "find_integrity_faults",
    "resolve_crew",
    # Startup
    "StartupResult",
    "get_startup_result",
    "load_catalog",
    # Catalog
    "astronaut_flights",
    "missions_frame",
]
