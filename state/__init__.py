"""
State Management Module

Presentation-layer state for the Streamlit app:
- ViewStateStore: the persisted grid/list preference
- Navigator: Collection/Detail screen state for the session
- Service registry: per-session singletons in st.session_state

Usage:
    from state import get_view_state_store, get_navigator
"""

from state.navigation import Navigator, SELECTED_MISSION_KEY
from state.service_registry import get_service
from state.view_state import ViewStateStore, DEFAULT_VIEW_MODE_KEY

VIEW_STATE_SERVICE = "view_state_store"


def _create_view_state_store() -> ViewStateStore:
    from config import get_settings_service

    settings = get_settings_service()
    return ViewStateStore(settings.preferences_path, key=settings.view_mode_key)


def get_view_state_store() -> ViewStateStore:
    """Session's ViewStateStore over the preferences file from settings.toml."""
    return get_service(VIEW_STATE_SERVICE, _create_view_state_store)


def get_navigator() -> Navigator:
    """Navigator over st.session_state; it holds no state of its own."""
    return Navigator()


__all__ = [
    'Navigator',
    'SELECTED_MISSION_KEY',
    'ViewStateStore',
    'DEFAULT_VIEW_MODE_KEY',
    'get_view_state_store',
    'get_navigator',
    # Service registry
    'get_service',
    'VIEW_STATE_SERVICE',
]
