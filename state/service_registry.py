"""
Service Registry

Per-session singletons kept in Streamlit session state. Objects that
must survive reruns within one browser session (the view-state store)
are created once through get_service().

Putting an instance under the service key before the app runs is how
tests inject their own store.
"""

import streamlit as st
from typing import TypeVar, Callable

T = TypeVar('T')


def get_service(service_name: str, factory: Callable[[], T]) -> T:
    """Get or create a service instance in session state.

    Args:
        service_name: Unique key for the service in session state
        factory: Zero-argument callable that creates the service instance

    Returns:
        The service instance (either cached or newly created)

    Example:
        def get_view_state_store() -> ViewStateStore:
            return get_service('view_state_store', _create_view_state_store)
    """
    if service_name not in st.session_state:
        st.session_state[service_name] = factory()
    return st.session_state[service_name]

