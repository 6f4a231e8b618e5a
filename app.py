"""
Moonshot

Streamlit entry point: loads the bundled Apollo data, checks the startup
result, and hosts the root screen.

Run with:
    streamlit run app.py
"""

import streamlit as st

from config import get_settings_service
from screens import ContentScreen
from services.startup_service import get_startup_result
from state import get_navigator, get_view_state_store


def main():
    settings = get_settings_service()
    st.set_page_config(page_title=settings.app_title, page_icon=":material/rocket_launch:", layout="wide")

    result = get_startup_result()
    if not result.is_ok:
        st.error(f"Moonshot could not start: {result.message}")
        st.stop()

    screen = ContentScreen(
        result.catalog,
        navigator=get_navigator(),
        view_state=get_view_state_store(),
        title=settings.app_title,
        grid_columns=settings.grid_columns,
    )
    screen.render()


if __name__ == "__main__":
    main()
