import streamlit as st
import logging

from site_core.catalog import CatalogError
from site_core.services import load_site_config, load_catalog
from site_core.constants import ASSETS_DIR
from site_core.utils import read_text_file
from site_view.components import (
    get_global_mode, get_session_controller, render_sidebar_controls, render_theme_toggle,
)
from site_view.presentation import apply_theme_styles, render_page

# --- Basic Configuration ---
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

def apply_global_styles():
    """Reads and injects global CSS styles."""
    try:
        css = read_text_file(ASSETS_DIR / "style.css")
        st.markdown(f"<style>{css}</style>", unsafe_allow_html=True)
    except FileNotFoundError:
        logging.warning("assets/style.css not found. Global styles will not be applied.")

def main():
    """
    The main execution flow of the Streamlit application.
    Widget callbacks have already updated the session state when this runs,
    so every change made since the last run shows up in one render pass.
    """
    # --- 1. Initial Setup ---
    site_config = load_site_config()

    st.set_page_config(
        page_title=site_config.site_name,
        page_icon=site_config.branding.page_icon or "💼",
        layout="wide",
        initial_sidebar_state="expanded",
    )
    apply_global_styles()

    # --- 2. Content Catalog (fatal if malformed) ---
    try:
        catalog = load_catalog()
    except CatalogError as e:
        logging.critical("Content catalog is invalid, the site cannot start: %s", e)
        st.error(f"The content catalog is invalid: {e}")
        st.stop()

    # --- 3. Session State ---
    controller = get_session_controller(catalog, site_config)

    # --- 4. Controls ---
    render_sidebar_controls(controller, site_config)
    if not site_config.features.show_theme_in_sidebar:
        render_theme_toggle(controller, site_config)

    # --- 5. Global Mode, then Content ---
    apply_theme_styles(get_global_mode())
    render_page(controller.view())


if __name__ == "__main__":
    main()
