# site_view/components.py

from __future__ import annotations
import logging

import streamlit as st

from site_core.catalog import ContentCatalog
from site_core.constants import CATEGORY_WIDGET_KEY, CONTROLLER_KEY, GLOBAL_MODE_KEY
from site_core.controller import PresentationController
from site_core.models import AppearanceMode, Category, SiteConfig
from site_core.utils import clear_all_caches

logger = logging.getLogger(__name__)


def apply_global_mode(mode: AppearanceMode) -> None:
    """ViewRoot callback: stores the one global mode flag for this session."""
    st.session_state[GLOBAL_MODE_KEY] = mode.value


def get_global_mode() -> AppearanceMode:
    return AppearanceMode(st.session_state[GLOBAL_MODE_KEY])


def get_session_controller(catalog: ContentCatalog, site_config: SiteConfig) -> PresentationController:
    """
    Returns this session's controller, creating it on the first run.
    If the shared catalog was reloaded (e.g. after clearing caches) the
    controller is rebuilt around it, keeping the current mode and category.
    """
    controller = st.session_state.get(CONTROLLER_KEY)
    if controller is not None and controller.catalog is catalog:
        return controller

    kwargs = {}
    if controller is not None:
        kwargs = {"initial_mode": controller.mode, "initial_category": controller.category}
        logger.info("Catalog changed, rebuilding the session controller.")

    controller = PresentationController(
        catalog,
        apply_global_mode=apply_global_mode,
        profile=site_config.profile,
        labels=site_config.labels,
        **kwargs,
    )
    st.session_state[CONTROLLER_KEY] = controller
    return controller


# Widget callbacks resolve the controller from session state at call time.

def _on_theme_toggle():
    st.session_state[CONTROLLER_KEY].toggle_theme()

def _on_category_change():
    st.session_state[CONTROLLER_KEY].select_category(st.session_state[CATEGORY_WIDGET_KEY])


def render_theme_toggle(controller: PresentationController, site_config: SiteConfig, container=st) -> None:
    """Renders the light/dark switch. The label names the mode it switches to."""
    icon = "☀️" if controller.mode is AppearanceMode.DARK else "🌙"
    container.button(
        f"{icon} {site_config.labels.toggle_theme}",
        key="theme_toggle",
        on_click=_on_theme_toggle,
    )


def render_sidebar_controls(controller: PresentationController, site_config: SiteConfig) -> None:
    """Renders the sidebar: theme switch, skill category selector and developer tools."""
    labels = site_config.labels
    st.sidebar.header(labels.stack_title)

    if site_config.features.show_theme_in_sidebar:
        render_theme_toggle(controller, site_config, container=st.sidebar)

    categories = list(Category)
    st.sidebar.radio(
        label=labels.stack_title,
        options=categories,
        index=categories.index(controller.category),
        format_func=labels.category_label,
        key=CATEGORY_WIDGET_KEY,
        on_change=_on_category_change,
        label_visibility="collapsed",
    )

    if site_config.features.developer_mode:
        st.sidebar.caption(f"Developer mode is ON ({controller.mode.value} / {controller.category.value})")
        st.sidebar.button("Clear App Caches", on_click=clear_all_caches)
