from __future__ import annotations
from typing import Dict

import streamlit as st

from site_core.models import AppearanceMode
from site_core.tree import Node


# Page-level colors for each mode. Only the active one is ever injected.
THEME_PALETTES: Dict[AppearanceMode, Dict[str, str]] = {
    AppearanceMode.LIGHT: {
        "background": "#F8FAFC",
        "surface": "#FFFFFF",
        "text": "#0F172A",
        "muted": "#475569",
        "accent": "#2563EB",
        "border": "#E2E8F0",
    },
    AppearanceMode.DARK: {
        "background": "#020617",
        "surface": "#0F172A",
        "text": "#F1F5F9",
        "muted": "#94A3B8",
        "accent": "#60A5FA",
        "border": "#1E293B",
    },
}


def theme_stylesheet(mode: AppearanceMode) -> str:
    """Builds the global stylesheet for one mode: CSS variables plus the Streamlit containers."""
    palette = THEME_PALETTES[AppearanceMode(mode)]
    variables = "".join(f"--{name}: {value};" for name, value in palette.items())
    return (
        f":root {{ {variables} color-scheme: {AppearanceMode(mode).value}; }}"
        '[data-testid="stAppViewContainer"], [data-testid="stHeader"] '
        "{ background-color: var(--background); color: var(--text); }"
        '[data-testid="stSidebar"] { background-color: var(--surface); }'
        '[data-testid="stSidebar"] * { color: var(--text); }'
    )


def apply_theme_styles(mode: AppearanceMode) -> None:
    """Injects the stylesheet of the active mode."""
    st.markdown(f"<style>{theme_stylesheet(mode)}</style>", unsafe_allow_html=True)


def render_page(tree: Node) -> None:
    """Publishes the rendered tree as one HTML block."""
    st.markdown(tree.to_html(), unsafe_allow_html=True)
