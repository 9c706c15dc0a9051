from pathlib import Path

# --- Project Paths ---
# Defines the absolute root path of the project.
ROOT_DIR = Path(__file__).resolve().parents[1]
CONFIG_DIR = ROOT_DIR / "config"
ASSETS_DIR = ROOT_DIR / "assets"
SITE_CONFIG_PATH = CONFIG_DIR / "site.yaml"
CATALOG_PATH = CONFIG_DIR / "catalog.yaml"

# --- Page Anchors ---
# Section ids used by the navigation bar, in display order.
TOP_ANCHOR = "top"
HOME_ANCHOR = "inicio"
ABOUT_ANCHOR = "sobre-mí"
PROJECTS_ANCHOR = "proyectos"
CONTACT_ANCHOR = "contacto"
NAV_ANCHORS = (HOME_ANCHOR, ABOUT_ANCHOR, PROJECTS_ANCHOR, CONTACT_ANCHOR)

# --- Content Rules ---
# A display color must be a 6-digit hex string, e.g. "#61DAFB".
HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"
# Link values that mark a destination as unavailable.
PLACEHOLDER_LINKS = frozenset({"", "#"})

# --- Session Keys ---
CONTROLLER_KEY = "presentation_controller"
GLOBAL_MODE_KEY = "global_mode"
CATEGORY_WIDGET_KEY = "category_selector"
