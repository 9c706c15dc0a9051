"""Shared fixtures: the real catalog and site config, read without Streamlit caching."""

import re

import pytest
import yaml

from site_core.catalog import ContentCatalog
from site_core.constants import CATALOG_PATH, HEX_COLOR_PATTERN, SITE_CONFIG_PATH
from site_core.models import SiteConfig

HEX_COLOR = re.compile(HEX_COLOR_PATTERN)


@pytest.fixture
def raw_catalog():
    with CATALOG_PATH.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


@pytest.fixture
def catalog(raw_catalog):
    return ContentCatalog.from_mapping(raw_catalog)


@pytest.fixture
def site_config():
    with SITE_CONFIG_PATH.open("r", encoding="utf-8") as f:
        return SiteConfig(**yaml.safe_load(f))


@pytest.fixture
def minimal_data():
    """Smallest valid catalog: one skill per category, two projects."""
    return {
        "skills": {
            "frontend": [{"name": "React", "display_color": "#61DAFB"}],
            "backend": [{"name": "Node.js", "display_color": "#339933"}],
            "tools": [{"name": "Docker", "display_color": "#2496ED"}],
        },
        "projects": [
            {"id": 10, "title": "First", "repo_link": "https://example.com/a", "demo_link": "#"},
            {"id": 20, "title": "Second", "tags": ["React", "React"]},
        ],
    }
