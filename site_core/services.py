from __future__ import annotations
from pathlib import Path
from typing import Optional
import logging

import streamlit as st
import yaml

from .catalog import CatalogError, ContentCatalog
from .models import SiteConfig
from .utils import read_yaml_file
from .constants import CATALOG_PATH, SITE_CONFIG_PATH

logger = logging.getLogger(__name__)


# --- Configuration Loading ---

@st.cache_data(show_spinner=False)
def load_site_config(path: Optional[Path] = None) -> SiteConfig:
    """Loads the site configuration from site.yaml. APP_* environment variables fill in unset fields."""
    config_path = Path(path or SITE_CONFIG_PATH)
    if not config_path.exists():
        logger.error("%s not found, using default SiteConfig.", config_path.name)
        return SiteConfig()

    data = read_yaml_file(config_path)
    return SiteConfig(**data)


# --- Catalog Loading ---

@st.cache_resource(show_spinner=False)
def load_catalog(path: Optional[Path] = None) -> ContentCatalog:
    """
    Loads and validates the content catalog once per process.
    The catalog is read-only, so every session shares the same instance.
    Raises CatalogError on any malformed record.
    """
    catalog_path = Path(path or CATALOG_PATH)
    if not catalog_path.exists():
        raise CatalogError(f"Catalog file not found: {catalog_path}")

    try:
        data = read_yaml_file(catalog_path)
    except yaml.YAMLError as e:
        raise CatalogError(f"Catalog file {catalog_path.name} is not valid YAML: {e}") from e

    catalog = ContentCatalog.from_mapping(data)
    logger.info("Loaded %r from %s.", catalog, catalog_path.name)
    return catalog
