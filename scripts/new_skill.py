#!/usr/bin/env python3
# scripts/new_skill.py

from __future__ import annotations
import argparse
import copy
from pathlib import Path
from typing import Any, Dict
import sys

import yaml

# Add project root to path to allow importing from 'site_core'
ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from site_core.catalog import CatalogError, ContentCatalog
from site_core.constants import CATALOG_PATH
from site_core.models import Category


def add_skill(data: Dict[str, Any], category: str, name: str, color: str, icon: str = "") -> Dict[str, Any]:
    """
    Returns a copy of the raw catalog data with one more skill at the end of `category`.
    The result is validated as a whole, so a bad color or a duplicate name raises CatalogError.
    """
    updated = copy.deepcopy(data) if data else {}
    skills = updated.setdefault("skills", {})
    entry = {"name": name, "display_color": color}
    if icon:
        entry["icon_ref"] = icon
    skills.setdefault(category, [])
    skills[category] = list(skills[category] or []) + [entry]

    ContentCatalog.from_mapping(updated)
    return updated


def main(argv=None):
    parser = argparse.ArgumentParser(description="Add a skill to the content catalog.")
    parser.add_argument("name", help="The skill name, e.g. 'FastAPI'")
    parser.add_argument("--category", default=Category.TOOLS.value,
                        choices=[c.value for c in Category], help="Tab the skill is listed under")
    parser.add_argument("--color", required=True, help="Brand color as #RRGGBB")
    parser.add_argument("--icon", default="", help="Icon reference, e.g. 'si-fastapi'")
    parser.add_argument("--catalog", type=Path, default=CATALOG_PATH, help="Path to catalog.yaml")
    args = parser.parse_args(argv)

    data = {}
    if args.catalog.exists():
        with args.catalog.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    try:
        updated = add_skill(data, args.category, args.name, args.color, args.icon)
    except CatalogError as e:
        print(f"Error: {e}")
        sys.exit(1)

    # Note: comments in the original file are not preserved.
    with args.catalog.open("w", encoding="utf-8") as f:
        yaml.safe_dump(updated, f, sort_keys=False, allow_unicode=True)

    print(f"Added '{args.name}' to '{args.category}' in {args.catalog}")

if __name__ == "__main__":
    main()
