# site_core/catalog.py

from __future__ import annotations
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Tuple
import re
import logging

from pydantic import ValidationError

from .constants import HEX_COLOR_PATTERN
from .models import Category, ProjectRecord, SkillRecord

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when the content catalog is malformed. Fatal at startup, never retried."""


class ContentCatalog:
    """
    The static skills and projects shown on the site.
    Built once, validated on construction and read-only afterwards, so a single
    instance can be shared by every session without copying.
    """

    __slots__ = ("_skills", "_projects")

    def __init__(
        self,
        skills: Mapping[Category | str, Iterable[SkillRecord]],
        projects: Iterable[ProjectRecord],
    ):
        by_category: Dict[Category, Tuple[SkillRecord, ...]] = {}
        for key, records in skills.items():
            try:
                category = Category(key)
            except ValueError:
                raise CatalogError(f"Unknown skill category {key!r}") from None
            by_category[category] = tuple(records)

        # Fixed enum order, not mapping order.
        ordered = {c: by_category.get(c, ()) for c in Category}
        object.__setattr__(self, "_skills", MappingProxyType(ordered))
        object.__setattr__(self, "_projects", tuple(projects))
        self._validate()

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("ContentCatalog is immutable")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ContentCatalog:
        """Builds a catalog from raw data, e.g. the parsed catalog.yaml."""
        if not isinstance(data, Mapping):
            raise CatalogError("Catalog data must be a mapping with 'skills' and 'projects'")

        raw_skills = data.get("skills") or {}
        if not isinstance(raw_skills, Mapping):
            raise CatalogError("'skills' must map each category to a list of skills")

        skills: Dict[str, List[SkillRecord]] = {}
        for category, entries in raw_skills.items():
            if entries is not None and not isinstance(entries, list):
                raise CatalogError(f"'skills.{category}' must be a list of skills")
            skills[category] = [
                _parse_record(SkillRecord, raw, f"skills.{category}[{i}]")
                for i, raw in enumerate(entries or [])
            ]

        raw_projects = data.get("projects")
        if raw_projects is not None and not isinstance(raw_projects, list):
            raise CatalogError("'projects' must be a list of projects")

        projects = [
            _parse_record(ProjectRecord, raw, f"projects[{i}]")
            for i, raw in enumerate(raw_projects or [])
        ]
        return cls(skills, projects)

    # --- Lookups ---

    def skills_for(self, category: Category | str) -> Tuple[SkillRecord, ...]:
        return self._skills[Category(category)]

    def projects(self) -> Tuple[ProjectRecord, ...]:
        return self._projects

    def project_ids(self) -> Tuple[int, ...]:
        return tuple(p.id for p in self._projects)

    def __reduce__(self):
        return (self.__class__, (dict(self._skills), self._projects))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContentCatalog):
            return NotImplemented
        return dict(self._skills) == dict(other._skills) and self._projects == other._projects

    def __repr__(self) -> str:
        counts = ", ".join(f"{c.value}={len(s)}" for c, s in self._skills.items())
        return f"ContentCatalog(skills[{counts}], projects={len(self._projects)})"

    # --- Validation ---

    def _validate(self) -> None:
        hex_color = re.compile(HEX_COLOR_PATTERN)

        for category, records in self._skills.items():
            if not records:
                raise CatalogError(f"Category '{category.value}' defines no skills")
            seen_names = set()
            for record in records:
                if not hex_color.match(record.display_color):
                    raise CatalogError(
                        f"Skill '{record.name}' in '{category.value}' has invalid "
                        f"display_color {record.display_color!r}, expected #RRGGBB"
                    )
                if record.name in seen_names:
                    raise CatalogError(f"Duplicate skill '{record.name}' in category '{category.value}'")
                seen_names.add(record.name)

        seen_ids = set()
        for project in self._projects:
            if project.id in seen_ids:
                raise CatalogError(f"Duplicate project id {project.id} ('{project.title}')")
            seen_ids.add(project.id)

        logger.debug("Validated %r", self)


def _parse_record(model, raw: Any, where: str):
    """Validates one raw record, turning pydantic errors into a CatalogError naming the record."""
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise CatalogError(f"Invalid record at {where}: {e}") from e
