"""Tests for the catalog scaffolding script."""

import pytest
import yaml

from scripts.new_skill import add_skill, main
from site_core.catalog import CatalogError, ContentCatalog
from site_core.models import Category


class TestAddSkill:
    """Test adding a skill to raw catalog data."""

    def test_appends_to_category(self, minimal_data):
        updated = add_skill(minimal_data, "backend", "FastAPI", "#009688", "si-fastapi")
        catalog = ContentCatalog.from_mapping(updated)

        assert [s.name for s in catalog.skills_for(Category.BACKEND)] == ["Node.js", "FastAPI"]
        assert catalog.skills_for(Category.BACKEND)[1].icon_ref == "si-fastapi"

    def test_input_is_not_modified(self, minimal_data):
        add_skill(minimal_data, "backend", "FastAPI", "#009688")
        assert len(minimal_data["skills"]["backend"]) == 1

    def test_bad_color(self, minimal_data):
        with pytest.raises(CatalogError):
            add_skill(minimal_data, "tools", "Jira", "blue")

    def test_duplicate_name(self, minimal_data):
        with pytest.raises(CatalogError, match="Duplicate skill 'Docker'"):
            add_skill(minimal_data, "tools", "Docker", "#2496ED")


class TestMain:
    """Test the command line entry point."""

    def test_writes_catalog(self, tmp_path, minimal_data, capsys):
        path = tmp_path / "catalog.yaml"
        path.write_text(yaml.safe_dump(minimal_data), encoding="utf-8")

        main(["Jira", "--category", "tools", "--color", "#0052CC", "--catalog", str(path)])

        saved = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert saved["skills"]["tools"][-1] == {"name": "Jira", "display_color": "#0052CC"}
        assert "Added 'Jira'" in capsys.readouterr().out

    def test_invalid_skill_exits_without_writing(self, tmp_path, minimal_data):
        path = tmp_path / "catalog.yaml"
        original = yaml.safe_dump(minimal_data)
        path.write_text(original, encoding="utf-8")

        with pytest.raises(SystemExit) as exc:
            main(["Jira", "--color", "#05C", "--catalog", str(path)])

        assert exc.value.code == 1
        assert path.read_text(encoding="utf-8") == original
