"""Tests for the pure page renderer and the tree it builds."""

import pytest

from site_core.constants import NAV_ANCHORS, PROJECTS_ANCHOR, TOP_ANCHOR
from site_core.models import AppearanceMode, Category, Profile, SocialLinks
from site_core.render import render
from site_core.tree import Node, h


def _skill_names(tree):
    return [n.text() for n in tree.find_by_class("skill-name")]


class TestTree:
    """Test the Node builder and serializer."""

    def test_attribute_names(self):
        node = h("span", "x", class_="tab", aria_selected="true", data_category="tools")
        assert node.to_html() == '<span class="tab" aria-selected="true" data-category="tools">x</span>'

    def test_text_and_attributes_are_escaped(self):
        node = h("a", "<b> & co", href='/x?a=1&b="2"')
        assert node.to_html() == '<a href="/x?a=1&amp;b=&quot;2&quot;">&lt;b&gt; &amp; co</a>'

    def test_none_children_and_attributes_are_dropped(self):
        node = h("div", None, ["a", None, ["b"]], title=None, hidden=False)
        assert node == Node("div", (), ("a", "b"))

    def test_void_tags(self):
        assert h("img", src="/a.jpg", alt="A").to_html() == '<img src="/a.jpg" alt="A">'

    def test_lookup_helpers(self):
        tree = h("div", h("p", "one", class_="x y", id="first"), h("p", "two", class_="y"))

        assert tree.find_by_id("first").text() == "one"
        assert [n.text() for n in tree.find_by_class("y")] == ["one", "two"]
        assert tree.text() == "onetwo"


class TestRender:
    """Test what the visible page contains for a given state."""

    def test_render_is_idempotent(self, catalog, site_config):
        first = render(AppearanceMode.DARK, Category.BACKEND, catalog, site_config.profile, site_config.labels)
        second = render(AppearanceMode.DARK, Category.BACKEND, catalog, site_config.profile, site_config.labels)

        assert first == second
        assert first.to_html() == second.to_html()

    @pytest.mark.parametrize("category", list(Category))
    def test_skills_panel_shows_exactly_the_category(self, catalog, category):
        tree = render(AppearanceMode.DARK, category, catalog)

        assert _skill_names(tree) == [s.name for s in catalog.skills_for(category)]
        panel = tree.find_by_class("skills")[0]
        assert panel.get("data-category") == category.value

    def test_skill_chips_use_display_color(self, catalog):
        tree = render(AppearanceMode.LIGHT, Category.FRONTEND, catalog)
        icons = tree.find_by_class("skill-icon")

        assert icons[0].get("style") == "color: #61DAFB"
        assert icons[0].get("data-icon") == "si-react"

    def test_active_tab(self, catalog):
        tree = render(AppearanceMode.DARK, Category.TOOLS, catalog)
        tabs = tree.find_by_class("tab")

        assert [t.get("data-category") for t in tabs] == ["frontend", "backend", "tools"]
        assert [t.get("aria-selected") for t in tabs] == ["false", "false", "true"]
        assert [t.text() for t in tree.find_by_class("active")] == ["Herramientas"]

    def test_projects_are_not_filtered_by_category(self, catalog):
        panels = {
            c: render(AppearanceMode.DARK, c, catalog).find_by_id(PROJECTS_ANCHOR)
            for c in Category
        }
        cards = panels[Category.FRONTEND].find_by_class("project-card")

        assert [c.get("data-project-id") for c in cards] == [str(i) for i in catalog.project_ids()]
        assert panels[Category.FRONTEND] == panels[Category.BACKEND] == panels[Category.TOOLS]

    def test_mode_only_changes_styling(self, catalog):
        dark = render(AppearanceMode.DARK, Category.BACKEND, catalog)
        light = render(AppearanceMode.LIGHT, Category.BACKEND, catalog)

        assert dark.classes == ["portfolio", "theme-dark"]
        assert light.classes == ["portfolio", "theme-light"]
        assert _skill_names(dark) == _skill_names(light)
        assert dark.find_by_id(PROJECTS_ANCHOR) == light.find_by_id(PROJECTS_ANCHOR)

    def test_section_anchors(self, catalog):
        tree = render(AppearanceMode.DARK, Category.FRONTEND, catalog)

        assert tree.get("id") == TOP_ANCHOR
        for anchor in NAV_ANCHORS:
            assert tree.find_by_id(anchor) is not None
        hrefs = [n.get("href") for n in tree.find_by_class("nav-link")]
        assert hrefs == ["#inicio", "#sobre-mí", "#proyectos", "#contacto"]

    def test_placeholder_link_is_shown_as_unavailable(self, catalog):
        tree = render(AppearanceMode.DARK, Category.FRONTEND, catalog)
        inventory = tree.find_by_class("project-card")[2]
        demo = inventory.find_by_class("demo")[0]

        assert demo.tag == "span"
        assert "unavailable" in demo.classes
        assert demo.get("href") is None
        assert demo.text() == "Demo: No disponible"
        assert inventory.find_by_class("repo")[0].tag == "a"

    def test_real_links_open_outside(self, catalog):
        tree = render(AppearanceMode.DARK, Category.FRONTEND, catalog)
        repo = tree.find_by_class("repo")[0]

        assert repo.get("href") == catalog.projects()[0].repo_link
        assert repo.get("target") == "_blank"

    def test_contact_destination(self, catalog, site_config):
        tree = render(AppearanceMode.DARK, Category.FRONTEND, catalog, site_config.profile)
        mail = tree.find_by_class("mail")[0]

        assert mail.get("href") == f"mailto:{site_config.profile.email}"

    def test_contact_without_email(self, catalog):
        tree = render(AppearanceMode.DARK, Category.FRONTEND, catalog, Profile(name="Ana"))
        mail = tree.find_by_class("mail")[0]

        assert mail.tag == "span"
        assert "unavailable" in mail.classes

    def test_profile_text_is_escaped(self, catalog):
        profile = Profile(name="<script>", social=SocialLinks(github="https://github.com/x"))
        html_out = render(AppearanceMode.DARK, Category.FRONTEND, catalog, profile).to_html()

        assert "<script>" not in html_out
        assert "&lt;&lt;script&gt;/&gt;" in html_out

    def test_toggle_icon_follows_mode(self, catalog):
        dark = render(AppearanceMode.DARK, Category.FRONTEND, catalog)
        light = render(AppearanceMode.LIGHT, Category.FRONTEND, catalog)

        assert dark.find_by_class("theme-toggle")[0].text() == "☀"
        assert light.find_by_class("theme-toggle")[0].text() == "☾"

    def test_accepts_string_values(self, catalog):
        assert render("light", "tools", catalog) == render(AppearanceMode.LIGHT, Category.TOOLS, catalog)
