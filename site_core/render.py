# site_core/render.py

from __future__ import annotations
from typing import Optional, Tuple

from .catalog import ContentCatalog
from .constants import (
    ABOUT_ANCHOR, CONTACT_ANCHOR, HOME_ANCHOR, NAV_ANCHORS, PROJECTS_ANCHOR, TOP_ANCHOR,
)
from .models import (
    AppearanceMode, Category, Labels, Profile, ProjectRecord, SkillRecord, is_available_link,
)
from .tree import Node, h

# Icon shown on the theme toggle: the mode the click switches to.
TOGGLE_ICONS = {AppearanceMode.DARK: "☀", AppearanceMode.LIGHT: "☾"}

DEFAULT_PROFILE = Profile()
DEFAULT_LABELS = Labels()


def render(
    mode: AppearanceMode,
    category: Category,
    catalog: ContentCatalog,
    profile: Optional[Profile] = None,
    labels: Optional[Labels] = None,
) -> Node:
    """
    Maps the presentation state onto the visible page tree.
    Pure: the same inputs always give an equal tree. `mode` only changes the
    styling hooks, the content comes from `category` and the catalog.
    """
    mode = AppearanceMode(mode)
    category = Category(category)
    profile = profile or DEFAULT_PROFILE
    labels = labels or DEFAULT_LABELS

    return h(
        "div",
        _navbar(mode, profile, labels),
        _hero(profile, labels),
        _about(category, catalog, profile, labels),
        _projects(catalog.projects(), labels),
        _contact(profile, labels),
        _footer(profile),
        id=TOP_ANCHOR,
        class_=f"portfolio theme-{mode.value}",
        data_mode=mode.value,
    )


# --- Sections ---

def _navbar(mode: AppearanceMode, profile: Profile, labels: Labels) -> Node:
    items = [
        h("li", h("a", label, href=f"#{anchor}", class_="nav-link"))
        for anchor, label in zip(NAV_ANCHORS, labels.nav_items())
    ]
    return h(
        "nav",
        h("a", f"<{profile.name}/>", href=f"#{TOP_ANCHOR}", class_="brand"),
        h("ul", items, class_="nav-links"),
        h("span", TOGGLE_ICONS[mode], class_="theme-toggle", title=labels.toggle_theme, aria_hidden="true"),
        class_="navbar",
    )


def _hero(profile: Profile, labels: Labels) -> Node:
    portrait = None
    if profile.portrait:
        portrait = h(
            "figure",
            h("img", src=profile.portrait, alt=profile.name, class_="portrait-image"),
            h("figcaption",
              h("h3", profile.portrait_title) if profile.portrait_title else None,
              h("p", profile.portrait_caption) if profile.portrait_caption else None),
            class_="portrait",
        )

    return h(
        "section",
        h(
            "div",
            h("div", profile.badge, class_="badge") if profile.badge else None,
            h("h1", profile.name, class_="hero-name"),
            h("h2", profile.role, class_="hero-role"),
            h("p", profile.intro, class_="hero-intro") if profile.intro else None,
            h(
                "div",
                h("a", labels.contact_cta, href=f"#{CONTACT_ANCHOR}", class_="button primary"),
                h("a", labels.see_projects, href=f"#{PROJECTS_ANCHOR}", class_="button secondary"),
                class_="hero-actions",
            ),
            _social_links(profile),
            class_="hero-text",
        ),
        portrait,
        id=HOME_ANCHOR,
        class_="hero",
    )


def _about(category: Category, catalog: ContentCatalog, profile: Profile, labels: Labels) -> Node:
    tabs = [
        h(
            "span",
            labels.category_label(c),
            class_="tab active" if c == category else "tab",
            role="tab",
            aria_selected="true" if c == category else "false",
            data_category=c.value,
        )
        for c in Category
    ]
    return h(
        "section",
        h("h2", labels.about, class_="section-title"),
        h(
            "div",
            h("div", [h("p", paragraph) for paragraph in profile.about], class_="about-text"),
            h(
                "div",
                h("h3", labels.stack_title),
                h("div", tabs, class_="tabs", role="tablist"),
                h(
                    "div",
                    [_skill_chip(skill) for skill in catalog.skills_for(category)],
                    class_="skills",
                    role="tabpanel",
                    data_category=category.value,
                ),
                class_="stack-panel",
            ),
            class_="about-grid",
        ),
        id=ABOUT_ANCHOR,
        class_="about",
    )


def _skill_chip(skill: SkillRecord) -> Node:
    return h(
        "div",
        h("span", "●", class_="skill-icon", style=f"color: {skill.display_color}",
          data_icon=skill.icon_ref or None, aria_hidden="true"),
        h("span", skill.name, class_="skill-name"),
        class_="skill-chip",
    )


def _projects(projects: Tuple[ProjectRecord, ...], labels: Labels) -> Node:
    return h(
        "section",
        h("h2", labels.projects_title, class_="section-title"),
        h("div", [_project_card(p, labels) for p in projects], class_="project-grid"),
        id=PROJECTS_ANCHOR,
        class_="projects",
    )


def _project_card(project: ProjectRecord, labels: Labels) -> Node:
    image = None
    if project.image_ref:
        image = h("div", h("img", src=project.image_ref, alt=project.title), class_="project-image")

    return h(
        "article",
        image,
        h(
            "div",
            h("h3", project.title, class_="project-title"),
            h("p", project.description, class_="project-description"),
            h("div", [h("span", tag, class_="tag") for tag in project.tags], class_="tags"),
            h(
                "div",
                _outbound_link(project.repo_link, labels.repo, "repo", labels),
                _outbound_link(project.demo_link, labels.demo, "demo", labels),
                class_="project-links",
            ),
            class_="project-body",
        ),
        class_="project-card",
        data_project_id=project.id,
    )


def _outbound_link(link: str, text: str, kind: str, labels: Labels) -> Node:
    """A project link, or a disabled marker when the link is a placeholder."""
    if is_available_link(link):
        return h("a", text, href=link, class_=f"project-link {kind}",
                 target="_blank", rel="noopener noreferrer")
    return h("span", f"{text}: {labels.unavailable}", class_=f"project-link {kind} unavailable",
             aria_disabled="true")


def _contact(profile: Profile, labels: Labels) -> Node:
    if profile.email:
        mail = h("a", labels.send_mail, href=f"mailto:{profile.email}", class_="button primary mail")
    else:
        mail = h("span", f"{labels.send_mail}: {labels.unavailable}", class_="button mail unavailable",
                 aria_disabled="true")
    return h(
        "section",
        h("h2", labels.contact, class_="section-title"),
        h("p", profile.contact_blurb) if profile.contact_blurb else None,
        mail,
        _social_links(profile),
        id=CONTACT_ANCHOR,
        class_="contact",
    )


def _social_links(profile: Profile) -> Optional[Node]:
    links = []
    if profile.social.github:
        links.append(h("a", "GitHub", href=profile.social.github, class_="social github",
                       target="_blank", rel="noopener noreferrer"))
    if profile.social.linkedin:
        links.append(h("a", "LinkedIn", href=profile.social.linkedin, class_="social linkedin",
                       target="_blank", rel="noopener noreferrer"))
    if not links:
        return None
    return h("div", links, class_="social-links")


def _footer(profile: Profile) -> Node:
    note = profile.footer_note or profile.name
    return h("footer", h("p", f"© {note}" if note else ""), class_="footer")
