# site_core/models.py

from __future__ import annotations
from enum import Enum
from typing import List, Optional, Tuple
import re

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings

from .constants import HEX_COLOR_PATTERN, PLACEHOLDER_LINKS


_HEX_COLOR_RE = re.compile(HEX_COLOR_PATTERN)


# --- Presentation Enumerations ---

class AppearanceMode(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    def flipped(self) -> AppearanceMode:
        return AppearanceMode.LIGHT if self is AppearanceMode.DARK else AppearanceMode.DARK


class Category(str, Enum):
    """Skill groupings shown as tabs in the about section, in tab order."""
    FRONTEND = "frontend"
    BACKEND = "backend"
    TOOLS = "tools"


# --- Site Configuration Models ---

class SocialLinks(BaseModel):
    github: Optional[str] = None
    linkedin: Optional[str] = None

class Profile(BaseModel):
    """Who the site is about. Feeds the hero, about, contact and footer sections."""
    name: str = ""
    role: str = ""
    badge: str = ""
    intro: str = ""
    portrait: str = ""
    portrait_title: str = ""
    portrait_caption: str = ""
    about: List[str] = []
    contact_blurb: str = ""
    email: str = ""
    social: SocialLinks = SocialLinks()
    footer_note: str = ""

class Labels(BaseModel):
    home: str = "Inicio"
    about: str = "Sobre mí"
    projects: str = "Proyectos"
    contact: str = "Contacto"
    stack_title: str = "Stack Tecnológico"
    projects_title: str = "Proyectos Destacados"
    contact_cta: str = "Contactame"
    see_projects: str = "Ver proyectos"
    send_mail: str = "Enviar Correo"
    repo: str = "GitHub"
    demo: str = "Demo"
    unavailable: str = "No disponible"
    toggle_theme: str = "Cambiar tema"
    category_frontend: str = "Frontend"
    category_backend: str = "Backend"
    category_tools: str = "Herramientas"

    def nav_items(self) -> List[str]:
        return [self.home, self.about, self.projects, self.contact]

    def category_label(self, category: Category) -> str:
        return getattr(self, f"category_{category.value}")

class SiteFeatures(BaseModel):
    developer_mode: bool = False
    show_theme_in_sidebar: bool = True

class Branding(BaseModel):
    page_icon: str = "💼"

class SiteConfig(BaseSettings):
    site_name: str = "Portafolio"
    profile: Profile = Profile()
    labels: Labels = Labels()
    features: SiteFeatures = SiteFeatures()
    branding: Branding = Branding()


    class Config:
        env_prefix = 'APP_'
        env_nested_delimiter = '__'


# --- Content Records ---

class SkillRecord(BaseModel):
    """One chip in the skills panel."""
    model_config = ConfigDict(frozen=True)

    name: str
    display_color: str
    icon_ref: str = ""

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("skill name must not be empty")
        return v

    @field_validator("display_color")
    @classmethod
    def validate_display_color(cls, v: str) -> str:
        if not _HEX_COLOR_RE.match(v):
            raise ValueError(f"display_color {v!r} is not a #RRGGBB hex color")
        return v.upper()


class ProjectRecord(BaseModel):
    """
    A featured project card.
    Either outbound link may be a placeholder ("" or "#"), which the renderer
    shows as unavailable instead of linking to it.
    """
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    description: str = ""
    tags: Tuple[str, ...] = ()
    repo_link: str = ""
    demo_link: str = ""
    image_ref: str = ""

    @field_validator("title", "description")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()

    @property
    def has_repo(self) -> bool:
        return is_available_link(self.repo_link)

    @property
    def has_demo(self) -> bool:
        return is_available_link(self.demo_link)


def is_available_link(link: Optional[str]) -> bool:
    """True if the link points somewhere, False for a placeholder marker."""
    return (link or "").strip() not in PLACEHOLDER_LINKS
