# site_core/state.py

from __future__ import annotations
from typing import Callable, Optional
import logging

from .models import AppearanceMode, Category

logger = logging.getLogger(__name__)

# Side effect that pushes the resolved mode onto the shared rendering surface.
ApplyGlobalMode = Callable[[AppearanceMode], None]
ModeListener = Callable[[AppearanceMode], None]

DEFAULT_MODE = AppearanceMode.DARK
DEFAULT_CATEGORY = Category.FRONTEND


class AppearanceController:
    """Owns the light/dark value. The only way to change it is `toggle`."""

    def __init__(self, initial: AppearanceMode = DEFAULT_MODE, on_change: Optional[ModeListener] = None):
        self._mode = AppearanceMode(initial)
        self._on_change = on_change

    def get_mode(self) -> AppearanceMode:
        return self._mode

    def toggle(self) -> AppearanceMode:
        """Flips the mode and notifies the listener exactly once."""
        self._mode = self._mode.flipped()
        logger.debug("Appearance mode toggled to '%s'", self._mode.value)
        if self._on_change:
            self._on_change(self._mode)
        return self._mode


class CategorySelector:
    """Owns the active skill category."""

    def __init__(self, initial: Category = DEFAULT_CATEGORY):
        self._active = Category(initial)

    def get_active(self) -> Category:
        return self._active

    def select(self, category: Category | str) -> bool:
        """
        Makes `category` the active one and returns whether anything changed.
        Raises ValueError right away for anything outside the Category enum.
        """
        new_category = Category(category)
        if new_category == self._active:
            return False
        self._active = new_category
        logger.debug("Active category set to '%s'", new_category.value)
        return True


class ViewRoot:
    """
    Holds the single global mode flag read by every rendered element.
    Starts with a mode already applied, so the flag is never unset.
    """

    def __init__(self, apply_global_mode: Optional[ApplyGlobalMode] = None, initial: AppearanceMode = DEFAULT_MODE):
        self._apply_global_mode = apply_global_mode
        self._active_mode = AppearanceMode(initial)
        self._sync()

    @property
    def active_mode(self) -> AppearanceMode:
        return self._active_mode

    def apply(self, mode: AppearanceMode) -> None:
        self._active_mode = AppearanceMode(mode)
        self._sync()

    def _sync(self) -> None:
        if self._apply_global_mode:
            self._apply_global_mode(self._active_mode)
