# site_core/controller.py

from __future__ import annotations
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, Tuple
import logging

from .catalog import ContentCatalog
from .models import AppearanceMode, Category, Labels, Profile
from .render import render
from .state import (
    DEFAULT_CATEGORY, DEFAULT_MODE, AppearanceController, ApplyGlobalMode, CategorySelector, ViewRoot,
)
from .tree import Node

logger = logging.getLogger(__name__)

RenderListener = Callable[[Node], None]


class PresentationController:
    """
    Root of the presentation state.

    Owns the appearance and category cells and keeps the ViewRoot and the
    rendered tree in step with them. Every change made inside `batch()` is
    folded into one update when the outermost batch ends; a change made
    outside a batch is its own update. An update whose net state equals the
    last published one publishes nothing.
    """

    def __init__(
        self,
        catalog: ContentCatalog,
        apply_global_mode: Optional[ApplyGlobalMode] = None,
        on_render: Optional[RenderListener] = None,
        profile: Optional[Profile] = None,
        labels: Optional[Labels] = None,
        initial_mode: AppearanceMode = DEFAULT_MODE,
        initial_category: Category = DEFAULT_CATEGORY,
    ):
        self.catalog = catalog
        self.profile = profile
        self.labels = labels
        self._on_render = on_render

        self.appearance = AppearanceController(initial_mode, on_change=self._mode_changed)
        self.categories = CategorySelector(initial_category)
        self.view_root = ViewRoot(apply_global_mode, initial=initial_mode)

        self._batch_depth = 0
        self._dirty = False
        self._cache: Optional[Tuple[Tuple[AppearanceMode, Category], Node]] = None
        self._published = self.state()

    # --- State ---

    @property
    def mode(self) -> AppearanceMode:
        return self.appearance.get_mode()

    @property
    def category(self) -> Category:
        return self.categories.get_active()

    def state(self) -> Tuple[AppearanceMode, Category]:
        return self.mode, self.category

    # --- Operations ---

    def toggle_theme(self) -> AppearanceMode:
        return self.appearance.toggle()

    def select_category(self, category: Category | str) -> None:
        if self.categories.select(category):
            self._changed()

    @contextmanager
    def batch(self) -> Iterator[PresentationController]:
        """Coalesces all changes made in the block into a single update."""
        self._batch_depth += 1
        try:
            yield self
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0 and self._dirty:
                self._flush()

    def view(self) -> Node:
        """The rendered tree for the current state."""
        key = self.state()
        if self._cache is None or self._cache[0] != key:
            tree = render(self.mode, self.category, self.catalog, self.profile, self.labels)
            self._cache = (key, tree)
        return self._cache[1]

    # --- Internals ---

    def _mode_changed(self, mode: AppearanceMode) -> None:
        self._changed()

    def _changed(self) -> None:
        self._dirty = True
        if self._batch_depth == 0:
            self._flush()

    def _flush(self) -> None:
        self._dirty = False
        current = self.state()
        if current == self._published:
            logger.debug("Turn ended with no net change, nothing to publish")
            return

        # The global mode flag goes first so the tree is never shown under the old mode.
        if self.view_root.active_mode != self.mode:
            self.view_root.apply(self.mode)
        self._published = current
        logger.debug("Publishing view mode='%s' category='%s'", self.mode.value, self.category.value)
        if self._on_render:
            self._on_render(self.view())
