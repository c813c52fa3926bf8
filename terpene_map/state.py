"""Filter, sort and view state held by the browsing UI.

``BrowseState`` is immutable; each transition returns a new state.  The
Shiny app rebuilds the state from its input widgets on every change and
uses ``clear_all`` to drive the reset button.  The toggle and
``handle_sort`` transitions serve click-driven front-ends (checkbox chips,
sortable column headers) that hold a single state value instead of one
widget per field.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import FrozenSet

from .config import (
    DEFAULT_EFFECT_MODE,
    DEFAULT_SORT_DIRECTION,
    DEFAULT_SORT_KEY,
    DEFAULT_VIEW,
)
from .models import Category, CombinationMode, FilterCriteria
from .sorting import SORT_KEYS, direction_sign

VIEW_MODES = ("table", "sunburst")


@dataclass(frozen=True)
class BrowseState:
    search_query: str = ""
    selected_effects: FrozenSet[str] = frozenset()
    effect_mode: CombinationMode = CombinationMode(DEFAULT_EFFECT_MODE)
    selected_categories: FrozenSet[Category] = frozenset()
    view_mode: str = DEFAULT_VIEW
    sort_key: str = DEFAULT_SORT_KEY
    sort_direction: str = DEFAULT_SORT_DIRECTION

    def __post_init__(self) -> None:
        if self.view_mode not in VIEW_MODES:
            raise ValueError(f"Unsupported view mode: {self.view_mode!r}")
        if self.sort_key not in SORT_KEYS:
            raise ValueError(f"Unsupported sort key: {self.sort_key!r}")
        direction_sign(self.sort_direction)
        object.__setattr__(self, "effect_mode", CombinationMode(self.effect_mode))
        object.__setattr__(self, "selected_effects", frozenset(self.selected_effects))
        object.__setattr__(
            self,
            "selected_categories",
            frozenset(Category(c) for c in self.selected_categories),
        )

    # -- search ---------------------------------------------------------

    def with_search(self, query: str) -> "BrowseState":
        return replace(self, search_query=(query or "").strip())

    def clear_search(self) -> "BrowseState":
        return replace(self, search_query="")

    # -- effects --------------------------------------------------------

    def toggle_effect(self, effect: str) -> "BrowseState":
        if not effect or not effect.strip():
            return self
        return replace(self, selected_effects=self.selected_effects ^ {effect})

    def clear_effects(self) -> "BrowseState":
        return replace(self, selected_effects=frozenset())

    def toggle_effect_mode(self) -> "BrowseState":
        flipped = (
            CombinationMode.AND
            if self.effect_mode is CombinationMode.OR
            else CombinationMode.OR
        )
        return replace(self, effect_mode=flipped)

    # -- categories -----------------------------------------------------

    def toggle_category(self, category: Category) -> "BrowseState":
        return replace(
            self, selected_categories=self.selected_categories ^ {Category(category)}
        )

    def clear_categories(self) -> "BrowseState":
        return replace(self, selected_categories=frozenset())

    # -- view / sort ----------------------------------------------------

    def with_view(self, view_mode: str) -> "BrowseState":
        return replace(self, view_mode=view_mode)

    def handle_sort(self, sort_key: str) -> "BrowseState":
        """Same column flips the direction; a new column starts ascending."""
        if sort_key == self.sort_key:
            flipped = "desc" if direction_sign(self.sort_direction) > 0 else "asc"
            return replace(self, sort_direction=flipped)
        return replace(self, sort_key=sort_key, sort_direction="asc")

    def clear_all(self) -> "BrowseState":
        """Drop every filter but keep the view and sort settings."""
        return replace(
            self,
            search_query="",
            selected_effects=frozenset(),
            effect_mode=CombinationMode(DEFAULT_EFFECT_MODE),
            selected_categories=frozenset(),
        )

    @property
    def has_active_filters(self) -> bool:
        return bool(
            self.search_query.strip() or self.selected_effects or self.selected_categories
        )

    def criteria(self) -> FilterCriteria:
        return FilterCriteria(
            search_query=self.search_query,
            selected_effects=self.selected_effects,
            selected_categories=self.selected_categories,
            effect_mode=self.effect_mode,
        )
