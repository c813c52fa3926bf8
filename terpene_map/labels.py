"""Locale-aware labels for category tiers, therapeutic groups and effects."""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

from .config import DEFAULT_LOCALE, GROUP_LABELS, SUPPORTED_LOCALES, TIER_LABELS
from .effects import EffectMetadataLookup, default_lookup
from .models import Category, TherapeuticGroup

logger = logging.getLogger(__name__)


class LabelProvider:
    """Resolve display strings for one locale, falling back to English."""

    def __init__(
        self,
        locale: str = DEFAULT_LOCALE,
        *,
        tier_labels: Mapping[str, Mapping[str, str]] = TIER_LABELS,
        group_labels: Mapping[str, Mapping[str, str]] = GROUP_LABELS,
        lookup: Optional[EffectMetadataLookup] = None,
    ):
        if locale not in SUPPORTED_LOCALES:
            logger.warning("Unsupported locale %r; using %r", locale, DEFAULT_LOCALE)
            locale = DEFAULT_LOCALE
        self.locale = locale
        self._tiers = tier_labels
        self._groups = group_labels
        self._lookup = lookup

    def _resolve(self, table: Mapping[str, Mapping[str, str]], key: str) -> str:
        for loc in (self.locale, DEFAULT_LOCALE):
            label = table.get(loc, {}).get(key)
            if label:
                return label
        return key

    def tier_label(self, category: Category) -> str:
        return self._resolve(self._tiers, Category(category).value)

    def group_label(self, group: TherapeuticGroup) -> str:
        return self._resolve(self._groups, TherapeuticGroup(group).value)

    def group_title(self, key: str) -> str:
        """Title for a sidebar group key, including the ``"other"`` bucket."""
        return self._resolve(self._groups, key)

    def effect_label(self, effect_id: str) -> str:
        lookup = self._lookup if self._lookup is not None else default_lookup()
        return lookup.display_name_of(effect_id, self.locale)

    def tier_labels(self) -> Dict[Category, str]:
        return {category: self.tier_label(category) for category in Category}
