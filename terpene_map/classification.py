"""Category tiers and therapeutic groupings.

:func:`resolve_category` is the single place where a raw ``category`` value
is turned into a :class:`~terpene_map.models.Category`.  Sorting, filtering
and the table labels all go through it, so an absent, blank or corrupt value
is seen as ``Uncategorized`` everywhere.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .config import CATEGORY_RANKS
from .effects import EffectMetadataLookup, default_lookup
from .labels import LabelProvider
from .models import Category, TherapeuticGroup

logger = logging.getLogger(__name__)

_KNOWN = {
    Category.CORE.value: Category.CORE,
    Category.SECONDARY.value: Category.SECONDARY,
    Category.MINOR.value: Category.MINOR,
}


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def resolve_category(value: Any) -> Category:
    """Effective tier for a raw category value (never raises)."""
    if isinstance(value, str):
        return _KNOWN.get(value.strip(), Category.UNCATEGORIZED)
    return Category.UNCATEGORIZED


def rank_of(value: Any) -> int:
    """Core 1, Secondary 2, Minor 3, anything else 4."""
    return CATEGORY_RANKS[resolve_category(value).value]


def display_label_of(value: Any, labels: Optional[LabelProvider] = None) -> str:
    """Locale-resolved tier label.

    A value that is present but not a known tier is logged as a warning so
    corrupt data can be told apart from a category that was simply left
    out.  The label returned is the same either way.
    """
    category = resolve_category(value)
    if category is Category.UNCATEGORIZED and not _is_missing(value):
        logger.warning("Invalid category %r; displaying as Uncategorized", value)
    return (labels or LabelProvider()).tier_label(category)


def category_of_effect(
    effect_id: str, lookup: Optional[EffectMetadataLookup] = None
) -> Optional[TherapeuticGroup]:
    """Therapeutic group of an effect, or ``None`` if the effect is unknown."""
    if lookup is None:
        lookup = default_lookup()
    return lookup.group_of(effect_id)
