"""Browsing pipeline: filter, sort and aggregate the catalog for display.

The primary entry point is :func:`run_pipeline`, which produces everything
the UI renders for a given :class:`~terpene_map.state.BrowseState`: the
visible records in table order, the table DataFrame and the sunburst tree.
Helpers also summarise the catalog for the effect filter controls.

Nothing here caches; the app wraps these calls in reactive calcs so they
rerun only when the catalog or the state changes.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence

from .aggregation import build_tree
from .classification import category_of_effect
from .data_manager import records_to_frame
from .effects import EffectMetadataLookup, default_lookup
from .filtering import filter_records
from .labels import LabelProvider
from .models import TerpeneRecord, TherapeuticGroup
from .sorting import sort_records
from .state import BrowseState

logger = logging.getLogger(__name__)

OTHER_GROUP = "other"


def visible_records(
    records: Iterable[TerpeneRecord], state: BrowseState
) -> List[TerpeneRecord]:
    """Records passing the state's filters, in the state's sort order."""
    matched = filter_records(records, state.criteria())
    return sort_records(matched, state.sort_key, state.sort_direction)


def effect_counts(records: Iterable[TerpeneRecord]) -> Dict[str, int]:
    """Number of distinct records per effect id."""
    counts: Counter = Counter()
    for record in records:
        counts.update(e for e in set(record.effects) if e and e.strip())
    return dict(counts)


def effects_by_group(
    records: Iterable[TerpeneRecord],
    lookup: Optional[EffectMetadataLookup] = None,
) -> Dict[str, List[str]]:
    """
    Effects present in ``records`` grouped by therapeutic group.

    Keys follow the fixed group order, then ``"other"`` for effects the
    metadata does not know.  Empty groups are left out.
    """
    if lookup is None:
        lookup = default_lookup()
    grouped: Dict[str, List[str]] = {group.value: [] for group in TherapeuticGroup}
    grouped[OTHER_GROUP] = []

    for effect in sorted(effect_counts(records)):
        group = category_of_effect(effect, lookup)
        grouped[group.value if group is not None else OTHER_GROUP].append(effect)

    return {key: effects for key, effects in grouped.items() if effects}


def run_pipeline(
    records: Sequence[TerpeneRecord],
    state: BrowseState,
    *,
    lookup: Optional[EffectMetadataLookup] = None,
    labels: Optional[LabelProvider] = None,
) -> Dict[str, object]:
    """Compute every view of the catalog for ``state``.

    Returns
    -------
    Dict[str, object]
        ``visible`` (list of records in table order), ``table``
        (``pd.DataFrame``), ``tree`` (root ``SunburstNode``) and ``total``
        (catalog size).
    """
    if lookup is None:
        lookup = default_lookup()
    if labels is None:
        labels = LabelProvider(lookup=lookup)

    visible = visible_records(records, state)
    logger.debug("%d of %d records visible", len(visible), len(records))

    return {
        "visible": visible,
        "table": records_to_frame(visible, labels),
        "tree": build_tree(visible, lookup),
        "total": len(records),
    }
