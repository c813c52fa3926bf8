"""Root -> effect -> terpene hierarchy for the sunburst chart.

The tree is built in one pass over the records into an
``effect -> records`` index, followed by one sort per list, so the cost is
linear in the number of (record, effect) pairs plus the sorts.

A record appears once under every distinct effect it lists.  Duplicate
effects inside a record collapse to one leaf, and records without effects
add nothing to the tree.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Set, Tuple

from .config import DEFAULT_EFFECT_COLOR, ROOT_NAME
from .effects import EffectMetadataLookup, default_lookup
from .models import NodeType, SunburstNode, TerpeneRecord
from .sorting import collation_key

logger = logging.getLogger(__name__)


def index_by_effect(records: Iterable[TerpeneRecord]) -> Dict[str, List[TerpeneRecord]]:
    """Map each effect id to the records carrying it (first-seen order).

    A record id is listed at most once per effect, so a record repeated in
    the input still counts once.
    """
    index: Dict[str, List[TerpeneRecord]] = {}
    seen: Set[Tuple[str, str]] = set()
    for record in records:
        # dict.fromkeys keeps first occurrence order while dropping repeats
        for effect in dict.fromkeys(record.effects):
            if not effect or not effect.strip():
                continue
            if (effect, record.id) in seen:
                continue
            seen.add((effect, record.id))
            index.setdefault(effect, []).append(record)
    return index


def _effect_node(
    effect: str, members: List[TerpeneRecord], lookup: EffectMetadataLookup
) -> SunburstNode:
    meta = lookup.lookup(effect)
    if meta is None:
        logger.debug("No metadata for effect %r; using default color", effect)
        color = DEFAULT_EFFECT_COLOR
    else:
        color = meta.color

    leaves = tuple(
        SunburstNode(
            name=record.name,
            type=NodeType.TERPENE,
            value=1,
            color=color,
            id=record.id,
        )
        for record in sorted(members, key=lambda r: (collation_key(r.name), r.id))
    )
    return SunburstNode(
        name=effect,
        type=NodeType.EFFECT,
        value=len(leaves),
        color=color,
        children=leaves,
    )


def build_tree(
    records: Iterable[TerpeneRecord],
    lookup: Optional[EffectMetadataLookup] = None,
) -> SunburstNode:
    """Build the sunburst hierarchy for ``records``.

    Parameters
    ----------
    records : Iterable[TerpeneRecord]
        Records to aggregate, usually the currently visible subset.
    lookup : EffectMetadataLookup, optional
        Source of effect colors; defaults to the bundled metadata.  Effects
        it does not know get ``DEFAULT_EFFECT_COLOR``.

    Returns
    -------
    SunburstNode
        Root node.  Effect children are ordered by value descending, then
        name; terpene leaves by name.
    """
    if lookup is None:
        lookup = default_lookup()
    index = index_by_effect(records)

    effect_nodes = [
        _effect_node(effect, members, lookup) for effect, members in index.items()
    ]
    effect_nodes.sort(key=lambda node: (-node.value, collation_key(node.name)))

    return SunburstNode(
        name=ROOT_NAME,
        type=NodeType.ROOT,
        value=sum(node.value for node in effect_nodes),
        children=tuple(effect_nodes),
    )
