"""Deterministic ordering of catalog records for the table view.

String columns use a collation key that folds accents and case (so
"Éucalyptol" sorts with the E's) and keeps the raw string as a last
tie-break, which makes the order total and independent of the process
locale.

Sorting by ``category`` orders by tier rank first, then by name.  Only the
rank follows the requested direction; the name tie-break is always
ascending, so reversing the sort turns Core..Uncategorized into
Uncategorized..Core while each tier stays alphabetical.
"""

from __future__ import annotations

import unicodedata
from functools import cmp_to_key
from typing import Callable, Dict, Iterable, List, Tuple

from .classification import rank_of
from .models import TerpeneRecord

SORT_KEYS: Tuple[str, ...] = ("name", "aroma", "effects", "sources", "category")

_DIRECTIONS: Dict[str, int] = {
    "asc": 1,
    "ascending": 1,
    "desc": -1,
    "descending": -1,
}


def collation_key(text: str) -> Tuple[str, str]:
    decomposed = unicodedata.normalize("NFKD", text)
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return folded, text


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _text_comparator(extract: Callable[[TerpeneRecord], str]):
    def compare_text(a: TerpeneRecord, b: TerpeneRecord) -> int:
        return _cmp(collation_key(extract(a)), collation_key(extract(b)))

    return compare_text


_COMPARATORS = {
    "name": _text_comparator(lambda r: r.name),
    "aroma": _text_comparator(lambda r: r.aroma),
    "effects": _text_comparator(lambda r: ", ".join(r.effects)),
    "sources": _text_comparator(lambda r: ", ".join(r.sources)),
}


def direction_sign(direction: str) -> int:
    try:
        return _DIRECTIONS[direction]
    except (KeyError, TypeError):
        raise ValueError(f"Unsupported sort direction: {direction!r}") from None


def compare(
    a: TerpeneRecord, b: TerpeneRecord, sort_key: str, direction: str = "asc"
) -> int:
    """Three-way comparison: -1 (a before b), 0 (equal) or 1 (a after b).

    Raises ``ValueError`` for an unknown ``sort_key`` or ``direction``.
    """
    sign = direction_sign(direction)
    if sort_key == "category":
        by_rank = _cmp(rank_of(a.category), rank_of(b.category))
        if by_rank:
            return sign * by_rank
        return _COMPARATORS["name"](a, b)
    try:
        comparator = _COMPARATORS[sort_key]
    except KeyError:
        raise ValueError(f"Unsupported sort key: {sort_key!r}") from None
    return sign * comparator(a, b)


def sort_records(
    records: Iterable[TerpeneRecord], sort_key: str, direction: str = "asc"
) -> List[TerpeneRecord]:
    """New list of ``records`` in a total order (record ``id`` breaks remaining ties)."""
    # Validate up front so an empty input still rejects bad arguments.
    direction_sign(direction)
    if sort_key not in SORT_KEYS:
        raise ValueError(f"Unsupported sort key: {sort_key!r}")

    def full_compare(a: TerpeneRecord, b: TerpeneRecord) -> int:
        return compare(a, b, sort_key, direction) or _cmp(a.id, b.id)

    return sorted(records, key=cmp_to_key(full_compare))
