"""Filter predicates over the catalog.

A record passes when the search, effect and category predicates all hold.
Only the effect dimension has a configurable combination mode; category
selection is always OR since each record has exactly one tier.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Iterable, List

from .classification import resolve_category
from .config import MAX_QUERY_LENGTH
from .models import CombinationMode, FilterCriteria, TerpeneRecord

# ---------------------------------------------------------------------------
# Query sanitisation
# ---------------------------------------------------------------------------

_DANGEROUS_BLOCKS = re.compile(
    r"<(script|style|iframe|object)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL
)
_TAGS = re.compile(r"<[^>]*>")
_EVENT_HANDLERS = re.compile(r"""\bon\w+\s*=\s*("[^"]*"|'[^']*')""", re.IGNORECASE)
_SCRIPT_PROTOCOL = re.compile(r"javascript\s*:", re.IGNORECASE)
_HTML_DATA_URI = re.compile(r"data\s*:\s*text/html", re.IGNORECASE)
_MARKUP_CHARS = str.maketrans("", "", "<>`{}")
_WHITESPACE = re.compile(r"\s+")


def _strip_control(text: str) -> str:
    # Cc/Cf cover C0/C1 controls and invisible formatting characters;
    # whitespace controls are mapped to spaces instead of dropped.
    return "".join(
        " " if ch in "\t\n\r\f\v" else ch
        for ch in text
        if ch in "\t\n\r\f\v" or unicodedata.category(ch) not in ("Cc", "Cf")
    )


def sanitize_search_query(query: object) -> str:
    """Clean a free-text query before it is matched or echoed back.

    Removes script/style blocks, tags, quoted ``on...=`` handlers,
    ``javascript:`` and ``data:text/html`` prefixes, control characters and
    ``< > ` { }``, then collapses whitespace and truncates to
    ``MAX_QUERY_LENGTH``.  Letters (any script), digits, spaces and ordinary
    punctuation are kept.
    """
    if query is None:
        return ""
    text = str(query)
    text = _DANGEROUS_BLOCKS.sub(" ", text)
    text = _TAGS.sub(" ", text)
    text = _EVENT_HANDLERS.sub(" ", text)
    text = _SCRIPT_PROTOCOL.sub("", text)
    text = _HTML_DATA_URI.sub("", text)
    text = _strip_control(text).translate(_MARKUP_CHARS)
    text = _WHITESPACE.sub(" ", text).strip()
    return text[:MAX_QUERY_LENGTH]


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def coerce_mode(mode: object) -> CombinationMode:
    """Accept a ``CombinationMode`` or its string value; anything else is a caller bug."""
    try:
        return CombinationMode(mode)
    except ValueError:
        raise ValueError(f"Unsupported effect combination mode: {mode!r}") from None


def matches_search(record: TerpeneRecord, query: str) -> bool:
    needle = sanitize_search_query(query).casefold()
    if not needle:
        return True
    haystack = (record.name, record.aroma, *record.effects, *record.sources)
    return any(needle in field.casefold() for field in haystack)


def matches_effects(
    record: TerpeneRecord,
    selected: Iterable[str],
    mode: CombinationMode = CombinationMode.OR,
) -> bool:
    mode = coerce_mode(mode)
    wanted = set(selected)
    if not wanted:
        return True
    present = set(record.effects)
    if mode is CombinationMode.AND:
        return wanted <= present
    return not wanted.isdisjoint(present)


def matches_category(record: TerpeneRecord, selected: Iterable) -> bool:
    wanted = frozenset(selected)
    if not wanted:
        return True
    return resolve_category(record.category) in wanted


def matches(record: TerpeneRecord, criteria: FilterCriteria) -> bool:
    """True when ``record`` satisfies every dimension of ``criteria``."""
    return (
        matches_search(record, criteria.search_query)
        and matches_effects(record, criteria.selected_effects, criteria.effect_mode)
        and matches_category(record, criteria.selected_categories)
    )


def filter_records(
    records: Iterable[TerpeneRecord], criteria: FilterCriteria
) -> List[TerpeneRecord]:
    """Records matching ``criteria``, in input order."""
    return [record for record in records if matches(record, criteria)]
