"""Data manager for loading and caching the terpene catalog.

The catalog is a JSON document, read from a local path or fetched over
HTTP(S).  Three layouts are accepted: a bare list of entries, an object
with an ``entries`` list, or the full database export where the list sits
under ``terpene_database_schema.entries``.

Entries are assumed to be validated upstream.  This module only guards
against what still slips through: entries that are not objects or lack an
``id``/``name`` are skipped with a warning, and missing array fields become
empty tuples (see :meth:`TerpeneRecord.from_dict`).
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import pandas as pd
import requests

from .classification import display_label_of
from .config import CATALOG_SOURCE, REQUEST_TIMEOUT
from .labels import LabelProvider
from .models import TerpeneRecord

logger = logging.getLogger(__name__)

TABLE_COLUMNS: List[str] = ["id", "Name", "Aroma", "Effects", "Sources", "Category"]


# ---------------------------------------------------------------------------
# Source resolution
# ---------------------------------------------------------------------------


def _read_source(source: str) -> str:
    """Return the raw catalog text for a URL or a local path."""
    if source.lower().startswith(("http://", "https://")):
        response = requests.get(source, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
        return response.text

    path = Path(source).expanduser()
    if not path.exists():
        raise FileNotFoundError(f"Catalog not found at {path}")
    return path.read_text(encoding="utf-8")


def _extract_entries(payload: Any) -> List[Any]:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        schema = payload.get("terpene_database_schema")
        if isinstance(schema, dict) and isinstance(schema.get("entries"), list):
            return schema["entries"]
        if isinstance(payload.get("entries"), list):
            return payload["entries"]
    raise ValueError("Catalog payload does not contain a list of entries.")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_entries(raw: Iterable[Any]) -> Tuple[Tuple[TerpeneRecord, ...], int]:
    """Turn raw entries into records.

    Returns
    -------
    Tuple[Tuple[TerpeneRecord, ...], int]
        The records that could be built and the number of skipped entries.
    """
    records: List[TerpeneRecord] = []
    skipped = 0
    for position, entry in enumerate(raw):
        if not isinstance(entry, dict):
            logger.warning("Skipping catalog entry %d: not an object", position)
            skipped += 1
            continue
        record = TerpeneRecord.from_dict(entry)
        if not record.id or not record.name:
            logger.warning("Skipping catalog entry %d: missing id or name", position)
            skipped += 1
            continue
        records.append(record)
    return tuple(records), skipped


@lru_cache(maxsize=8)
def _load_cached(source: str) -> Tuple[TerpeneRecord, ...]:
    try:
        payload = json.loads(_read_source(source))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Catalog at {source} is not valid JSON: {exc}") from exc

    records, skipped = parse_entries(_extract_entries(payload))
    if skipped:
        logger.warning("%d catalog entries were skipped due to invalid data", skipped)
    logger.info("Loaded %d terpenes from %s", len(records), source)
    return records


def load_catalog(
    source: str = CATALOG_SOURCE, force_reload: bool = False
) -> Tuple[TerpeneRecord, ...]:
    """
    Load the catalog, reusing the cached result for a source already read.

    Parameters
    ----------
    source : str
        Local path or HTTP(S) URL of the catalog JSON.
    force_reload : bool, optional
        If ``True``, drop cached catalogs and read ``source`` again.

    Returns
    -------
    Tuple[TerpeneRecord, ...]
        Records in catalog order.
    """
    if force_reload:
        _load_cached.cache_clear()
    return _load_cached(str(source))


# ---------------------------------------------------------------------------
# Table view
# ---------------------------------------------------------------------------


def records_to_frame(
    records: Sequence[TerpeneRecord],
    labels: Optional[LabelProvider] = None,
) -> pd.DataFrame:
    """Display frame for the table widget, one row per record, order kept."""
    labels = labels or LabelProvider()
    rows = [
        {
            "id": record.id,
            "Name": record.name,
            "Aroma": record.aroma,
            "Effects": ", ".join(labels.effect_label(e) for e in record.effects),
            "Sources": ", ".join(record.sources),
            "Category": display_label_of(record.category, labels),
        }
        for record in records
    ]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)
