"""Effect metadata lookup.

Maps an effect identifier to its display names, color and therapeutic
group.  Identifiers are matched after normalisation (trimmed, casefolded,
with ``-``/``_`` treated like spaces), so ``"Mood-Enhancing"`` and
``"mood enhancing"`` resolve to the same entry.

:meth:`EffectMetadataLookup.lookup` returns ``None`` for unknown effects;
callers decide on their own fallback (default color, no group, humanised
name).  Nothing here raises for an unknown identifier.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .config import DEFAULT_EFFECT_COLOR, EFFECT_METADATA
from .models import EffectMetadata, TherapeuticGroup

_SEPARATORS = re.compile(r"[\s_-]+")


def normalize_effect_id(effect_id: str) -> str:
    """Canonical lookup key for an effect identifier."""
    return _SEPARATORS.sub(" ", str(effect_id).strip().casefold())


def humanize_effect_id(effect_id: str) -> str:
    """Title-case an unknown effect id for display (``"nerve-tonic"`` -> ``"Nerve Tonic"``)."""
    words = _SEPARATORS.split(str(effect_id).strip())
    return " ".join(word[:1].upper() + word[1:] for word in words if word)


class EffectMetadataLookup:
    """Read-only effect metadata keyed by normalised effect id."""

    def __init__(self, entries: Iterable[EffectMetadata]):
        self._entries: Dict[str, EffectMetadata] = {
            normalize_effect_id(entry.effect_id): entry for entry in entries
        }

    @classmethod
    def from_table(
        cls, table: Mapping[str, Tuple[str, str, str, str]]
    ) -> "EffectMetadataLookup":
        """Build a lookup from the ``config.EFFECT_METADATA`` table layout."""
        return cls(
            EffectMetadata(
                effect_id=effect_id,
                display_names={"en": name_en, "de": name_de},
                color=color,
                group=TherapeuticGroup(group),
            )
            for effect_id, (name_en, name_de, color, group) in table.items()
        )

    def __contains__(self, effect_id: object) -> bool:
        return isinstance(effect_id, str) and normalize_effect_id(effect_id) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, effect_id: str) -> Optional[EffectMetadata]:
        if not isinstance(effect_id, str):
            return None
        return self._entries.get(normalize_effect_id(effect_id))

    def color_of(self, effect_id: str, default: str = DEFAULT_EFFECT_COLOR) -> str:
        meta = self.lookup(effect_id)
        return meta.color if meta is not None else default

    def group_of(self, effect_id: str) -> Optional[TherapeuticGroup]:
        meta = self.lookup(effect_id)
        return meta.group if meta is not None else None

    def display_name_of(self, effect_id: str, locale: str = "en") -> str:
        meta = self.lookup(effect_id)
        if meta is None:
            return humanize_effect_id(effect_id)
        return meta.display_name(locale)

    def known_effects(self) -> List[str]:
        return sorted(entry.effect_id for entry in self._entries.values())

    def effects_in_group(self, group: TherapeuticGroup) -> List[str]:
        return sorted(
            entry.effect_id for entry in self._entries.values() if entry.group == group
        )


@lru_cache(maxsize=1)
def default_lookup() -> EffectMetadataLookup:
    """Lookup built from the bundled metadata table (built once)."""
    return EffectMetadataLookup.from_table(EFFECT_METADATA)
