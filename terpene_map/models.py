"""Value types shared by the engine.

Every type here is an immutable value: records, filter criteria and tree
nodes are rebuilt on each call rather than mutated.  ``TerpeneRecord`` keeps
the raw ``category`` exactly as loaded; use
:func:`terpene_map.classification.resolve_category` to get the effective
tier.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from collections.abc import Iterable, Mapping
from typing import Any, Dict, FrozenSet, Optional, Tuple


class Category(str, Enum):
    CORE = "Core"
    SECONDARY = "Secondary"
    MINOR = "Minor"
    UNCATEGORIZED = "Uncategorized"


class TherapeuticGroup(str, Enum):
    MOOD = "mood"
    COGNITIVE = "cognitive"
    RELAXATION = "relaxation"
    PHYSICAL = "physical"


class CombinationMode(str, Enum):
    AND = "AND"
    OR = "OR"


class NodeType(str, Enum):
    ROOT = "root"
    EFFECT = "effect"
    TERPENE = "terpene"


# Fields read by the engine; everything else is passed through in ``extra``.
_RECORD_FIELDS = ("id", "name", "aroma", "description", "sources", "effects", "category")


def _as_str_tuple(value: Any) -> Tuple[str, ...]:
    """Coerce an array-like field to a tuple of strings.

    Missing or structurally wrong values (``None``, a number, a mapping)
    become an empty tuple; a bare string is treated as a single item.
    """
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Mapping) or not isinstance(value, Iterable):
        return ()
    return tuple(str(item) for item in value if item is not None)


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class TerpeneRecord:
    """One catalog entry."""

    id: str
    name: str
    aroma: str = ""
    description: str = ""
    sources: Tuple[str, ...] = ()
    effects: Tuple[str, ...] = ()
    category: Optional[Any] = None
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TerpeneRecord":
        """Build a record from a raw catalog mapping.

        Missing array fields become empty tuples so the record still shows
        up in the catalog while contributing nothing to effect filters or
        the hierarchy.
        """
        return cls(
            id=_as_str(data.get("id")),
            name=_as_str(data.get("name")),
            aroma=_as_str(data.get("aroma")),
            description=_as_str(data.get("description")),
            sources=_as_str_tuple(data.get("sources")),
            effects=_as_str_tuple(data.get("effects")),
            category=data.get("category"),
            extra={k: v for k, v in data.items() if k not in _RECORD_FIELDS},
        )

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = dict(self.extra)
        payload.update(
            {
                "id": self.id,
                "name": self.name,
                "aroma": self.aroma,
                "description": self.description,
                "sources": list(self.sources),
                "effects": list(self.effects),
                "category": self.category,
            }
        )
        return payload


@dataclass(frozen=True)
class EffectMetadata:
    effect_id: str
    display_names: Mapping[str, str]
    color: str
    group: TherapeuticGroup

    def display_name(self, locale: str, fallback_locale: str = "en") -> str:
        return (
            self.display_names.get(locale)
            or self.display_names.get(fallback_locale)
            or self.effect_id
        )


@dataclass(frozen=True)
class FilterCriteria:
    """Composite filter applied to every record.

    ``selected_categories`` is always combined with OR: a record sits in a
    single tier, so there is no AND mode for categories.
    """

    search_query: str = ""
    selected_effects: FrozenSet[str] = frozenset()
    selected_categories: FrozenSet[Category] = frozenset()
    effect_mode: CombinationMode = CombinationMode.OR

    def __post_init__(self) -> None:
        # Accept any iterable from callers but store frozensets.
        object.__setattr__(self, "selected_effects", frozenset(self.selected_effects))
        object.__setattr__(
            self,
            "selected_categories",
            frozenset(Category(c) for c in self.selected_categories),
        )
        object.__setattr__(self, "effect_mode", CombinationMode(self.effect_mode))


@dataclass(frozen=True)
class SunburstNode:
    name: str
    type: NodeType
    value: int = 0
    color: Optional[str] = None
    children: Optional[Tuple["SunburstNode", ...]] = None
    id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Plain nested dict; absent keys are omitted."""
        node: Dict[str, Any] = {"name": self.name, "type": self.type.value, "value": self.value}
        if self.color is not None:
            node["color"] = self.color
        if self.id is not None:
            node["id"] = self.id
        if self.children is not None:
            node["children"] = [child.to_dict() for child in self.children]
        return node
