import pytest

from terpene_map.effects import EffectMetadataLookup
from terpene_map.models import EffectMetadata, TerpeneRecord, TherapeuticGroup


def make_record(id, name, effects=(), category=None, aroma="", sources=()):
    """Helper to build a record with only the fields a test cares about."""
    return TerpeneRecord(
        id=id,
        name=name,
        aroma=aroma,
        effects=tuple(effects),
        sources=tuple(sources),
        category=category,
    )


@pytest.fixture
def record():
    return make_record


@pytest.fixture
def scenario_records():
    """The three-record catalog used across filter and sort scenarios."""
    return [
        make_record(
            "t1",
            "Limonene",
            ["energizing", "mood-enhancing"],
            "Core",
            aroma="Citrus",
            sources=["Lemon peel"],
        ),
        make_record(
            "t2", "Myrcene", ["sedative"], "Core", aroma="Earthy", sources=["Mango"]
        ),
        make_record(
            "t3", "Pinene", ["focus"], "Secondary", aroma="Pine", sources=["Rosemary"]
        ),
    ]


@pytest.fixture
def tiered_records():
    return [
        make_record("s1", "Xylose", ["focus"], "Secondary"),
        make_record("c2", "Beta", ["grounding"], "Core"),
        make_record("m1", "Zeta", ["warming"], "Minor"),
        make_record("u1", "NoCategory", [], None),
        make_record("c1", "Alpha", ["calming"], "Core"),
        make_record("u2", "Aardvark", [], "Bogus"),
    ]


@pytest.fixture
def small_lookup():
    return EffectMetadataLookup(
        [
            EffectMetadata("energizing", {"en": "Energizing", "de": "Energetisierend"}, "#FFA726", TherapeuticGroup.MOOD),
            EffectMetadata("focus", {"en": "Focus", "de": "Fokus"}, "#FF7043", TherapeuticGroup.COGNITIVE),
            EffectMetadata("sedative", {"en": "Sedative", "de": "Beruhigungsmittel"}, "#7E57C2", TherapeuticGroup.RELAXATION),
        ]
    )
