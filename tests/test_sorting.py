import random

import pytest

from terpene_map.classification import rank_of
from terpene_map.sorting import collation_key, compare, sort_records


def names(records):
    return [r.name for r in records]


def test_category_ascending_with_name_tie_break(scenario_records):
    shuffled = [scenario_records[2], scenario_records[1], scenario_records[0]]
    assert names(sort_records(shuffled, "category", "asc")) == [
        "Limonene",
        "Myrcene",
        "Pinene",
    ]


def test_category_ranks_are_non_decreasing(tiered_records):
    ordered = sort_records(tiered_records, "category", "asc")
    ranks = [rank_of(r.category) for r in ordered]
    assert ranks == sorted(ranks)
    assert names(ordered) == ["Alpha", "Beta", "Xylose", "Zeta", "Aardvark", "NoCategory"]


def test_invalid_category_sorts_after_every_valid_tier(record):
    records = [
        record("a", "Aaa", category="Bogus"),
        record("z", "Zzz", category="Minor"),
        record("m", "Mmm", category="Core"),
    ]
    assert names(sort_records(records, "category")) == ["Mmm", "Zzz", "Aaa"]


def test_category_descending_flips_tiers_but_keeps_names_ascending(tiered_records):
    ordered = sort_records(tiered_records, "category", "desc")
    assert names(ordered) == ["Aardvark", "NoCategory", "Zeta", "Xylose", "Alpha", "Beta"]


@pytest.mark.parametrize("direction", ["asc", "ascending"])
def test_name_ascending(tiered_records, direction):
    assert names(sort_records(tiered_records, "name", direction)) == [
        "Aardvark",
        "Alpha",
        "Beta",
        "NoCategory",
        "Xylose",
        "Zeta",
    ]


def test_name_descending_is_reverse_of_ascending(tiered_records):
    asc = names(sort_records(tiered_records, "name", "asc"))
    desc = names(sort_records(tiered_records, "name", "descending"))
    assert desc == list(reversed(asc))


def test_text_comparison_ignores_case_and_accents(record):
    records = [
        record("1", "eucalyptol"),
        record("2", "Éucalyptus"),
        record("3", "Delta"),
        record("4", "Farnesene"),
    ]
    assert names(sort_records(records, "name")) == [
        "Delta",
        "eucalyptol",
        "Éucalyptus",
        "Farnesene",
    ]


def test_effects_compare_joined_string(record):
    a = record("a", "A", ["focus", "sedative"])
    b = record("b", "B", ["focus"])
    c = record("c", "C", ["anti-inflammatory"])
    assert names(sort_records([a, b, c], "effects")) == ["C", "B", "A"]


def test_aroma_and_sources_keys(record):
    a = record("a", "A", aroma="Woody", sources=["Pine"])
    b = record("b", "B", aroma="citrus", sources=["Lemon", "Orange"])
    assert names(sort_records([a, b], "aroma")) == ["B", "A"]
    assert names(sort_records([a, b], "sources")) == ["B", "A"]


def test_compare_is_three_way(scenario_records):
    limonene, myrcene, pinene = scenario_records
    assert compare(limonene, myrcene, "name", "asc") == -1
    assert compare(limonene, myrcene, "name", "desc") == 1
    assert compare(limonene, limonene, "name", "asc") == 0
    assert compare(pinene, myrcene, "category", "asc") == 1
    assert compare(pinene, myrcene, "category", "desc") == -1


def test_category_tie_break_ignores_direction(scenario_records):
    limonene, myrcene, _ = scenario_records
    assert compare(limonene, myrcene, "category", "asc") == -1
    assert compare(limonene, myrcene, "category", "desc") == -1


def test_equal_records_are_ordered_by_id(record):
    records = [record("b", "Same"), record("a", "Same"), record("c", "Same")]
    assert [r.id for r in sort_records(records, "name")] == ["a", "b", "c"]


def test_sort_is_deterministic_regardless_of_input_order(tiered_records):
    expected = sort_records(tiered_records, "category")
    rng = random.Random(7)
    for _ in range(10):
        shuffled = list(tiered_records)
        rng.shuffle(shuffled)
        assert sort_records(shuffled, "category") == expected


def test_sort_does_not_mutate_input(tiered_records):
    before = list(tiered_records)
    sort_records(tiered_records, "name", "desc")
    assert tiered_records == before


@pytest.mark.parametrize("key, direction", [("weight", "asc"), ("name", "up"), ("name", None)])
def test_invalid_arguments_raise(scenario_records, key, direction):
    with pytest.raises(ValueError):
        sort_records(scenario_records, key, direction)
    with pytest.raises(ValueError):
        compare(scenario_records[0], scenario_records[1], key, direction)


def test_invalid_arguments_raise_on_empty_input():
    with pytest.raises(ValueError):
        sort_records([], "weight")


def test_collation_key_is_total():
    assert collation_key("abc") != collation_key("ABC")
    assert collation_key("abc")[0] == collation_key("ABC")[0]
