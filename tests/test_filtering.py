from dataclasses import replace

import pytest

from terpene_map.filtering import (
    filter_records,
    matches,
    matches_effects,
    sanitize_search_query,
)
from terpene_map.models import Category, CombinationMode, FilterCriteria


def names(records):
    return [r.name for r in records]


def test_empty_criteria_matches_everything(scenario_records):
    assert filter_records(scenario_records, FilterCriteria()) == scenario_records


def test_single_effect_or(scenario_records):
    criteria = FilterCriteria(selected_effects={"focus"}, effect_mode=CombinationMode.OR)
    assert names(filter_records(scenario_records, criteria)) == ["Pinene"]


def test_two_effects_and_has_no_match(scenario_records):
    criteria = FilterCriteria(
        selected_effects={"energizing", "sedative"}, effect_mode=CombinationMode.AND
    )
    assert filter_records(scenario_records, criteria) == []


def test_two_effects_or(scenario_records):
    criteria = FilterCriteria(
        selected_effects={"energizing", "sedative"}, effect_mode="OR"
    )
    assert names(filter_records(scenario_records, criteria)) == ["Limonene", "Myrcene"]


@pytest.mark.parametrize(
    "selected",
    [{"focus"}, {"energizing", "mood-enhancing"}, {"sedative", "focus", "unknown"}],
)
def test_and_results_are_subset_of_or_results(scenario_records, selected):
    and_result = filter_records(
        scenario_records, FilterCriteria(selected_effects=selected, effect_mode="AND")
    )
    or_result = filter_records(
        scenario_records, FilterCriteria(selected_effects=selected, effect_mode="OR")
    )
    assert set(names(and_result)) <= set(names(or_result))


@pytest.mark.parametrize("mode", [CombinationMode.AND, CombinationMode.OR])
def test_record_without_effects_never_matches_effect_selection(record, mode):
    bare = record("x", "Bare", [])
    assert not matches_effects(bare, {"focus"}, mode)


def test_unknown_selected_effect_simply_does_not_match(scenario_records):
    criteria = FilterCriteria(selected_effects={"does-not-exist"})
    assert filter_records(scenario_records, criteria) == []


def test_invalid_combination_mode_is_a_caller_error(scenario_records):
    with pytest.raises(ValueError):
        matches_effects(scenario_records[0], {"focus"}, "XOR")
    with pytest.raises(ValueError):
        FilterCriteria(effect_mode="any")


@pytest.mark.parametrize(
    "query, expected",
    [
        ("limo", ["Limonene"]),
        ("LIMONENE", ["Limonene"]),
        ("earthy", ["Myrcene"]),
        ("sedat", ["Myrcene"]),
        ("rosemary", ["Pinene"]),
        ("  pine  ", ["Pinene"]),
        ("e", ["Limonene", "Myrcene", "Pinene"]),
        ("zzz", []),
    ],
)
def test_search_fields(scenario_records, query, expected):
    criteria = FilterCriteria(search_query=query)
    assert names(filter_records(scenario_records, criteria)) == expected


def test_search_does_not_look_at_description(record):
    r = record("x", "Humulene", ["antibacterial"], aroma="Hoppy")
    r = replace(r, description="Gives hops their aroma")
    assert not matches(r, FilterCriteria(search_query="gives"))


def test_search_matches_unicode_text(record):
    r = record("x", "β-Caryophyllene", ["pain relief"], aroma="Würzig")
    assert matches(r, FilterCriteria(search_query="β-cary"))
    assert matches(r, FilterCriteria(search_query="WÜRZ"))


def test_markup_in_query_is_stripped_before_matching(scenario_records):
    criteria = FilterCriteria(search_query="<b>limo</b>")
    assert names(filter_records(scenario_records, criteria)) == ["Limonene"]

    only_markup = FilterCriteria(search_query="<script>alert(1)</script>")
    assert filter_records(scenario_records, only_markup) == scenario_records


@pytest.mark.parametrize(
    "raw, clean",
    [
        ("", ""),
        (None, ""),
        ("lemon   peel", "lemon peel"),
        ("a\x00b\tc", "ab c"),
        ("<script>alert('x')</script>pine", "pine"),
        ("javascript:alert(1)", "alert(1)"),
        ('pine onclick="alert(1)"', "pine"),
        ("DATA:text/html,pine", ",pine"),
        ("it's \"lemon\"; pine", "it's \"lemon\"; pine"),
        ("{pine}`", "pine"),
        ("Lemon, pine & co. (1,8-cineole)!", "Lemon, pine & co. (1,8-cineole)!"),
        ("Gedächtnis ß 香", "Gedächtnis ß 香"),
    ],
)
def test_sanitize_search_query(raw, clean):
    assert sanitize_search_query(raw) == clean


def test_sanitize_truncates_long_queries():
    assert len(sanitize_search_query("a" * 2000)) == 500


def test_category_filter_is_or(tiered_records):
    criteria = FilterCriteria(selected_categories={Category.CORE, Category.MINOR})
    assert names(filter_records(tiered_records, criteria)) == ["Beta", "Zeta", "Alpha"]


def test_category_filter_includes_uncategorized_fallback(tiered_records):
    criteria = FilterCriteria(selected_categories={"Uncategorized"})
    assert names(filter_records(tiered_records, criteria)) == ["NoCategory", "Aardvark"]


def test_dimensions_combine_with_and(scenario_records):
    criteria = FilterCriteria(
        search_query="e",
        selected_effects={"sedative", "focus"},
        selected_categories={Category.CORE},
    )
    assert names(filter_records(scenario_records, criteria)) == ["Myrcene"]


def test_matches_is_deterministic(scenario_records):
    criteria = FilterCriteria(search_query="in", selected_effects={"focus", "sedative"})
    first = [matches(r, criteria) for r in scenario_records]
    for _ in range(5):
        assert [matches(r, criteria) for r in scenario_records] == first
