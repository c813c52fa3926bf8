import logging

from shiny import reactive, render
from shiny.express import input, ui
from shinywidgets import render_plotly

from terpene_map.config import (
    DEFAULT_EFFECT_MODE,
    DEFAULT_LOCALE,
    DEFAULT_SORT_DIRECTION,
    DEFAULT_SORT_KEY,
    DEFAULT_VIEW,
    DIRECTION_OPTIONS,
    EFFECT_MODE_OPTIONS,
    LOCALE_OPTIONS,
    SORT_OPTIONS,
    VIEW_OPTIONS,
)
from terpene_map.data_manager import load_catalog
from terpene_map.effects import default_lookup
from terpene_map.labels import LabelProvider
from terpene_map.models import Category
from terpene_map.pipeline import effect_counts, effects_by_group, run_pipeline
from terpene_map.plotting import create_sunburst_plot
from terpene_map.state import BrowseState

logging.basicConfig(level=logging.INFO)

# Helpers for UI mapping
SORT_CHOICES = {value: label for label, value in SORT_OPTIONS}
DIRECTION_CHOICES = {value: label for label, value in DIRECTION_OPTIONS}
MODE_CHOICES = {value: label for label, value in EFFECT_MODE_OPTIONS}
VIEW_CHOICES = {value: label for label, value in VIEW_OPTIONS}
LOCALE_CHOICES = {value: label for label, value in LOCALE_OPTIONS}

# ======================================================
#  STARTUP DATA
# ======================================================
# Load once on startup; the catalog is static for the session.
RECORDS = load_catalog()
LOOKUP = default_lookup()
EFFECT_COUNTS = effect_counts(RECORDS)
EFFECT_GROUPS = effects_by_group(RECORDS, LOOKUP)
STARTUP_LABELS = LabelProvider(DEFAULT_LOCALE, lookup=LOOKUP)


def _category_choices(labels: LabelProvider):
    return {c.value: labels.tier_label(c) for c in Category}


def _effect_choices(effects, labels: LabelProvider):
    return {
        effect: f"{labels.effect_label(effect)} ({EFFECT_COUNTS.get(effect, 0)})"
        for effect in effects
    }


# ======================================================
#  REACTIVE STATE
# ======================================================


@reactive.calc
def selected_effects():
    chosen = set()
    for group_key in EFFECT_GROUPS:
        chosen.update(input[f"effects_{group_key}"]() or ())
    return frozenset(chosen)


@reactive.calc
def browse_state() -> BrowseState:
    return BrowseState(
        selected_effects=selected_effects(),
        effect_mode=input.effect_mode(),
        selected_categories=frozenset(input.categories() or ()),
        view_mode=input.view(),
        sort_key=input.sort_key(),
        sort_direction=input.sort_direction(),
    ).with_search(input.search())


@reactive.calc
def labels() -> LabelProvider:
    return LabelProvider(input.locale(), lookup=LOOKUP)


@reactive.calc
def payload():
    return run_pipeline(RECORDS, browse_state(), lookup=LOOKUP, labels=labels())


# ======================================================
#  UI LAYOUT
# ======================================================
ui.page_opts(
    title="Terpene Map",
    fillable=False,
    fillable_mobile=True,
    full_width=True,
    id="page",
    lang="en",
)

with ui.sidebar(open="always", position="left"):
    ui.input_text("search", "Search", placeholder="Name, aroma, effect or source")

    with ui.accordion(id="effect_groups", open=False):
        for group_key, effects in EFFECT_GROUPS.items():
            with ui.accordion_panel(STARTUP_LABELS.group_title(group_key), value=group_key):
                ui.input_checkbox_group(
                    f"effects_{group_key}", None, _effect_choices(effects, STARTUP_LABELS)
                )

    ui.input_radio_buttons(
        "effect_mode", "Effect matching", MODE_CHOICES, selected=DEFAULT_EFFECT_MODE
    )
    ui.input_checkbox_group("categories", "Category", _category_choices(STARTUP_LABELS))

    ui.input_select("sort_key", "Sort by", SORT_CHOICES, selected=DEFAULT_SORT_KEY)
    ui.input_radio_buttons(
        "sort_direction",
        "Direction",
        DIRECTION_CHOICES,
        selected=DEFAULT_SORT_DIRECTION,
        inline=True,
    )
    ui.input_radio_buttons("view", "View", VIEW_CHOICES, selected=DEFAULT_VIEW, inline=True)
    ui.input_select("locale", "Language", LOCALE_CHOICES, selected=DEFAULT_LOCALE)

    ui.input_action_button("reset_filters", "Reset filters", class_="btn-primary mt-3")


@reactive.effect
@reactive.event(input.reset_filters)
def _reset_filters():
    cleared = browse_state().clear_all()
    ui.update_text("search", value=cleared.search_query)
    for group_key, effects in EFFECT_GROUPS.items():
        ui.update_checkbox_group(
            f"effects_{group_key}",
            selected=[e for e in effects if e in cleared.selected_effects],
        )
    ui.update_radio_buttons("effect_mode", selected=cleared.effect_mode.value)
    ui.update_checkbox_group(
        "categories", selected=[c.value for c in cleared.selected_categories]
    )


@reactive.effect
@reactive.event(input.locale, ignore_init=True)
def _relabel_sidebar():
    current = labels()
    ui.update_checkbox_group(
        "categories",
        choices=_category_choices(current),
        selected=list(input.categories() or ()),
    )
    for group_key, effects in EFFECT_GROUPS.items():
        ui.update_accordion_panel(
            "effect_groups", group_key, title=current.group_title(group_key)
        )
        ui.update_checkbox_group(
            f"effects_{group_key}",
            choices=_effect_choices(effects, current),
            selected=list(input[f"effects_{group_key}"]() or ()),
        )


@render.text
def result_summary():
    data = payload()
    return f"Showing {len(data['visible'])} of {data['total']} terpenes"


with ui.panel_conditional("input.view === 'table'"):

    @render.data_frame
    def terpene_table():
        table = payload()["table"].drop(columns=["id"])
        return render.DataGrid(table, height=800, selection_mode="row")


with ui.panel_conditional("input.view === 'sunburst'"):

    @render_plotly
    def terpene_sunburst():
        return create_sunburst_plot(payload()["tree"], labels())
