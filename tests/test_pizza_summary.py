"""
Tests for human-readable pizza summaries.
"""

from pizza_builder.pizza import (
    CustomizationAction,
    Half,
    SelectionState,
    format_customizations,
    summarize_by_half,
)

PEPPERONI = "PZ-F-001"
HAWAIANA = "PZ-F-002"
TOCINO = "PZ-I-001"
CEBOLLA = "PZ-I-002"


def _split_state():
    state = SelectionState()
    state.toggle_flavor(PEPPERONI)
    state.toggle_flavor(HAWAIANA)
    state.toggle_ingredient(TOCINO, Half.HALF_1, CustomizationAction.ADD)
    state.toggle_ingredient(CEBOLLA, Half.HALF_2, CustomizationAction.REMOVE)
    return state


class TestFormatCustomizations:

    def test_lines_with_halves(self, catalog):
        assert format_customizations(_split_state(), catalog) == [
            "+Pepperoni (HALF_1)",
            "+Hawaiana (HALF_2)",
            "+Tocino (HALF_1)",
            "-Cebolla (HALF_2)",
        ]

    def test_unknown_id_shown_raw(self, catalog):
        state = SelectionState()
        state.toggle_ingredient("PZ-X-001", Half.FULL, CustomizationAction.ADD)
        assert format_customizations(state, catalog) == ["+PZ-X-001 (FULL)"]


class TestSummarizeByHalf:

    def test_split_pizza(self, catalog):
        halves = summarize_by_half(_split_state(), catalog)
        assert [h.describe() for h in halves] == [
            "Half 1: Pepperoni, +Tocino",
            "Half 2: Hawaiana, -Cebolla",
        ]

    def test_half_without_flavor(self, catalog):
        state = _split_state()
        state.toggle_flavor(HAWAIANA)
        halves = summarize_by_half(state, catalog)
        assert halves[1].flavor is None
        assert halves[1].describe() == "Half 2: No flavor, -Cebolla"

    def test_whole_pizza(self, catalog):
        state = SelectionState()
        state.toggle_flavor(PEPPERONI)
        halves = summarize_by_half(state, catalog)
        assert len(halves) == 1
        assert halves[0].half == Half.FULL
        assert halves[0].describe() == "Whole pizza: Pepperoni"
