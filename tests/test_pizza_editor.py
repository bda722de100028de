"""
Tests for the interactive pizza line editor.
"""

from decimal import Decimal

from pizza_builder.pizza import (
    CustomizationAction,
    FlavorChoice,
    Half,
    IngredientEdit,
    PizzaLineEditor,
    SelectionState,
    ViolationCode,
)

PEPPERONI = "PZ-F-001"
HAWAIANA = "PZ-F-002"
CUATRO_QUESOS = "PZ-F-004"
TOCINO = "PZ-I-001"
ANCHOAS = "PZ-I-004"


# =============================================================================
# Update Cycle Tests
# =============================================================================

class TestEditorCycle:
    """Each action re-validates and prices the line."""

    def test_price_follows_every_action(self, catalog, config):
        editor = PizzaLineEditor(catalog, config)

        snapshot = editor.toggle_flavor(PEPPERONI)
        assert snapshot.changed is True
        assert snapshot.price.surcharge == Decimal("0.00")

        snapshot = editor.toggle_ingredient(TOCINO, Half.FULL)
        assert snapshot.price.total_units == 5
        assert snapshot.price.surcharge == Decimal("20.00")

    def test_second_flavor_reprices_split(self, catalog, config):
        editor = PizzaLineEditor(catalog, config)
        editor.toggle_flavor(PEPPERONI)

        snapshot = editor.toggle_flavor(HAWAIANA)

        assert editor.selection.split_mode is True
        assert snapshot.price.surcharge == Decimal("60.00")

    def test_split_switch(self, catalog, config):
        editor = PizzaLineEditor(catalog, config)
        editor.toggle_flavor(PEPPERONI)

        snapshot = editor.set_split_mode(True)

        assert snapshot.changed is True
        assert snapshot.is_valid
        assert editor.selection.flavor_for_half(Half.HALF_1) == PEPPERONI

    def test_empty_line_is_valid_while_editing(self, catalog, config):
        snapshot = PizzaLineEditor(catalog, config).snapshot()
        assert snapshot.is_valid
        assert snapshot.price.total_units == 0


# =============================================================================
# Availability Tests
# =============================================================================

class TestEditorAvailability:
    """New picks must be active; retained entries stay usable."""

    def test_inactive_flavor_ignored(self, catalog, config):
        editor = PizzaLineEditor(catalog, config)
        snapshot = editor.toggle_flavor(CUATRO_QUESOS)
        assert snapshot.changed is False
        assert editor.selection.is_empty()

    def test_ingredient_cannot_be_picked_as_flavor(self, catalog, config):
        editor = PizzaLineEditor(catalog, config)
        assert editor.toggle_flavor(TOCINO).changed is False

    def test_unknown_ingredient_ignored(self, catalog, config):
        editor = PizzaLineEditor(catalog, config)
        assert editor.toggle_ingredient("PZ-I-999", Half.FULL).changed is False

    def test_retained_inactive_entries_stay_usable(self, catalog, config):
        existing = SelectionState(
            flavors=[FlavorChoice(customization_id=CUATRO_QUESOS, half=Half.FULL)],
            ingredient_edits=[IngredientEdit(
                customization_id=ANCHOAS, half=Half.FULL, action=CustomizationAction.REMOVE,
            )],
        )
        editor = PizzaLineEditor(catalog, config, existing)

        snapshot = editor.snapshot()
        assert snapshot.is_valid
        assert snapshot.price.total_units == 3

        # Deselect and pick again while editing the same item
        editor.toggle_flavor(CUATRO_QUESOS)
        assert editor.toggle_flavor(CUATRO_QUESOS).changed is True
        assert editor.retained_ids == frozenset({CUATRO_QUESOS, ANCHOAS})


# =============================================================================
# Submission Tests
# =============================================================================

class TestEditorSubmit:
    """Submission is the blocking check."""

    def test_empty_line_blocked(self, catalog, config):
        snapshot = PizzaLineEditor(catalog, config).submit()
        assert [v.code for v in snapshot.violations] == [ViolationCode.EMPTY_PERSONALIZATION]
        assert snapshot.price is None

    def test_remove_only_blocked(self, catalog, config):
        editor = PizzaLineEditor(catalog, config)
        editor.toggle_ingredient(TOCINO, Half.FULL, CustomizationAction.REMOVE)
        assert not editor.submit().is_valid

    def test_valid_line_accepted(self, catalog, config):
        editor = PizzaLineEditor(catalog, config)
        editor.toggle_flavor(PEPPERONI)
        editor.toggle_ingredient(TOCINO, Half.FULL)

        snapshot = editor.submit()

        assert snapshot.is_valid
        assert snapshot.price.surcharge == Decimal("20.00")
        assert [r.customization_id for r in editor.records()] == [PEPPERONI, TOCINO]
