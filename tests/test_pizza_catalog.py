"""
Unit tests for the pizza customization catalog.
"""

import pytest

from pizza_builder.errors import NotFound
from pizza_builder.models import PizzaCustomization
from pizza_builder.pizza import Customization, CustomizationKind, load_catalog


class TestCatalog:
    """Tests for pick lists and lookups."""

    def test_list_active_excludes_inactive(self, catalog):
        ids = [c.id for c in catalog.list_active()]
        assert "PZ-F-004" not in ids
        assert "PZ-I-004" not in ids
        assert len(ids) == 6

    def test_flavors_in_sort_order(self, catalog):
        assert [c.name for c in catalog.flavors()] == ["Pepperoni", "Hawaiana", "Mexicana"]

    def test_sort_ties_break_by_name(self, catalog):
        # Cebolla and Champiñones share sort_order 2
        assert [c.name for c in catalog.ingredients()] == ["Tocino", "Cebolla", "Champiñones"]

    def test_resolve_returns_inactive(self, catalog):
        entry = catalog.resolve("PZ-F-004")
        assert entry is not None
        assert entry.is_active is False

    def test_resolve_unknown(self, catalog):
        assert catalog.resolve("nope") is None
        assert "nope" not in catalog

    def test_get_unknown_raises(self, catalog):
        with pytest.raises(NotFound) as exc_info:
            catalog.get("PZ-I-999")
        assert str(exc_info.value) == "Pizza customization 'PZ-I-999' not found"

    def test_is_selectable(self, catalog):
        assert catalog.is_selectable("PZ-F-001", CustomizationKind.FLAVOR)
        assert not catalog.is_selectable("PZ-F-001", CustomizationKind.INGREDIENT)
        assert not catalog.is_selectable("PZ-F-004", CustomizationKind.FLAVOR)


class TestCustomizationModel:
    """Tests for the Customization value type."""

    def test_defaults(self):
        entry = Customization(id="PZ-I-100", name="Aceitunas", kind=CustomizationKind.INGREDIENT)
        assert entry.topping_value == 1
        assert entry.is_active is True
        assert entry.sort_order == 0

    def test_ingredient_cannot_have_base_ingredients(self):
        with pytest.raises(ValueError):
            Customization(
                id="PZ-I-100",
                name="Aceitunas",
                kind=CustomizationKind.INGREDIENT,
                base_ingredients="Aceituna negra",
            )


class TestLoadCatalog:
    """Tests for building a catalog from database rows."""

    def test_loads_all_rows(self, db_session):
        db_session.add(PizzaCustomization(id="PZ-F-001", name="Pepperoni", kind="FLAVOR", topping_value=4))
        db_session.add(PizzaCustomization(id="PZ-I-001", name="Tocino", kind="INGREDIENT", is_active=False))
        db_session.commit()

        catalog = load_catalog(db_session)

        assert len(catalog) == 2
        assert catalog.get("PZ-F-001").kind == CustomizationKind.FLAVOR
        assert catalog.get("PZ-I-001").topping_value == 1
        assert catalog.list_active() == [catalog.get("PZ-F-001")]
