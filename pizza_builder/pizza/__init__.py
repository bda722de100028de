"""
Pizza Customization Engine.

Lets a pizza order line pick one or two flavors, split the pizza into
halves, add or remove ingredients per half, and prices the toppings used
beyond the product's included allowance.

- catalog: the flavors and ingredients available
- configuration: per-product allowance and extra unit cost
- selection: the state machine for one order line
- validators: structural checks, reported as violations
- pricing: topping units -> surcharge
- records / summary: persisted and human-readable forms
- editor: the mutate -> validate -> price cycle for interactive screens
"""

from .models import (
    Customization,
    CustomizationAction,
    CustomizationKind,
    CustomizationRecord,
    FlavorChoice,
    Half,
    IngredientEdit,
    PizzaConfig,
    PizzaPrice,
    Violation,
    ViolationCode,
)
from .catalog import Catalog, load_catalog
from .configuration import PizzaConfigurationStore, default_config
from .selection import SelectionMode, SelectionState
from .pricing import PricingEngine, round_money
from .records import selection_from_records, to_records
from .validators import validate_candidate, validate_selection, violation_messages
from .summary import HalfSummary, format_customizations, summarize_by_half
from .editor import EditorSnapshot, PizzaLineEditor

__all__ = [
    "Customization",
    "CustomizationAction",
    "CustomizationKind",
    "CustomizationRecord",
    "FlavorChoice",
    "Half",
    "IngredientEdit",
    "PizzaConfig",
    "PizzaPrice",
    "Violation",
    "ViolationCode",
    "Catalog",
    "load_catalog",
    "PizzaConfigurationStore",
    "default_config",
    "SelectionMode",
    "SelectionState",
    "PricingEngine",
    "round_money",
    "selection_from_records",
    "to_records",
    "validate_candidate",
    "validate_selection",
    "violation_messages",
    "HalfSummary",
    "format_customizations",
    "summarize_by_half",
    "EditorSnapshot",
    "PizzaLineEditor",
]
