"""
Pydantic models for the pizza customization engine.

These are the value types shared by the catalog, the selection state
machine, the validator and the pricing calculator:

- Customization: a flavor or ingredient from the catalog
- FlavorChoice / IngredientEdit: what one order line has picked, per half
- CustomizationRecord: the flat persisted form of both
- PizzaConfig: per-product topping allowance and extra unit cost
- Violation: one structural problem found by the validator
- PizzaPrice: the calculator's output
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CustomizationKind(str, Enum):
    """Whether a customization is a full flavor preset or a single ingredient."""
    FLAVOR = "FLAVOR"
    INGREDIENT = "INGREDIENT"


class Half(str, Enum):
    """Region of the pizza a choice applies to."""
    FULL = "FULL"
    HALF_1 = "HALF_1"
    HALF_2 = "HALF_2"


class CustomizationAction(str, Enum):
    """Add an ingredient to, or remove it from, a half."""
    ADD = "ADD"
    REMOVE = "REMOVE"


# Halves used in each mode, in display order
WHOLE_HALVES: tuple[Half, ...] = (Half.FULL,)
SPLIT_HALVES: tuple[Half, ...] = (Half.HALF_1, Half.HALF_2)

HALF_ORDER = {Half.FULL: 0, Half.HALF_1: 1, Half.HALF_2: 2}


class ViolationCode(str, Enum):
    """Kinds of structural problems the validator reports."""
    FLAVOR_CARDINALITY = "FLAVOR_CARDINALITY"
    HALF_CONSISTENCY = "HALF_CONSISTENCY"
    EMPTY_PERSONALIZATION = "EMPTY_PERSONALIZATION"
    UNRESOLVED_REFERENCE = "UNRESOLVED_REFERENCE"
    EMPTY_HALF = "EMPTY_HALF"
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"
    INVALID_ACTION = "INVALID_ACTION"


class Customization(BaseModel):
    """
    A catalog entry: a flavor preset or an individual ingredient.

    Only flavors carry base_ingredients, the free-text recipe shown to staff
    (e.g. "Jamón, Piña" for Hawaiana).
    """
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: str
    name: str
    kind: CustomizationKind
    base_ingredients: Optional[str] = None
    topping_value: int = Field(default=1, ge=0)
    is_active: bool = True
    sort_order: int = 0

    @model_validator(mode="after")
    def _ingredients_only_on_flavors(self) -> "Customization":
        if self.kind == CustomizationKind.INGREDIENT and self.base_ingredients:
            raise ValueError("base_ingredients is only allowed on FLAVOR customizations")
        return self

    @property
    def is_flavor(self) -> bool:
        return self.kind == CustomizationKind.FLAVOR


class FlavorChoice(BaseModel):
    """A flavor placed on one half (or the whole) of the pizza."""
    model_config = ConfigDict(frozen=True)

    customization_id: str
    half: Half


class IngredientEdit(BaseModel):
    """An ingredient added to or removed from one half of the pizza."""
    model_config = ConfigDict(frozen=True)

    customization_id: str
    half: Half
    action: CustomizationAction

    @property
    def key(self) -> tuple[str, Half]:
        return (self.customization_id, self.half)


class CustomizationRecord(BaseModel):
    """
    Persisted form of one flavor choice or ingredient edit.

    Flavors are stored as ADD records; the catalog kind tells them apart
    from ingredient additions when the item is loaded again.
    """
    model_config = ConfigDict(frozen=True)

    customization_id: str
    half: Half
    action: CustomizationAction = CustomizationAction.ADD


class PizzaConfig(BaseModel):
    """Economic parameters of one pizza product."""
    model_config = ConfigDict(frozen=True, from_attributes=True)

    product_id: str
    included_topping_units: int = Field(ge=0)
    extra_unit_cost: Decimal = Field(ge=0, decimal_places=2)
    is_default: bool = False


class Violation(BaseModel):
    """One structural problem with a selection, reported instead of raised."""
    model_config = ConfigDict(frozen=True)

    code: ViolationCode
    message: str
    customization_id: Optional[str] = None
    half: Optional[Half] = None


class PizzaPrice(BaseModel):
    """Topping usage and the resulting surcharge for one pizza line."""
    model_config = ConfigDict(frozen=True)

    total_units: int
    extra_units: int
    surcharge: Decimal
    units_by_half: dict[Half, int] = Field(default_factory=dict)
    base_price: Optional[Decimal] = None
    final_price: Optional[Decimal] = None
