"""
Pizza Customization Schemas
===========================

Pydantic models for managing the pizza customization catalog: the flavors
(preset topping combinations such as "Hawaiana") and the individual
ingredients (such as "Tocino") that pizza order lines pick from.

Endpoint Coverage:
------------------
- GET /admin/pizza-customizations: Paginated, filterable listing
- POST /admin/pizza-customizations: Create a customization
- GET /admin/pizza-customizations/{id}: Get one customization
- PATCH /admin/pizza-customizations/{id}: Partial update
- DELETE /admin/pizza-customizations/{id}: Soft delete
- GET /pizza/customizations: Active pick list for ordering screens

Topping Value:
--------------
Every customization carries a topping value, the number of topping units it
consumes from the product's included allowance. A flavor counts as a unit
(e.g. Pepperoni = 4); ingredients are usually 1.

Kinds:
------
- FLAVOR: a preset; may describe its recipe in base_ingredients
- INGREDIENT: a single topping; base_ingredients must be empty
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..config import DEFAULT_TOPPING_VALUE
from ..pizza.models import CustomizationKind


class PizzaCustomizationOut(BaseModel):
    """
    Response model for a catalog entry.

    Attributes:
        id: Customization identifier (e.g., "PZ-F-001")
        name: Display name
        kind: FLAVOR or INGREDIENT
        base_ingredients: Recipe text for flavors
        topping_value: Topping units consumed
        is_active: False once deactivated or deleted
        sort_order: Position in pick lists (ascending)
    """
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    kind: CustomizationKind
    base_ingredients: Optional[str] = None
    topping_value: int
    is_active: bool
    sort_order: int


class PizzaCustomizationCreate(BaseModel):
    """
    Request model for creating a customization.

    Example:
        {
            "id": "PZ-I-010",
            "name": "Tocino",
            "kind": "INGREDIENT",
            "topping_value": 1,
            "sort_order": 10
        }
    """
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    kind: CustomizationKind
    base_ingredients: Optional[str] = None
    topping_value: int = Field(default=DEFAULT_TOPPING_VALUE, ge=0)
    is_active: bool = True
    sort_order: int = 0

    @model_validator(mode="after")
    def _ingredients_only_on_flavors(self) -> "PizzaCustomizationCreate":
        if self.kind == CustomizationKind.INGREDIENT and self.base_ingredients:
            raise ValueError("base_ingredients is only allowed on FLAVOR customizations")
        return self


class PizzaCustomizationUpdate(BaseModel):
    """
    Request model for updating a customization.

    All fields are optional - only provided fields will be updated.
    """
    name: Optional[str] = Field(default=None, min_length=1)
    kind: Optional[CustomizationKind] = None
    base_ingredients: Optional[str] = None
    topping_value: Optional[int] = Field(default=None, ge=0)
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None


class PizzaCustomizationListResponse(BaseModel):
    """One page of the customization catalog."""
    items: List[PizzaCustomizationOut]
    total: int
    page: int
    limit: int
