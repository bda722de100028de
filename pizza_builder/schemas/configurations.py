"""
Pizza Configuration Schemas
===========================

Pydantic models for the per-product pizza pricing parameters.

Endpoint Coverage:
------------------
- GET /admin/pizza-configurations/{product_id}: Read (defaults if unset)
- PUT /admin/pizza-configurations/{product_id}: Create or replace
- PATCH /admin/pizza-configurations/{product_id}: Partial update
- DELETE /admin/pizza-configurations/{product_id}: Reset to defaults

Negative values are rejected with 400 by the configuration store rather
than by field constraints here.
"""

from typing import Optional

from pydantic import BaseModel


class PizzaConfigurationOut(BaseModel):
    """
    Attributes:
        product_id: The pizza product this applies to
        included_topping_units: Units bundled into the base price
        extra_unit_cost: Charge per unit beyond the allowance
        is_default: True when no configuration has been saved yet
    """
    product_id: str
    included_topping_units: int
    extra_unit_cost: float
    is_default: bool


class PizzaConfigurationSet(BaseModel):
    """Request model for creating or replacing a configuration."""
    included_topping_units: int
    extra_unit_cost: float


class PizzaConfigurationUpdate(BaseModel):
    """Request model for changing some configuration fields."""
    included_topping_units: Optional[int] = None
    extra_unit_cost: Optional[float] = None
