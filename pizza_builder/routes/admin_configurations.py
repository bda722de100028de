"""
Admin Pizza Configuration Routes
================================

Admin endpoints for the per-product pizza pricing parameters: the number of
topping units included in the base price and the cost of each extra unit.

Endpoints:
----------
- GET /admin/pizza-configurations/{product_id}: Read (defaults if unset)
- PUT /admin/pizza-configurations/{product_id}: Create or replace
- PATCH /admin/pizza-configurations/{product_id}: Partial update
- DELETE /admin/pizza-configurations/{product_id}: Reset to defaults

Defaults:
---------
A product that was never configured reports the defaults from config.py
with is_default set to true. Deleting a configuration returns the product
to those defaults.

Authentication:
---------------
All endpoints require admin authentication via HTTP Basic Auth.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from ..auth import verify_admin_credentials
from ..db import get_db
from ..errors import InvalidConfig, NotFound
from ..pizza.configuration import PizzaConfigurationStore
from ..pizza.models import PizzaConfig
from ..schemas.configurations import (
    PizzaConfigurationOut,
    PizzaConfigurationSet,
    PizzaConfigurationUpdate,
)


logger = logging.getLogger(__name__)

admin_configurations_router = APIRouter(
    prefix="/admin/pizza-configurations",
    tags=["Admin - Pizza Configurations"]
)


def _config_out(pizza_config: PizzaConfig) -> PizzaConfigurationOut:
    return PizzaConfigurationOut(
        product_id=pizza_config.product_id,
        included_topping_units=pizza_config.included_topping_units,
        extra_unit_cost=float(pizza_config.extra_unit_cost),
        is_default=pizza_config.is_default,
    )


@admin_configurations_router.get("/{product_id}", response_model=PizzaConfigurationOut)
def get_configuration(
    product_id: str,
    db: Session = Depends(get_db),
    _admin: str = Depends(verify_admin_credentials),
) -> PizzaConfigurationOut:
    """Get a product's pizza configuration, or the defaults."""
    return _config_out(PizzaConfigurationStore(db).get(product_id))


@admin_configurations_router.put("/{product_id}", response_model=PizzaConfigurationOut)
def set_configuration(
    product_id: str,
    payload: PizzaConfigurationSet,
    db: Session = Depends(get_db),
    _admin: str = Depends(verify_admin_credentials),
) -> PizzaConfigurationOut:
    """Create or replace a product's pizza configuration."""
    try:
        saved = PizzaConfigurationStore(db).set(
            product_id,
            payload.included_topping_units,
            payload.extra_unit_cost,
        )
    except InvalidConfig as e:
        logger.warning("Rejected pizza configuration for product %s: %s", product_id, e)
        raise HTTPException(status_code=400, detail=str(e))
    return _config_out(saved)


@admin_configurations_router.patch("/{product_id}", response_model=PizzaConfigurationOut)
def update_configuration(
    product_id: str,
    payload: PizzaConfigurationUpdate,
    db: Session = Depends(get_db),
    _admin: str = Depends(verify_admin_credentials),
) -> PizzaConfigurationOut:
    """Update a saved configuration. Only provided fields change."""
    try:
        saved = PizzaConfigurationStore(db).update(
            product_id,
            included_topping_units=payload.included_topping_units,
            extra_unit_cost=payload.extra_unit_cost,
        )
    except NotFound as e:
        logger.warning("Pizza configuration request for product %s failed: %s", product_id, e)
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidConfig as e:
        logger.warning("Rejected pizza configuration update for product %s: %s", product_id, e)
        raise HTTPException(status_code=400, detail=str(e))
    return _config_out(saved)


@admin_configurations_router.delete("/{product_id}", status_code=204)
def delete_configuration(
    product_id: str,
    db: Session = Depends(get_db),
    _admin: str = Depends(verify_admin_credentials),
) -> Response:
    """Remove a saved configuration so the defaults apply again."""
    try:
        PizzaConfigurationStore(db).delete(product_id)
    except NotFound as e:
        logger.warning("Pizza configuration request for product %s failed: %s", product_id, e)
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
