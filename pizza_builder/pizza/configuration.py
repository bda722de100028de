"""
Pizza Product Configuration.

Each pizza product has one configuration: how many topping units its base
price includes, and what each additional unit costs. Products that were
never configured use the defaults from config.py.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from sqlalchemy.orm import Session

from .. import config
from ..errors import InvalidConfig, NotFound
from ..models import PizzaConfiguration
from .models import PizzaConfig
from .pricing import round_money

logger = logging.getLogger(__name__)

Money = Union[Decimal, int, float, str]


def default_config(product_id: str) -> PizzaConfig:
    """Configuration used for a product until one is saved."""
    return PizzaConfig(
        product_id=product_id,
        included_topping_units=config.DEFAULT_INCLUDED_TOPPINGS,
        extra_unit_cost=round_money(config.DEFAULT_EXTRA_TOPPING_COST),
        is_default=True,
    )


def _check_included(included_topping_units: int) -> int:
    if included_topping_units < 0:
        raise InvalidConfig(
            f"included_topping_units must be non-negative, got {included_topping_units}",
            field="included_topping_units",
        )
    return int(included_topping_units)


def _check_cost(extra_unit_cost: Money) -> Decimal:
    try:
        cost = Decimal(str(extra_unit_cost))
    except InvalidOperation:
        cost = None
    if cost is None or not cost.is_finite():
        raise InvalidConfig(
            f"extra_unit_cost is not a number: {extra_unit_cost!r}",
            field="extra_unit_cost",
        )
    if cost < 0:
        raise InvalidConfig(
            f"extra_unit_cost must be non-negative, got {cost}",
            field="extra_unit_cost",
        )
    return round_money(cost)


def _to_config(row: PizzaConfiguration) -> PizzaConfig:
    return PizzaConfig(
        product_id=row.product_id,
        included_topping_units=row.included_topping_units,
        extra_unit_cost=round_money(Decimal(str(row.extra_unit_cost))),
        is_default=False,
    )


class PizzaConfigurationStore:
    """
    Reads and writes pizza configurations through a SQLAlchemy session.

    The caller is responsible for the product existing; this store only
    checks the economic parameters.
    """

    def __init__(self, db: Session):
        self._db = db

    def _find(self, product_id: str) -> Optional[PizzaConfiguration]:
        return self._db.query(PizzaConfiguration).filter(
            PizzaConfiguration.product_id == product_id
        ).first()

    def get(self, product_id: str) -> PizzaConfig:
        """Get the product's configuration, or the defaults if it has none."""
        row = self._find(product_id)
        if row is None:
            return default_config(product_id)
        return _to_config(row)

    def set(self, product_id: str, included_topping_units: int, extra_unit_cost: Money) -> PizzaConfig:
        """
        Save a product's configuration, creating it on first save.

        Raises:
            InvalidConfig: If either value is negative
        """
        included = _check_included(included_topping_units)
        cost = _check_cost(extra_unit_cost)

        row = self._find(product_id)
        if row is None:
            row = PizzaConfiguration(product_id=product_id)
            self._db.add(row)
        row.included_topping_units = included
        row.extra_unit_cost = cost
        self._db.commit()
        self._db.refresh(row)

        logger.info(
            "Saved pizza configuration for product %s: included=%d extra_cost=%s",
            product_id, included, cost,
        )
        return _to_config(row)

    def update(
        self,
        product_id: str,
        included_topping_units: Optional[int] = None,
        extra_unit_cost: Optional[Money] = None,
    ) -> PizzaConfig:
        """
        Change some fields of an existing configuration.

        Raises:
            NotFound: If the product has no saved configuration
            InvalidConfig: If a given value is negative
        """
        row = self._find(product_id)
        if row is None:
            raise NotFound("Pizza configuration", product_id)

        if included_topping_units is not None:
            row.included_topping_units = _check_included(included_topping_units)
        if extra_unit_cost is not None:
            row.extra_unit_cost = _check_cost(extra_unit_cost)
        self._db.commit()
        self._db.refresh(row)

        logger.info("Updated pizza configuration for product %s", product_id)
        return _to_config(row)

    def delete(self, product_id: str) -> None:
        """
        Remove a saved configuration so the defaults apply again.

        Raises:
            NotFound: If the product has no saved configuration
        """
        row = self._find(product_id)
        if row is None:
            raise NotFound("Pizza configuration", product_id)
        self._db.delete(row)
        self._db.commit()
        logger.info("Deleted pizza configuration for product %s", product_id)
