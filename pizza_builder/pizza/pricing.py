"""
Pricing Engine for Pizza Lines.

Converts a pizza selection into topping-unit usage and a currency
surcharge:

1. Each half in use starts with its flavor's topping value (0 without one).
2. Every ADD edit on the half adds the ingredient's topping value. REMOVE
   edits cost nothing and refund nothing.
3. The halves are summed and compared with the product's included units.
4. Units over the allowance are charged at the extra unit cost.

Example (included=4, extra cost=20):
    Whole Pepperoni (4) + Tocino (1)          -> 5 units, 1 extra, $20.00
    Pepperoni (4) | Hawaiana (3)              -> 7 units, 3 extra, $60.00

Only call this on a selection the validator accepted.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from .catalog import Catalog
from .models import CustomizationAction, Half, PizzaConfig, PizzaPrice
from .selection import SelectionState

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def round_money(amount: Union[Decimal, int, float, str]) -> Decimal:
    """Round to 2 decimal places for currency, halves rounding up."""
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


class PricingEngine:
    """
    Prices pizza selections against one catalog.

    Unit counts are integers throughout; only the final surcharge is rounded.
    """

    def __init__(self, catalog: Catalog):
        self._catalog = catalog

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def units_for_half(self, selection: SelectionState, half: Half) -> int:
        """
        Topping units consumed on one half.

        Raises:
            NotFound: If the selection references an id missing from the catalog
        """
        units = 0
        flavor_id = selection.flavor_for_half(half)
        if flavor_id is not None:
            units += self._catalog.get(flavor_id).topping_value

        for edit in selection.edits_for_half(half):
            if edit.action == CustomizationAction.ADD:
                units += self._catalog.get(edit.customization_id).topping_value
        return units

    def calculate(self, selection: SelectionState, config: PizzaConfig) -> PizzaPrice:
        """
        Compute topping usage and surcharge.

        Args:
            selection: A selection with no structural violations
            config: The product's pizza configuration

        Returns:
            PizzaPrice with total_units, extra_units, surcharge and the
            per-half breakdown
        """
        units_by_half = {
            half: self.units_for_half(selection, half)
            for half in selection.active_halves()
        }
        total_units = sum(units_by_half.values())
        extra_units = max(0, total_units - config.included_topping_units)
        surcharge = round_money(extra_units * config.extra_unit_cost)

        logger.debug(
            "Priced pizza for product %s: units=%d extra=%d surcharge=%s",
            config.product_id, total_units, extra_units, surcharge,
        )
        return PizzaPrice(
            total_units=total_units,
            extra_units=extra_units,
            surcharge=surcharge,
            units_by_half=units_by_half,
        )

    def quote(
        self,
        selection: SelectionState,
        config: PizzaConfig,
        base_price: Optional[Union[Decimal, int, float, str]] = None,
    ) -> PizzaPrice:
        """
        Price a selection and, when the product's base price is known, add
        the surcharge to it.
        """
        price = self.calculate(selection, config)
        if base_price is None:
            return price

        base = round_money(base_price)
        return price.model_copy(update={
            "base_price": base,
            "final_price": round_money(base + price.surcharge),
        })
