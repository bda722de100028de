"""
Pizza Line Editor.

Wraps one SelectionState with the catalog and product configuration it is
edited against, and runs the update cycle after every user action:

    mutate state -> validate -> price (only when valid) -> snapshot

The snapshot is what a screen renders: the current violations and, when
there are none, the price.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .catalog import Catalog
from .models import (
    CustomizationAction,
    CustomizationKind,
    CustomizationRecord,
    Half,
    PizzaConfig,
    PizzaPrice,
    Violation,
)
from .pricing import PricingEngine
from .records import to_records
from .selection import SelectionState
from .validators import validate_selection

logger = logging.getLogger(__name__)


@dataclass
class EditorSnapshot:
    """Result of one editor action."""
    changed: bool
    violations: list[Violation] = field(default_factory=list)
    price: Optional[PizzaPrice] = None

    @property
    def is_valid(self) -> bool:
        return not self.violations


class PizzaLineEditor:
    """
    Interactive editing session for one pizza order line.

    Entries already on the line when editing starts stay usable even if they
    have since been deactivated in the catalog; new picks must be active and
    of the right kind, otherwise the action is ignored.
    """

    def __init__(
        self,
        catalog: Catalog,
        config: PizzaConfig,
        selection: Optional[SelectionState] = None,
    ):
        self._catalog = catalog
        self._config = config
        self._pricing = PricingEngine(catalog)
        self._selection = selection if selection is not None else SelectionState()
        self._retained_ids = frozenset(self._selection.referenced_ids())

    @property
    def selection(self) -> SelectionState:
        return self._selection

    @property
    def config(self) -> PizzaConfig:
        return self._config

    @property
    def retained_ids(self) -> frozenset[str]:
        return self._retained_ids

    def _can_use(self, customization_id: str, kind: CustomizationKind) -> bool:
        if self._catalog.is_selectable(customization_id, kind):
            return True
        customization = self._catalog.resolve(customization_id)
        return (
            customization is not None
            and customization.kind == kind
            and customization_id in self._retained_ids
        )

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def toggle_flavor(self, customization_id: str) -> EditorSnapshot:
        changed = False
        if self._selection.is_flavor_selected(customization_id) or self._can_use(
            customization_id, CustomizationKind.FLAVOR
        ):
            changed = self._selection.toggle_flavor(customization_id)
        else:
            logger.debug("Ignored %s: not an available flavor", customization_id)
        return self.snapshot(changed)

    def toggle_ingredient(
        self,
        customization_id: str,
        half: Half,
        requested_action: CustomizationAction = CustomizationAction.ADD,
    ) -> EditorSnapshot:
        changed = False
        if self._selection.edit_for(customization_id, half) is not None or self._can_use(
            customization_id, CustomizationKind.INGREDIENT
        ):
            changed = self._selection.toggle_ingredient(customization_id, half, requested_action)
        else:
            logger.debug("Ignored %s: not an available ingredient", customization_id)
        return self.snapshot(changed)

    def set_split_mode(self, enabled: bool) -> EditorSnapshot:
        return self.snapshot(self._selection.set_split_mode(enabled))

    # -------------------------------------------------------------------------
    # Results
    # -------------------------------------------------------------------------

    def violations(self, *, for_submission: bool = False) -> list[Violation]:
        return validate_selection(
            self._selection,
            self._catalog,
            require_personalization=for_submission,
            retained_ids=self._retained_ids,
        )

    def snapshot(self, changed: bool = False) -> EditorSnapshot:
        violations = self.violations()
        price = None
        if not violations:
            price = self._pricing.calculate(self._selection, self._config)
        return EditorSnapshot(changed=changed, violations=violations, price=price)

    def submit(self) -> EditorSnapshot:
        """
        Final check before the line is handed to the order.

        Unlike the interactive snapshot, an empty pizza or an empty half is
        reported here.
        """
        violations = self.violations(for_submission=True)
        price = None
        if not violations:
            price = self._pricing.calculate(self._selection, self._config)
        else:
            logger.info("Pizza line for product %s blocked: %d violations",
                        self._config.product_id, len(violations))
        return EditorSnapshot(changed=False, violations=violations, price=price)

    def records(self) -> list[CustomizationRecord]:
        return to_records(self._selection)
