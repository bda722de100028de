"""
Pizza Selection State Machine.

Holds the in-progress choices for one pizza order line and the operations
that change them. A selection is in one of two modes:

- WHOLE: the pizza is one region (Half.FULL) with zero or one flavor.
- SPLIT: the pizza is two regions (HALF_1, HALF_2), each with at most one
  flavor and its own ingredient edits.

Transitions:
    WHOLE -> SPLIT  selecting a second flavor (automatic), or the manual
                    switch while at most one flavor is selected
    SPLIT -> WHOLE  only the manual switch, and only with at most one flavor

Operations never raise. A request the current state does not allow (a third
flavor, a half that is not in use, switching modes with two flavors) leaves
the state unchanged and returns False; the screen is expected to disable
that control instead of handling an error.

Flavor choices are keyed by customization id and ingredient edits by
(customization id, half), so the same flavor can never be chosen twice and
an ingredient has at most one edit per half.
"""

import logging
from enum import Enum
from typing import Iterable, Optional

from .models import (
    FlavorChoice,
    Half,
    HALF_ORDER,
    IngredientEdit,
    CustomizationAction,
    SPLIT_HALVES,
    WHOLE_HALVES,
)

logger = logging.getLogger(__name__)

MAX_FLAVORS = 2


class SelectionMode(str, Enum):
    WHOLE = "WHOLE"
    SPLIT = "SPLIT"


class SelectionState:
    """
    Mutable choice set for one pizza order line.

    Create it empty, or pre-populated from a persisted order item (see
    pizza_builder.pizza.records.selection_from_records).
    """

    def __init__(
        self,
        flavors: Iterable[FlavorChoice] = (),
        ingredient_edits: Iterable[IngredientEdit] = (),
        split_mode: Optional[bool] = None,
    ):
        self._flavors: dict[str, Half] = {}
        for choice in flavors:
            self._flavors[choice.customization_id] = choice.half

        self._edits: dict[tuple[str, Half], IngredientEdit] = {}
        for edit in ingredient_edits:
            self._edits[edit.key] = edit

        if split_mode is None:
            split_mode = len(self._flavors) == MAX_FLAVORS or any(
                half != Half.FULL for half in self._used_halves()
            )
        self._split_mode = split_mode

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def split_mode(self) -> bool:
        return self._split_mode

    @property
    def mode(self) -> SelectionMode:
        return SelectionMode.SPLIT if self._split_mode else SelectionMode.WHOLE

    @property
    def flavors(self) -> list[FlavorChoice]:
        """Flavor choices in half order."""
        choices = [
            FlavorChoice(customization_id=cid, half=half)
            for cid, half in self._flavors.items()
        ]
        return sorted(choices, key=lambda c: (HALF_ORDER[c.half], c.customization_id))

    @property
    def ingredient_edits(self) -> list[IngredientEdit]:
        """Ingredient edits in half order, then by customization id."""
        return sorted(
            self._edits.values(),
            key=lambda e: (HALF_ORDER[e.half], e.customization_id),
        )

    @property
    def flavor_count(self) -> int:
        return len(self._flavors)

    def active_halves(self) -> tuple[Half, ...]:
        """Halves in use for the current mode."""
        return SPLIT_HALVES if self._split_mode else WHOLE_HALVES

    def is_flavor_selected(self, customization_id: str) -> bool:
        return customization_id in self._flavors

    def flavor_for_half(self, half: Half) -> Optional[str]:
        """Id of the flavor on a half, or None when the half has no flavor."""
        for cid, flavor_half in self._flavors.items():
            if flavor_half == half:
                return cid
        return None

    def edit_for(self, customization_id: str, half: Half) -> Optional[IngredientEdit]:
        return self._edits.get((customization_id, half))

    def edits_for_half(self, half: Half) -> list[IngredientEdit]:
        return [e for e in self.ingredient_edits if e.half == half]

    def is_ingredient_selected(
        self, customization_id: str, half: Half, action: CustomizationAction
    ) -> bool:
        edit = self._edits.get((customization_id, half))
        return edit is not None and edit.action == action

    def can_select_flavor(self, customization_id: str) -> bool:
        """False when this flavor's control should be disabled."""
        return customization_id in self._flavors or len(self._flavors) < MAX_FLAVORS

    def can_toggle_split_mode(self) -> bool:
        """The manual split switch is disabled once two flavors are chosen."""
        return len(self._flavors) < MAX_FLAVORS

    def referenced_ids(self) -> set[str]:
        """Every customization id used by a flavor choice or an edit."""
        return set(self._flavors) | {cid for cid, _half in self._edits}

    def is_empty(self) -> bool:
        return not self._flavors and not self._edits

    def copy(self) -> "SelectionState":
        return SelectionState(self.flavors, self.ingredient_edits, split_mode=self._split_mode)

    def _used_halves(self) -> set[Half]:
        halves = set(self._flavors.values())
        halves.update(half for _cid, half in self._edits)
        return halves

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def toggle_flavor(self, customization_id: str) -> bool:
        """
        Select or deselect a flavor.

        Deselecting keeps the ingredient edits of its half and does not leave
        split mode. Selecting goes to FULL on an empty whole pizza; a second
        flavor splits the pizza, moving the first flavor to HALF_1 and the new
        one to HALF_2. In split mode the first free half is used.

        Returns:
            True if the state changed, False if the request was ignored
        """
        if customization_id in self._flavors:
            half = self._flavors.pop(customization_id)
            logger.debug("Removed flavor %s from %s", customization_id, half.value)
            return True

        if len(self._flavors) >= MAX_FLAVORS:
            logger.debug("Ignored flavor %s: %d flavors already selected", customization_id, MAX_FLAVORS)
            return False

        if not self._split_mode:
            if not self._flavors:
                self._flavors[customization_id] = Half.FULL
                logger.debug("Added flavor %s to FULL", customization_id)
                return True

            (existing_id,) = self._flavors
            self._enter_split()
            self._flavors[existing_id] = Half.HALF_1
            self._flavors[customization_id] = Half.HALF_2
            logger.debug(
                "Split pizza: %s on HALF_1, %s on HALF_2", existing_id, customization_id
            )
            return True

        taken = set(self._flavors.values())
        free = next((half for half in SPLIT_HALVES if half not in taken), None)
        if free is None:
            return False
        self._flavors[customization_id] = free
        logger.debug("Added flavor %s to %s", customization_id, free.value)
        return True

    def toggle_ingredient(
        self,
        customization_id: str,
        half: Half,
        requested_action: CustomizationAction = CustomizationAction.ADD,
    ) -> bool:
        """
        Cycle an ingredient's edit on one half.

        No edit yet creates one with the requested action; an edit with the
        same action is removed; an edit with the other action is flipped.
        Calling with ADD, REMOVE, REMOVE goes unset -> ADD -> REMOVE -> unset.

        Returns:
            True if the state changed, False if the half is not in use
        """
        if half not in self.active_halves():
            logger.debug(
                "Ignored ingredient %s on %s in %s mode",
                customization_id, half.value, self.mode.value,
            )
            return False

        key = (customization_id, half)
        existing = self._edits.get(key)
        if existing is not None and existing.action == requested_action:
            del self._edits[key]
            logger.debug("Cleared ingredient %s on %s", customization_id, half.value)
            return True

        self._edits[key] = IngredientEdit(
            customization_id=customization_id,
            half=half,
            action=requested_action,
        )
        logger.debug(
            "Set ingredient %s on %s to %s",
            customization_id, half.value, requested_action.value,
        )
        return True

    def set_split_mode(self, enabled: bool) -> bool:
        """
        Flip the manual "divide into halves" switch.

        Only allowed with at most one flavor. Entering split mode drops FULL
        edits and moves a flavor to HALF_1; leaving it drops HALF_1/HALF_2
        edits and moves a flavor back to FULL.

        Returns:
            True if the state changed, False if the switch is disabled or
            already in the requested position
        """
        if len(self._flavors) >= MAX_FLAVORS or enabled == self._split_mode:
            return False

        if enabled:
            self._enter_split()
            target = Half.HALF_1
        else:
            self._drop_edits(SPLIT_HALVES)
            self._split_mode = False
            target = Half.FULL

        for cid in self._flavors:
            self._flavors[cid] = target
        logger.debug("Split mode %s", "enabled" if enabled else "disabled")
        return True

    def _enter_split(self) -> None:
        self._drop_edits(WHOLE_HALVES)
        self._split_mode = True

    def _drop_edits(self, halves: Iterable[Half]) -> None:
        halves = set(halves)
        dropped = [key for key in self._edits if key[1] in halves]
        for key in dropped:
            del self._edits[key]
        if dropped:
            logger.debug("Discarded %d ingredient edits", len(dropped))

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectionState):
            return NotImplemented
        return (
            self._split_mode == other._split_mode
            and self._flavors == other._flavors
            and self._edits == other._edits
        )

    def __repr__(self) -> str:
        return (
            f"SelectionState(mode={self.mode.value}, flavors={self.flavors!r}, "
            f"ingredient_edits={self.ingredient_edits!r})"
        )
