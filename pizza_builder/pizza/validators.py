"""
Pizza Selection Validation.

Checks a selection against the catalog and returns every problem found as a
Violation; nothing here raises. While a line is being edited the screen
shows the violations but keeps editing possible. At submission time any
violation blocks the item.

Rules:
    FLAVOR_CARDINALITY     at most two flavors, never two on one half
    HALF_CONSISTENCY       every half matches the whole/split mode
    EMPTY_PERSONALIZATION  (submission) at least one flavor or added ingredient
    EMPTY_HALF             (submission) each half of a split pizza has content
    UNRESOLVED_REFERENCE   every id is a known, available entry of the right kind

Externally supplied records (order extraction) are first checked for
repeated entries and REMOVE actions on flavors, see check_candidate_records.
"""

import logging
from collections import Counter
from typing import Iterable, Optional

from .catalog import Catalog
from .models import (
    CustomizationAction,
    CustomizationKind,
    CustomizationRecord,
    Half,
    SPLIT_HALVES,
    Violation,
    ViolationCode,
)
from .records import selection_from_records
from .selection import MAX_FLAVORS, SelectionState

logger = logging.getLogger(__name__)

HALF_LABELS = {
    Half.FULL: "the whole pizza",
    Half.HALF_1: "the first half",
    Half.HALF_2: "the second half",
}


def _label(catalog: Catalog, customization_id: str) -> str:
    customization = catalog.resolve(customization_id)
    if customization is None:
        return f"'{customization_id}'"
    return f"'{customization.name}'"


# =============================================================================
# Individual Rules
# =============================================================================

def check_flavor_cardinality(selection: SelectionState, catalog: Catalog) -> list[Violation]:
    violations = []
    if selection.flavor_count > MAX_FLAVORS:
        violations.append(Violation(
            code=ViolationCode.FLAVOR_CARDINALITY,
            message=f"A pizza can have at most {MAX_FLAVORS} flavors, found {selection.flavor_count}",
        ))

    per_half = Counter(choice.half for choice in selection.flavors)
    for half, count in per_half.items():
        if count > 1:
            violations.append(Violation(
                code=ViolationCode.FLAVOR_CARDINALITY,
                message=f"Only one flavor can go on {HALF_LABELS[half]}, found {count}",
                half=half,
            ))
    return violations


def check_half_consistency(selection: SelectionState, catalog: Catalog) -> list[Violation]:
    active = selection.active_halves()
    if selection.split_mode:
        mode_text = "the pizza is split into halves"
    else:
        mode_text = "the pizza is not split"

    violations = []
    for choice in selection.flavors:
        if choice.half not in active:
            violations.append(Violation(
                code=ViolationCode.HALF_CONSISTENCY,
                message=(
                    f"Flavor {_label(catalog, choice.customization_id)} is on "
                    f"{HALF_LABELS[choice.half]} but {mode_text}"
                ),
                customization_id=choice.customization_id,
                half=choice.half,
            ))
    for edit in selection.ingredient_edits:
        if edit.half not in active:
            violations.append(Violation(
                code=ViolationCode.HALF_CONSISTENCY,
                message=(
                    f"Ingredient {_label(catalog, edit.customization_id)} is on "
                    f"{HALF_LABELS[edit.half]} but {mode_text}"
                ),
                customization_id=edit.customization_id,
                half=edit.half,
            ))
    return violations


def _has_content(selection: SelectionState, half: Optional[Half] = None) -> bool:
    """A flavor or an ADD edit, optionally restricted to one half."""
    for choice in selection.flavors:
        if half is None or choice.half == half:
            return True
    for edit in selection.ingredient_edits:
        if edit.action == CustomizationAction.ADD and (half is None or edit.half == half):
            return True
    return False


def check_personalization(selection: SelectionState, catalog: Catalog) -> list[Violation]:
    """REMOVE-only items fail: removing toppings from nothing is not a pizza."""
    if _has_content(selection):
        return []
    return [Violation(
        code=ViolationCode.EMPTY_PERSONALIZATION,
        message="Pizza requires personalization: choose at least one flavor or ingredient",
    )]


def check_empty_halves(selection: SelectionState, catalog: Catalog) -> list[Violation]:
    if not selection.split_mode:
        return []
    violations = []
    for half in SPLIT_HALVES:
        if not _has_content(selection, half):
            violations.append(Violation(
                code=ViolationCode.EMPTY_HALF,
                message=f"{HALF_LABELS[half].capitalize()} of the pizza needs a flavor or ingredient",
                half=half,
            ))
    return violations


def check_references(
    selection: SelectionState,
    catalog: Catalog,
    retained_ids: Iterable[str] = (),
) -> list[Violation]:
    """
    Every id must be in the catalog, of the right kind, and active unless it
    was already on the order item being edited (retained_ids).
    """
    retained = set(retained_ids)
    violations = []
    reported: set[str] = set()

    def check(customization_id: str, expected: CustomizationKind, half: Half) -> None:
        if customization_id in reported:
            return
        customization = catalog.resolve(customization_id)
        message = None
        if customization is None:
            message = f"Unknown pizza customization '{customization_id}'"
        elif customization.kind != expected:
            noun = "flavor" if expected == CustomizationKind.FLAVOR else "ingredient"
            message = f"{_label(catalog, customization_id)} is not a {noun}"
        elif not customization.is_active and customization_id not in retained:
            message = f"{_label(catalog, customization_id)} is no longer available"
        if message is None:
            return
        reported.add(customization_id)
        violations.append(Violation(
            code=ViolationCode.UNRESOLVED_REFERENCE,
            message=message,
            customization_id=customization_id,
            half=half,
        ))

    for choice in selection.flavors:
        check(choice.customization_id, CustomizationKind.FLAVOR, choice.half)
    for edit in selection.ingredient_edits:
        check(edit.customization_id, CustomizationKind.INGREDIENT, edit.half)
    return violations


# =============================================================================
# Entry Points
# =============================================================================

def validate_selection(
    selection: SelectionState,
    catalog: Catalog,
    *,
    require_personalization: bool = False,
    retained_ids: Iterable[str] = (),
) -> list[Violation]:
    """
    Run every rule over a selection.

    Args:
        selection: The selection to check
        catalog: Catalog the ids must resolve against
        require_personalization: Apply the submission-only rules (non-empty
            pizza, non-empty halves)
        retained_ids: Ids already on the order item being edited; these may
            be inactive in the catalog

    Returns:
        All violations found, empty when the selection is valid
    """
    violations = []
    violations.extend(check_flavor_cardinality(selection, catalog))
    violations.extend(check_half_consistency(selection, catalog))
    if require_personalization:
        personalization = check_personalization(selection, catalog)
        violations.extend(personalization)
        if not personalization:
            violations.extend(check_empty_halves(selection, catalog))
    violations.extend(check_references(selection, catalog, retained_ids))
    return violations


def check_candidate_records(records: Iterable[CustomizationRecord], catalog: Catalog) -> list[Violation]:
    """
    Problems that only exist in raw records and disappear once decoded into a
    SelectionState: repeated entries and REMOVE actions on flavors.
    """
    violations = []
    seen: set[tuple] = set()
    for record in records:
        customization = catalog.resolve(record.customization_id)
        is_flavor = customization is not None and customization.is_flavor

        if is_flavor and record.action == CustomizationAction.REMOVE:
            violations.append(Violation(
                code=ViolationCode.INVALID_ACTION,
                message=f"Flavor {_label(catalog, record.customization_id)} cannot be removed, only selected",
                customization_id=record.customization_id,
                half=record.half,
            ))
            continue

        # A flavor may be chosen once per pizza; an ingredient once per half
        if is_flavor:
            key = (record.customization_id,)
            message = f"Flavor {_label(catalog, record.customization_id)} appears more than once"
        else:
            key = (record.customization_id, record.half)
            message = (
                f"{_label(catalog, record.customization_id)} appears more than once "
                f"on {HALF_LABELS[record.half]}"
            )
        if key in seen:
            violations.append(Violation(
                code=ViolationCode.DUPLICATE_ENTRY,
                message=message,
                customization_id=record.customization_id,
                half=record.half,
            ))
        seen.add(key)
    return violations


def validate_candidate(
    records: Iterable[CustomizationRecord],
    catalog: Catalog,
    retained_ids: Iterable[str] = (),
) -> tuple[SelectionState, list[Violation]]:
    """
    Submission-time validation of an externally supplied pizza item.

    retained_ids lists entries already on the order item when it is being
    re-submitted after an edit; those may be inactive in the catalog.

    Returns:
        The decoded selection and every violation, one per failed rule
        instance. The item may be accepted only when the list is empty.
    """
    records = list(records)
    violations = check_candidate_records(records, catalog)
    selection = selection_from_records(records, catalog)
    violations.extend(validate_selection(
        selection, catalog, require_personalization=True, retained_ids=retained_ids,
    ))
    if violations:
        logger.info("Pizza item rejected with %d violations", len(violations))
    return selection, violations


def violation_messages(violations: Iterable[Violation]) -> list[str]:
    """Human-readable strings for an operator, one per violation."""
    return [violation.message for violation in violations]
