"""
Persisted record form of a pizza selection.

An order item stores its pizza choices as a flat list of
{customization_id, half, action} records. Flavors are written as ADD
records; when the item is loaded again, the catalog kind decides whether a
record is a flavor choice or an ingredient edit.
"""

import logging
from typing import Iterable

from .catalog import Catalog
from .models import (
    CustomizationAction,
    CustomizationRecord,
    FlavorChoice,
    IngredientEdit,
)
from .selection import SelectionState

logger = logging.getLogger(__name__)


def to_records(selection: SelectionState) -> list[CustomizationRecord]:
    """Flatten a selection into records, flavors first."""
    records = [
        CustomizationRecord(
            customization_id=choice.customization_id,
            half=choice.half,
            action=CustomizationAction.ADD,
        )
        for choice in selection.flavors
    ]
    records.extend(
        CustomizationRecord(
            customization_id=edit.customization_id,
            half=edit.half,
            action=edit.action,
        )
        for edit in selection.ingredient_edits
    )
    return records


def selection_from_records(records: Iterable[CustomizationRecord], catalog: Catalog) -> SelectionState:
    """
    Rebuild a selection from stored or externally supplied records.

    ADD records for FLAVOR entries become flavor choices; everything else,
    including ids the catalog does not know, becomes an ingredient edit so
    the validator can report it. REMOVE records on flavors have no meaning
    and are left out (see validators.check_candidate_records). When a key
    repeats, the last record wins.

    The split mode is derived from the halves used, so an inconsistent
    item decodes into an inconsistent selection rather than being repaired.
    """
    flavors: list[FlavorChoice] = []
    edits: list[IngredientEdit] = []

    for record in records:
        customization = catalog.resolve(record.customization_id)
        if customization is not None and customization.is_flavor:
            if record.action == CustomizationAction.ADD:
                flavors.append(FlavorChoice(customization_id=record.customization_id, half=record.half))
            else:
                logger.debug("Skipped REMOVE record for flavor %s", record.customization_id)
            continue
        edits.append(IngredientEdit(
            customization_id=record.customization_id,
            half=record.half,
            action=record.action,
        ))

    return SelectionState(flavors=flavors, ingredient_edits=edits)
