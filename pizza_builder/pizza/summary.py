"""
Human-readable descriptions of a pizza selection.

Used for the change log of an order item and for the per-half view shown to
staff and the kitchen.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .catalog import Catalog
from .models import CustomizationAction, Half
from .selection import SelectionState

NO_FLAVOR = "No flavor"

HALF_TITLES = {
    Half.FULL: "Whole pizza",
    Half.HALF_1: "Half 1",
    Half.HALF_2: "Half 2",
}


class HalfSummary(BaseModel):
    """What is on one half of the pizza."""
    half: Half
    title: str
    flavor: Optional[str] = None
    added: list[str] = Field(default_factory=list)
    removed: list[str] = Field(default_factory=list)

    def describe(self) -> str:
        parts = [self.flavor or NO_FLAVOR]
        parts.extend(f"+{name}" for name in self.added)
        parts.extend(f"-{name}" for name in self.removed)
        return f"{self.title}: {', '.join(parts)}"


def _name(catalog: Catalog, customization_id: str) -> str:
    customization = catalog.resolve(customization_id)
    return customization.name if customization else customization_id


def format_customizations(selection: SelectionState, catalog: Catalog) -> list[str]:
    """
    One line per choice, e.g. ["+Pepperoni (HALF_1)", "-Cebolla (HALF_1)"].

    Flavors are shown as additions, matching how they are stored.
    """
    lines = [
        f"+{_name(catalog, choice.customization_id)} ({choice.half.value})"
        for choice in selection.flavors
    ]
    for edit in selection.ingredient_edits:
        sign = "+" if edit.action == CustomizationAction.ADD else "-"
        lines.append(f"{sign}{_name(catalog, edit.customization_id)} ({edit.half.value})")
    return lines


def summarize_by_half(selection: SelectionState, catalog: Catalog) -> list[HalfSummary]:
    """
    Group the selection by the halves in use.

    A half whose flavor was removed shows NO_FLAVOR but keeps its edits.
    """
    summaries = []
    for half in selection.active_halves():
        flavor_id = selection.flavor_for_half(half)
        summary = HalfSummary(
            half=half,
            title=HALF_TITLES[half],
            flavor=_name(catalog, flavor_id) if flavor_id else None,
        )
        for edit in selection.edits_for_half(half):
            if edit.action == CustomizationAction.ADD:
                summary.added.append(_name(catalog, edit.customization_id))
            else:
                summary.removed.append(_name(catalog, edit.customization_id))
        summaries.append(summary)
    return summaries
