"""
Customization Catalog.

The catalog is the list of flavors and ingredients a pizza line can use,
loaded once per request and read-only afterwards. Inactive entries stay
resolvable by id so order items that already use them can still be shown
and priced, but they never appear in pick lists.
"""

import logging
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from ..errors import NotFound
from ..models import PizzaCustomization
from .models import Customization, CustomizationKind

logger = logging.getLogger(__name__)


def _sort_key(customization: Customization) -> tuple:
    return (customization.sort_order, customization.name.lower(), customization.id)


class Catalog:
    """
    In-memory view of the customization catalog.

    Build it from domain entries directly, or from the database with
    load_catalog().
    """

    def __init__(self, customizations: Iterable[Customization]):
        self._by_id: dict[str, Customization] = {}
        for customization in customizations:
            self._by_id[customization.id] = customization

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, customization_id: object) -> bool:
        return customization_id in self._by_id

    def list_active(self, kind: CustomizationKind | None = None) -> list[Customization]:
        """
        Get the entries to offer in a pick list.

        Args:
            kind: Restrict to flavors or ingredients. None returns both.

        Returns:
            Active entries ordered by sort_order, then name.
        """
        entries = [
            c for c in self._by_id.values()
            if c.is_active and (kind is None or c.kind == kind)
        ]
        return sorted(entries, key=_sort_key)

    def flavors(self) -> list[Customization]:
        return self.list_active(CustomizationKind.FLAVOR)

    def ingredients(self) -> list[Customization]:
        return self.list_active(CustomizationKind.INGREDIENT)

    def resolve(self, customization_id: str) -> Optional[Customization]:
        """Look up an entry by id, active or not."""
        return self._by_id.get(customization_id)

    def get(self, customization_id: str) -> Customization:
        """
        Look up an entry by id, active or not.

        Raises:
            NotFound: If no entry has this id
        """
        customization = self._by_id.get(customization_id)
        if customization is None:
            raise NotFound("Pizza customization", customization_id)
        return customization

    def is_selectable(self, customization_id: str, kind: CustomizationKind) -> bool:
        """Check whether an id may be newly picked as the given kind."""
        customization = self._by_id.get(customization_id)
        return customization is not None and customization.is_active and customization.kind == kind


def load_catalog(db: Session) -> Catalog:
    """
    Load every customization, including inactive and deleted ones.

    Deleted entries are kept so existing order items still resolve; they are
    stored inactive and so never reach a pick list.
    """
    rows = db.query(PizzaCustomization).all()
    catalog = Catalog(Customization.model_validate(row) for row in rows)
    logger.debug("Loaded pizza catalog with %d entries", len(catalog))
    return catalog
