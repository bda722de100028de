"""
Admin Pizza Customization Routes
================================

Admin endpoints for managing the pizza customization catalog: flavors and
ingredients, their topping values and their order in pick lists.

Endpoints:
----------
- GET /admin/pizza-customizations: Paginated listing
- POST /admin/pizza-customizations: Create a customization
- GET /admin/pizza-customizations/{id}: Get one customization
- PATCH /admin/pizza-customizations/{id}: Partial update
- DELETE /admin/pizza-customizations/{id}: Soft delete

Listing Filters:
----------------
- is_active: only active (true) or inactive (false) entries
- kind: FLAVOR or INGREDIENT
- search: case-insensitive match on name or base ingredients

Soft Delete:
------------
Deleted customizations are hidden from every listing but stay in the table,
inactive, so order items that already use them still resolve.

Authentication:
---------------
All endpoints require admin authentication via HTTP Basic Auth.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy import or_
from sqlalchemy.orm import Session

from ..auth import verify_admin_credentials
from ..config import CATALOG_PAGE_SIZE_DEFAULT, CATALOG_PAGE_SIZE_MAX
from ..db import get_db
from ..models import PizzaCustomization
from ..pizza.models import CustomizationKind
from ..schemas.customizations import (
    PizzaCustomizationOut,
    PizzaCustomizationCreate,
    PizzaCustomizationUpdate,
    PizzaCustomizationListResponse,
)


logger = logging.getLogger(__name__)

admin_customizations_router = APIRouter(
    prefix="/admin/pizza-customizations",
    tags=["Admin - Pizza Customizations"]
)


def _get_or_404(db: Session, customization_id: str) -> PizzaCustomization:
    customization = db.query(PizzaCustomization).filter(
        PizzaCustomization.id == customization_id,
        PizzaCustomization.deleted_at.is_(None),
    ).first()
    if not customization:
        logger.warning("Pizza customization %s not found", customization_id)
        raise HTTPException(status_code=404, detail=f"Pizza customization '{customization_id}' not found")
    return customization


@admin_customizations_router.get("", response_model=PizzaCustomizationListResponse)
def list_customizations(
    db: Session = Depends(get_db),
    _admin: str = Depends(verify_admin_credentials),
    page: int = Query(1, ge=1, description="Page number, starting at 1"),
    limit: int = Query(CATALOG_PAGE_SIZE_DEFAULT, ge=1, le=CATALOG_PAGE_SIZE_MAX, description="Page size"),
    is_active: Optional[bool] = Query(None, description="Filter by active flag"),
    kind: Optional[CustomizationKind] = Query(None, description="FLAVOR or INGREDIENT"),
    search: Optional[str] = Query(None, description="Text to match in name or base ingredients"),
) -> PizzaCustomizationListResponse:
    """List customizations, ordered as they appear in pick lists."""
    query = db.query(PizzaCustomization).filter(PizzaCustomization.deleted_at.is_(None))
    if is_active is not None:
        query = query.filter(PizzaCustomization.is_active == is_active)
    if kind is not None:
        query = query.filter(PizzaCustomization.kind == kind.value)
    if search:
        pattern = f"%{search.strip()}%"
        query = query.filter(or_(
            PizzaCustomization.name.ilike(pattern),
            PizzaCustomization.base_ingredients.ilike(pattern),
        ))

    total = query.count()
    rows = (
        query.order_by(PizzaCustomization.sort_order, PizzaCustomization.name, PizzaCustomization.id)
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return PizzaCustomizationListResponse(
        items=[PizzaCustomizationOut.model_validate(row) for row in rows],
        total=total,
        page=page,
        limit=limit,
    )


@admin_customizations_router.post("", response_model=PizzaCustomizationOut, status_code=201)
def create_customization(
    payload: PizzaCustomizationCreate,
    db: Session = Depends(get_db),
    _admin: str = Depends(verify_admin_credentials),
) -> PizzaCustomizationOut:
    """Create a new flavor or ingredient."""
    existing = db.query(PizzaCustomization).filter(PizzaCustomization.id == payload.id).first()
    if existing:
        logger.warning("Rejected duplicate pizza customization id %s", payload.id)
        raise HTTPException(status_code=400, detail=f"Pizza customization '{payload.id}' already exists")

    customization = PizzaCustomization(
        id=payload.id,
        name=payload.name.strip(),
        kind=payload.kind.value,
        base_ingredients=payload.base_ingredients if payload.kind == CustomizationKind.FLAVOR else None,
        topping_value=payload.topping_value,
        is_active=payload.is_active,
        sort_order=payload.sort_order,
    )
    db.add(customization)
    db.commit()
    db.refresh(customization)
    logger.info("Created pizza customization: %s (id=%s, kind=%s)",
                customization.name, customization.id, customization.kind)
    return PizzaCustomizationOut.model_validate(customization)


@admin_customizations_router.get("/{customization_id}", response_model=PizzaCustomizationOut)
def get_customization(
    customization_id: str,
    db: Session = Depends(get_db),
    _admin: str = Depends(verify_admin_credentials),
) -> PizzaCustomizationOut:
    """Get a specific customization."""
    return PizzaCustomizationOut.model_validate(_get_or_404(db, customization_id))


@admin_customizations_router.patch("/{customization_id}", response_model=PizzaCustomizationOut)
def update_customization(
    customization_id: str,
    payload: PizzaCustomizationUpdate,
    db: Session = Depends(get_db),
    _admin: str = Depends(verify_admin_credentials),
) -> PizzaCustomizationOut:
    """Update a customization. Only provided fields change."""
    customization = _get_or_404(db, customization_id)
    changes = payload.model_dump(exclude_unset=True)

    kind = changes.get("kind") or CustomizationKind(customization.kind)
    base_ingredients = changes.get("base_ingredients", customization.base_ingredients)
    if kind == CustomizationKind.INGREDIENT and base_ingredients:
        if "base_ingredients" in changes:
            raise HTTPException(
                status_code=422,
                detail="base_ingredients is only allowed on FLAVOR customizations",
            )
        # Converting a flavor into an ingredient drops its recipe text
        changes["base_ingredients"] = None

    for field_name, value in changes.items():
        # Only base_ingredients may be cleared with an explicit null
        if value is None and field_name != "base_ingredients":
            continue
        if field_name == "kind":
            value = value.value
        elif field_name == "name":
            value = value.strip()
        setattr(customization, field_name, value)

    db.commit()
    db.refresh(customization)
    logger.info("Updated pizza customization %s: %s", customization_id, sorted(changes))
    return PizzaCustomizationOut.model_validate(customization)


@admin_customizations_router.delete("/{customization_id}", status_code=204)
def delete_customization(
    customization_id: str,
    db: Session = Depends(get_db),
    _admin: str = Depends(verify_admin_credentials),
) -> Response:
    """Soft delete a customization; existing order items keep resolving it."""
    customization = _get_or_404(db, customization_id)
    customization.is_active = False
    customization.deleted_at = datetime.now(timezone.utc)
    db.commit()
    logger.info("Deleted pizza customization %s", customization_id)
    return Response(status_code=204)
