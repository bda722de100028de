"""
Pizza Ordering Routes
=====================

Customer- and staff-facing endpoints used while building a pizza order
line, and by external order-extraction sources that hand over a finished
line for checking.

Endpoints:
----------
- GET /pizza/customizations: Active flavors and ingredients for pick lists
- POST /pizza/quote: Validate and price the line currently being edited
- POST /pizza/submit: Final validation before the line joins an order

Quote vs. Submit:
-----------------
A quote is interactive: violations are reported but never block, and a
price is returned only when there are none. An empty pizza is a valid
quote (it simply has not been personalized yet). Repeated records and
REMOVE on a flavor are reported by both, since decoding would hide them.

A submission is the single blocking check. It also requires the pizza to
be personalized (a flavor or an added ingredient) and every half in use to
carry something. Accepted submissions return the normalized records to
store on the order item.

Rate Limiting:
--------------
Submissions are rate limited per client address (default: 60/minute),
since extraction sources call this endpoint without a person in the loop.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address
from sqlalchemy.orm import Session

from ..config import RATE_LIMIT_ENABLED, get_rate_limit_submit
from ..db import get_db
from ..pizza.catalog import load_catalog
from ..pizza.configuration import PizzaConfigurationStore
from ..pizza.models import CustomizationKind, PizzaPrice, Violation
from ..pizza.pricing import PricingEngine
from ..pizza.records import selection_from_records, to_records
from ..pizza.selection import SelectionState
from ..pizza.summary import format_customizations, summarize_by_half
from ..pizza.validators import (
    check_candidate_records,
    validate_candidate,
    validate_selection,
    violation_messages,
)
from ..schemas.customizations import PizzaCustomizationOut
from ..schemas.pizza import (
    ViolationOut,
    PizzaPriceOut,
    PizzaQuoteRequest,
    PizzaQuoteResponse,
    PizzaSubmitRequest,
    PizzaSubmitResponse,
)


logger = logging.getLogger(__name__)

pizza_router = APIRouter(prefix="/pizza", tags=["Pizza"])


# =============================================================================
# Rate Limiting Setup
# =============================================================================

limiter = Limiter(key_func=get_remote_address, enabled=RATE_LIMIT_ENABLED)


# =============================================================================
# Helper Functions
# =============================================================================

def _violation_out(violation: Violation) -> ViolationOut:
    return ViolationOut(
        code=violation.code,
        message=violation.message,
        customization_id=violation.customization_id,
        half=violation.half,
    )


def _price_out(price: PizzaPrice) -> PizzaPriceOut:
    return PizzaPriceOut(
        total_units=price.total_units,
        extra_units=price.extra_units,
        surcharge=float(price.surcharge),
        units_by_half=dict(price.units_by_half),
        base_price=float(price.base_price) if price.base_price is not None else None,
        final_price=float(price.final_price) if price.final_price is not None else None,
    )


# =============================================================================
# Endpoints
# =============================================================================

@pizza_router.get("/customizations", response_model=List[PizzaCustomizationOut])
def list_active_customizations(
    kind: Optional[CustomizationKind] = Query(None, description="FLAVOR or INGREDIENT"),
    db: Session = Depends(get_db),
) -> List[PizzaCustomizationOut]:
    """Active customizations in pick-list order."""
    catalog = load_catalog(db)
    return [PizzaCustomizationOut.model_validate(c) for c in catalog.list_active(kind)]


@pizza_router.post("/quote", response_model=PizzaQuoteResponse)
def quote_pizza(
    req: PizzaQuoteRequest,
    db: Session = Depends(get_db),
) -> PizzaQuoteResponse:
    """
    Validate and price a pizza line that is still being edited.

    Violations are returned alongside the summary; the price is left out
    until they are resolved.
    """
    catalog = load_catalog(db)
    pizza_config = PizzaConfigurationStore(db).get(req.product_id)

    decoded = selection_from_records(req.customizations, catalog)
    if req.split_mode is None:
        selection = decoded
    else:
        selection = SelectionState(
            decoded.flavors,
            decoded.ingredient_edits,
            split_mode=req.split_mode,
        )

    violations = check_candidate_records(req.customizations, catalog)
    violations.extend(validate_selection(selection, catalog, retained_ids=req.retained_ids))
    price = None
    if not violations:
        price = _price_out(PricingEngine(catalog).quote(selection, pizza_config, req.base_price))
    else:
        logger.debug("Quote for product %s has %d violations", req.product_id, len(violations))

    return PizzaQuoteResponse(
        product_id=req.product_id,
        split_mode=selection.split_mode,
        violations=[_violation_out(v) for v in violations],
        price=price,
        summary=format_customizations(selection, catalog),
        halves=summarize_by_half(selection, catalog),
    )


@pizza_router.post("/submit", response_model=PizzaSubmitResponse)
@limiter.limit(get_rate_limit_submit)
def submit_pizza(
    request: Request,
    req: PizzaSubmitRequest,
    db: Session = Depends(get_db),
) -> PizzaSubmitResponse:
    """
    Submission-time validation of a finished pizza line.

    The line is accepted only when no rule fails; otherwise every failure
    is reported as a human-readable string for the operator.
    """
    catalog = load_catalog(db)
    selection, violations = validate_candidate(req.customizations, catalog, req.retained_ids)

    if violations:
        logger.warning(
            "Rejected pizza line for product %s (request %s): %s",
            req.product_id,
            getattr(request.state, "request_id", "-"),
            "; ".join(violation_messages(violations)),
        )
        return PizzaSubmitResponse(
            product_id=req.product_id,
            accepted=False,
            violations=violation_messages(violations),
            violation_details=[_violation_out(v) for v in violations],
        )

    pizza_config = PizzaConfigurationStore(db).get(req.product_id)
    price = PricingEngine(catalog).quote(selection, pizza_config, req.base_price)
    logger.info(
        "Accepted pizza line for product %s: %d units, surcharge %s",
        req.product_id, price.total_units, price.surcharge,
    )
    return PizzaSubmitResponse(
        product_id=req.product_id,
        accepted=True,
        violations=[],
        violation_details=[],
        customizations=to_records(selection),
        price=_price_out(price),
        summary=format_customizations(selection, catalog),
    )
