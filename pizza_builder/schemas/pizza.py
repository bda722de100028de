"""
Pizza Quote and Submission Schemas
==================================

Request and response models for pricing a pizza order line while it is
being edited, and for validating a finished (or externally extracted) line
before it is accepted into an order.

Customizations travel as flat records, the same shape the order stores:

    {"customization_id": "PZ-F-001", "half": "HALF_1", "action": "ADD"}

Flavors are sent as ADD records; the catalog tells them apart from
ingredients.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..pizza.models import CustomizationRecord, Half, ViolationCode
from ..pizza.summary import HalfSummary


class ViolationOut(BaseModel):
    """One failed rule."""
    code: ViolationCode
    message: str
    customization_id: Optional[str] = None
    half: Optional[Half] = None


class PizzaPriceOut(BaseModel):
    """
    Attributes:
        total_units: Topping units used across the halves in use
        extra_units: Units beyond the included allowance
        surcharge: extra_units times the extra unit cost
        units_by_half: Units per half in use
        base_price: Product base price, if supplied
        final_price: base_price plus surcharge, if base_price was supplied
    """
    total_units: int
    extra_units: int
    surcharge: float
    units_by_half: Dict[Half, int] = Field(default_factory=dict)
    base_price: Optional[float] = None
    final_price: Optional[float] = None


class PizzaQuoteRequest(BaseModel):
    """
    Current state of a line being edited.

    split_mode carries the manual "divide into halves" switch; when omitted
    it is derived from the halves used.

    retained_ids lists entries that were already on the order item when
    editing started; they stay valid even if since deactivated.
    """
    product_id: str
    customizations: List[CustomizationRecord] = Field(default_factory=list)
    split_mode: Optional[bool] = None
    base_price: Optional[float] = Field(default=None, ge=0)
    retained_ids: List[str] = Field(default_factory=list)


class PizzaQuoteResponse(BaseModel):
    """
    Interactive result: violations never block, the price is present only
    when there are none.
    """
    product_id: str
    split_mode: bool
    violations: List[ViolationOut]
    price: Optional[PizzaPriceOut] = None
    summary: List[str]
    halves: List[HalfSummary]


class PizzaSubmitRequest(BaseModel):
    """A finished pizza line, from the ordering screen or an extraction source."""
    product_id: str
    customizations: List[CustomizationRecord] = Field(default_factory=list)
    base_price: Optional[float] = Field(default=None, ge=0)
    retained_ids: List[str] = Field(default_factory=list)


class PizzaSubmitResponse(BaseModel):
    """
    Submission verdict.

    Attributes:
        accepted: True when the line may be added to the order
        violations: One human-readable string per failed rule
        violation_details: The same violations with codes
        customizations: Normalized records to persist (accepted lines only)
        price: Topping surcharge (accepted lines only)
        summary: Human-readable customization lines
    """
    product_id: str
    accepted: bool
    violations: List[str]
    violation_details: List[ViolationOut]
    customizations: List[CustomizationRecord] = Field(default_factory=list)
    price: Optional[PizzaPriceOut] = None
    summary: List[str] = Field(default_factory=list)
