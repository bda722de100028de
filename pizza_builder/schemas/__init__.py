"""
Schemas Package for Pizza Builder
=================================

Pydantic models used for API request validation and response serialization.

Schema Organization:
--------------------
- **customizations.py**: Pizza customization catalog schemas
- **configurations.py**: Per-product pizza configuration schemas
- **pizza.py**: Quote and submission schemas for pizza order lines

Naming Conventions:
-------------------
- *Out: Response models - what the API returns
- *Create: Request models for POST
- *Update / *Set: Request models for PATCH / PUT
- *Request / *Response: Complex request and response bodies

Usage:
------
    from pizza_builder.schemas import PizzaQuoteRequest, PizzaCustomizationOut
"""

from .customizations import (
    PizzaCustomizationOut,
    PizzaCustomizationCreate,
    PizzaCustomizationUpdate,
    PizzaCustomizationListResponse,
)

from .configurations import (
    PizzaConfigurationOut,
    PizzaConfigurationSet,
    PizzaConfigurationUpdate,
)

from .pizza import (
    ViolationOut,
    PizzaPriceOut,
    PizzaQuoteRequest,
    PizzaQuoteResponse,
    PizzaSubmitRequest,
    PizzaSubmitResponse,
)

__all__ = [
    "PizzaCustomizationOut",
    "PizzaCustomizationCreate",
    "PizzaCustomizationUpdate",
    "PizzaCustomizationListResponse",
    "PizzaConfigurationOut",
    "PizzaConfigurationSet",
    "PizzaConfigurationUpdate",
    "ViolationOut",
    "PizzaPriceOut",
    "PizzaQuoteRequest",
    "PizzaQuoteResponse",
    "PizzaSubmitRequest",
    "PizzaSubmitResponse",
]
