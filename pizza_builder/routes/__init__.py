"""
Routes Package for Pizza Builder
================================

API route definitions organized by domain. Each module defines a FastAPI
APIRouter with related endpoints grouped together.

**Ordering Routes:**
- pizza.py: Pick lists, interactive quotes and submission checks

**Admin Routes (require authentication):**
- admin_customizations.py: Flavor and ingredient catalog management
- admin_configurations.py: Per-product topping allowance and extra cost

Router Registration:
--------------------
All routers are registered in main.py under two prefixes:
1. /api/v1/* - Versioned API (recommended)
2. /* - Root paths

Error Handling:
---------------
Routes raise HTTPException for error conditions:
- 400: Bad request (duplicate id, negative configuration values)
- 401: Unauthorized (invalid credentials)
- 404: Not found (unknown id)
- 422: Request body failed validation
- 429: Too many requests (rate limited)
- 503: Service unavailable (admin password not configured)
"""

from .pizza import pizza_router, limiter
from .admin_customizations import admin_customizations_router
from .admin_configurations import admin_configurations_router

__all__ = [
    "pizza_router",
    "limiter",
    "admin_customizations_router",
    "admin_configurations_router",
]
