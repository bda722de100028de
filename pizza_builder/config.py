"""
Configuration Module for Pizza Builder
======================================

This module centralizes the configuration settings, environment variables,
and constants used throughout the Pizza Builder application. All environment
variables and their defaults are defined here so there is one place to look
when deploying to a new environment.

Configuration Categories:
-------------------------
- **Database**: Connection URL for the catalog and configuration tables.

- **Pizza Pricing Defaults**: The included topping allowance and the cost of
  each extra topping unit that apply to a pizza product until staff save an
  explicit configuration for it.

- **Catalog Listing**: Paging limits for the admin customization listing.

- **Rate Limiting**: Throttling for the order-submission endpoint, which is
  called by external order-extraction sources.

- **CORS Settings**: Cross-Origin Resource Sharing configuration for the
  ordering screens.

- **Admin Authentication**: Credentials for catalog and configuration
  management endpoints.

Environment Variables:
----------------------
- DATABASE_URL: SQLAlchemy URL (default: "sqlite:///./pizza_builder.db")
- PIZZA_DEFAULT_INCLUDED_TOPPINGS: Included topping units (default: 4)
- PIZZA_DEFAULT_EXTRA_TOPPING_COST: Cost per extra unit (default: "20")
- CATALOG_PAGE_SIZE_DEFAULT: Default page size (default: 10)
- CATALOG_PAGE_SIZE_MAX: Largest allowed page size (default: 1000)
- RATE_LIMIT_SUBMIT: Submission endpoint rate limit (default: "60 per minute")
- RATE_LIMIT_ENABLED: Enable/disable rate limiting (default: "true")
- CORS_ORIGINS: Comma-separated allowed origins (default: "*")
- ADMIN_USERNAME: Admin username (default: "admin")
- ADMIN_PASSWORD: Admin password (required for admin access)

Usage:
------
    from pizza_builder.config import (
        DEFAULT_INCLUDED_TOPPINGS,
        DEFAULT_EXTRA_TOPPING_COST,
        RATE_LIMIT_SUBMIT,
    )
"""

import os
from decimal import Decimal
from typing import List


# =============================================================================
# Database Configuration
# =============================================================================

DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./pizza_builder.db")


# =============================================================================
# Pizza Pricing Defaults
# =============================================================================
# A pizza product without a saved configuration is priced with these values.
# Four topping units are bundled into the base price; each unit beyond that
# is charged at the extra topping cost.

DEFAULT_INCLUDED_TOPPINGS: int = int(os.getenv("PIZZA_DEFAULT_INCLUDED_TOPPINGS", "4"))
DEFAULT_EXTRA_TOPPING_COST: Decimal = Decimal(os.getenv("PIZZA_DEFAULT_EXTRA_TOPPING_COST", "20"))

# Topping value given to a new customization when none is supplied
DEFAULT_TOPPING_VALUE: int = 1


# =============================================================================
# Catalog Listing Configuration
# =============================================================================

CATALOG_PAGE_SIZE_DEFAULT: int = int(os.getenv("CATALOG_PAGE_SIZE_DEFAULT", "10"))
CATALOG_PAGE_SIZE_MAX: int = int(os.getenv("CATALOG_PAGE_SIZE_MAX", "1000"))


# =============================================================================
# Rate Limiting Configuration
# =============================================================================
# Order submission is also reachable by non-interactive extraction sources,
# so it is throttled per client address.

# Rate limit format: "X per Y" where Y is second, minute, hour, or day
RATE_LIMIT_SUBMIT: str = os.getenv("RATE_LIMIT_SUBMIT", "60 per minute")
RATE_LIMIT_ENABLED: bool = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"


def get_rate_limit_submit() -> str:
    """
    Return the current submission rate limit.

    This function allows dynamic override in tests without modifying
    the module-level constant.

    Returns:
        Rate limit string in "X per Y" format
    """
    return RATE_LIMIT_SUBMIT


# =============================================================================
# CORS Configuration
# =============================================================================

# Format: comma-separated list of origins, e.g., "https://pos.myshop.com"
# Default "*" allows all origins (suitable for development only)
_cors_origins_env = os.getenv("CORS_ORIGINS", "")
CORS_ORIGINS: List[str] = [
    origin.strip()
    for origin in _cors_origins_env.split(",")
    if origin.strip()
] or ["*"]


# =============================================================================
# Admin Authentication Configuration
# =============================================================================
# ADMIN_PASSWORD must be set in production for admin access to work.

ADMIN_USERNAME: str = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD: str = os.getenv("ADMIN_PASSWORD", "")
