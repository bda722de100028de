"""
Authentication Module for Pizza Builder
=======================================

HTTP Basic Authentication for the catalog and configuration management
endpoints. Credentials come from the ADMIN_USERNAME and ADMIN_PASSWORD
environment variables (see config.py) and are compared in constant time.

If ADMIN_PASSWORD is not configured, admin endpoints return 503 Service
Unavailable rather than allowing unauthenticated access.

Usage:
------
    from pizza_builder.auth import verify_admin_credentials

    @router.get("/admin/pizza-customizations")
    def list_customizations(
        _admin: str = Depends(verify_admin_credentials),
        db: Session = Depends(get_db),
    ):
        ...
"""

import secrets

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from . import config


# Shared realm so browsers cache credentials across admin pages
security = HTTPBasic(realm="Pizza Builder Admin")


def verify_admin_credentials(
    credentials: HTTPBasicCredentials = Depends(security),
) -> str:
    """
    Verify HTTP Basic Auth credentials for admin endpoints.

    Returns:
        str: The authenticated username if credentials are valid.

    Raises:
        HTTPException (503): If ADMIN_PASSWORD is not set.
        HTTPException (401): If credentials are invalid. Includes a
                            WWW-Authenticate header.
    """
    # Fail closed: if password not configured, deny all access
    if not config.ADMIN_PASSWORD:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Admin authentication not configured. Set ADMIN_PASSWORD environment variable.",
        )

    username_correct = secrets.compare_digest(
        credentials.username.encode("utf-8"),
        config.ADMIN_USERNAME.encode("utf-8"),
    )
    password_correct = secrets.compare_digest(
        credentials.password.encode("utf-8"),
        config.ADMIN_PASSWORD.encode("utf-8"),
    )

    if not (username_correct and password_correct):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid admin credentials",
            headers={"WWW-Authenticate": "Basic"},
        )

    return credentials.username
