"""
Authentication entry point.

This module only shapes and validates the login payload. Verifying
credentials and issuing sessions belong to an external authenticator, wired
in by overriding the ``get_authenticator`` dependency.
"""
import logging
from typing import Any, Callable, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from schemas.login_schema import LoginRequest, ensure_valid_login

logger = logging.getLogger(__name__)

Authenticator = Callable[[LoginRequest], Any]

router = APIRouter(tags=["Auth"])


def get_authenticator() -> Optional[Authenticator]:
    """No authenticator is bundled; applications override this dependency."""
    return None


@router.post("/login", status_code=status.HTTP_200_OK)
async def login(
    request: LoginRequest,
    authenticator: Optional[Authenticator] = Depends(get_authenticator),
):
    ensure_valid_login(request)

    if authenticator is None:
        logger.warning("Login attempted but no authenticator is configured")
        raise HTTPException(
            status_code=status.HTTP_501_NOT_IMPLEMENTED,
            detail="Authentication backend not configured",
        )
    return authenticator(request)
