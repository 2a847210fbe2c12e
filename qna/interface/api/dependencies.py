"""Request-level helpers shared by routes."""

from typing import Optional

import logfire
from fastapi import HTTPException, status

from qna.application.usecase.auth import (
    CurrentUser,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from qna.domain.error import NotFoundError
from qna.util.jwt import JWTError

BEARER_PREFIX = "bearer "


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Extract the token from an ``Authorization: Bearer <jwt>`` header."""
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX) :].strip()
    return token or None


async def require_user(
    authorization: Optional[str], use_case: GetCurrentUserUseCase
) -> CurrentUser:
    """Resolve the caller or fail with 401.

    Raises:
        HTTPException: If the credential is missing, invalid, or names no user
    """
    token = bearer_token(authorization)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    try:
        return await use_case.execute(GetCurrentUserRequest(token=token))
    except (JWTError, NotFoundError, ValueError) as e:
        logfire.info("Rejected credential", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
        )


async def optional_user(
    authorization: Optional[str], use_case: GetCurrentUserUseCase
) -> Optional[CurrentUser]:
    """Resolve the caller if a valid credential is present, else None."""
    if not bearer_token(authorization):
        return None
    try:
        return await require_user(authorization, use_case)
    except HTTPException:
        # Public reads ignore bad credentials
        return None
