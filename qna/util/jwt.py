"""Bearer token encoding and verification (PyJWT, HS256 by default)."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel, field_validator

from qna.config import AuthSettings

USER_CLAIM = "user_id"


class TokenPayload(BaseModel):
    """Claims the API relies on."""

    user_id: str
    exp: datetime

    @field_validator("user_id")
    @classmethod
    def validate_user_id(cls, v: str) -> str:
        """The user claim must be a UUID string."""
        UUID(v)
        return v


class JWTError(Exception):
    """Token is missing claims, malformed, forged or expired."""

    pass


def create_token(user_id: str, settings: AuthSettings) -> str:
    """Mint a token for ``user_id``.

    Issuance belongs to the identity provider; tooling and tests use this
    to produce credentials the API accepts.
    """
    now = datetime.now(timezone.utc)
    claims = {
        USER_CLAIM: user_id,
        "iat": now,
        "exp": now + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode ``token`` and check signature, expiry and required claims.

    Raises:
        JWTError: If the token is expired or otherwise invalid
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", USER_CLAIM]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload(user_id=claims[USER_CLAIM], exp=claims["exp"])
    except ValueError:
        raise JWTError("Invalid token")
