"""Bearer token verification service."""

import logfire

from qna.config import AuthSettings
from qna.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Verifies caller tokens against the configured signing key."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str) -> str:
        """Mint a token for ``user_id`` with the configured expiry."""
        with logfire.span("jwt_service.create_token", user_id=user_id):
            return create_token(user_id, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Return the token's claims.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except Exception as e:
                logfire.warn("Token rejected", reason=str(e))
                raise
            logfire.debug("Token accepted", user_id=payload.user_id)
            return payload
