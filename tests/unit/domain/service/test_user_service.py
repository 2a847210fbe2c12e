"""Unit tests for UserService and JWTService."""

from uuid import uuid4

import pytest

from qna.config import AuthSettings
from qna.domain.error import NotFoundError
from qna.domain.service import JWTService, UserService
from qna.domain.value import UserId
from qna.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryUserRepository,
)
from qna.util.jwt import JWTError
from tests.conftest import make_user

SECRET = "unit-test-secret-0123456789abcdef"


class TestGetUser:
    """Tests for UserService.get_by_id()."""

    @pytest.mark.asyncio
    async def test_returns_stored_user(self):
        """Should return the user by ID."""
        # Arrange
        user_repo = InMemoryUserRepository(InMemoryDatabase())
        service = UserService(user_repo)
        user = await user_repo.save(make_user("alice"))

        # Act
        found = await service.get_by_id(user.id)

        # Assert
        assert found == user

    @pytest.mark.asyncio
    async def test_missing_user(self):
        """Should raise NotFoundError for unknown IDs."""
        service = UserService(InMemoryUserRepository(InMemoryDatabase()))

        with pytest.raises(NotFoundError, match="User not found"):
            await service.get_by_id(UserId(uuid4()))


class TestJWTService:
    """Tests for token round trips."""

    def test_token_carries_user_id(self):
        """A minted token verifies to the same user ID."""
        service = JWTService(AuthSettings(jwt_secret=SECRET))
        user_id = str(uuid4())

        payload = service.verify_token(service.create_token(user_id))

        assert payload.user_id == user_id

    def test_foreign_secret_rejected(self):
        """Tokens signed with another secret are invalid."""
        issuer = JWTService(AuthSettings(jwt_secret=SECRET))
        verifier = JWTService(AuthSettings(jwt_secret=SECRET[::-1]))

        with pytest.raises(JWTError, match="Invalid token"):
            verifier.verify_token(issuer.create_token(str(uuid4())))

    def test_expired_token_rejected(self):
        """Expired tokens are refused."""
        service = JWTService(AuthSettings(jwt_secret=SECRET, jwt_expiry_days=-1))

        with pytest.raises(JWTError, match="expired"):
            service.verify_token(service.create_token(str(uuid4())))
