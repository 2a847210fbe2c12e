"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.domain.service import JWTService, UserService
from qna.domain.value import Actor, UserId, UserRole


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class CurrentUser(BaseModel):
    """Authenticated caller."""

    user_id: str
    username: str
    role: UserRole

    @property
    def actor(self) -> Actor:
        return Actor(user_id=UserId(UUID(self.user_id)), role=self.role)


class GetCurrentUserUseCase:
    """Use case for resolving a bearer token to the calling user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> CurrentUser:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Load user from database for the current role

        Args:
            request: Request with JWT token

        Returns:
            The calling user

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If user not found
        """
        payload = self.jwt_service.verify_token(request.token)

        user = await self.user_service.get_by_id(UserId(UUID(payload.user_id)))

        return CurrentUser(
            user_id=str(user.id),
            username=user.username.root,
            role=user.role,
        )
