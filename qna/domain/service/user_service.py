"""User lookup service."""

from typing import Dict, Sequence

import logfire

from qna.domain.error import NotFoundError
from qna.domain.model import User
from qna.domain.repository import UserRepository
from qna.domain.value import UserId

from .base import Service


class UserService(Service):
    """Resolves authenticated callers to their stored profile and role."""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Load a user.

        Raises:
            NotFoundError: If no user has this ID
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                raise NotFoundError("User", str(user_id))
            return user

    async def get_many(self, user_ids: Sequence[UserId]) -> Dict[UserId, User]:
        """Load the authors shown next to questions, answers and comments.

        IDs with no stored user are left out of the result.
        """
        with logfire.span("user_service.get_many", count=len(user_ids)):
            return await self.user_repository.find_by_ids(user_ids)
