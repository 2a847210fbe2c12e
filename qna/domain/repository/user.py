"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence

from qna.domain.model.user import User
from qna.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Only the lookups needed to resolve callers and authors live here;
    profile management is owned by the accounts service.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> Dict[UserId, User]:
        """Find many users in one query.

        Args:
            user_ids: IDs to look up; duplicates are allowed

        Returns:
            Mapping of user ID to user for the IDs that exist
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
