"""In-memory user repository for testing."""

from typing import Dict, Optional, Sequence

from qna.domain.model import User
from qna.domain.repository import UserRepository
from qna.domain.value import UserId

from .database import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self.db.users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> Dict[UserId, User]:
        return {uid: self.db.users[uid] for uid in set(user_ids) if uid in self.db.users}

    async def save(self, user: User) -> User:
        self.db.users[user.id] = user
        return user
