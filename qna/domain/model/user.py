"""User aggregate root.

Users own questions and answers; their role drives moderation rights.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import UserId, UserRole, Username


class User(DomainModel):
    """User aggregate root.

    Role changes are an administrative concern handled outside this service.
    """

    id: UserId
    username: Username
    email: Optional[str] = None
    avatar: Optional[str] = None  # Image URL
    role: UserRole = UserRole.USER
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
