"""Domain value objects for the Q&A platform.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import math
from enum import Enum
from typing import Optional

from pydantic import Field, computed_field, field_validator

from qna.domain.error import ValidationError
from qna.domain.value.common import RootValueObject, ValueObject
from qna.domain.value.identifiers import AnswerId, QuestionId, UserId


class VoteType(str, Enum):
    """Direction of a vote on an answer."""

    UP = "up"
    DOWN = "down"

    @classmethod
    def parse(cls, value: str) -> "VoteType":
        """Normalize user input (case-insensitive) to a vote type.

        Raises:
            ValidationError: If value is not "up" or "down"
        """
        try:
            return cls(value.strip().lower())
        except (AttributeError, ValueError):
            raise ValidationError('Vote type must be "up" or "down"')


class VoteAction(str, Enum):
    """What a cast did to the caller's vote row."""

    REGISTERED = "registered"  # Row inserted
    UPDATED = "updated"  # Row switched to the opposite direction
    REMOVED = "removed"  # Row deleted (toggle off)


class UserRole(str, Enum):
    """User roles for moderation."""

    USER = "USER"
    MODERATOR = "MODERATOR"
    ADMIN = "ADMIN"


class Username(RootValueObject[str]):
    """Public username."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not empty and within length limits."""
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Username must be 1-50 characters")
        return v


class Actor(ValueObject):
    """The authenticated caller of an operation."""

    user_id: UserId
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class VoteCount(ValueObject):
    """Vote tally for one answer, always derived from vote rows."""

    up_votes: int = Field(default=0, ge=0)
    down_votes: int = Field(default=0, ge=0)

    @computed_field
    @property
    def total(self) -> int:
        """Net score."""
        return self.up_votes - self.down_votes


class QuestionAcceptanceState(ValueObject):
    """Which answer (if any) is accepted on a question.

    Acceptance moves as a single transition on this value so the
    clear-then-set pair is always applied together.
    """

    question_id: QuestionId
    accepted_answer_id: Optional[AnswerId] = None

    def accept(self, answer_id: AnswerId) -> "QuestionAcceptanceState":
        """Return the state with ``answer_id`` as the only accepted answer."""
        return self.model_copy(update={"accepted_answer_id": answer_id})

    def is_accepted(self, answer_id: AnswerId) -> bool:
        return self.accepted_answer_id == answer_id


class Pagination(ValueObject):
    """Pagination window and metadata for a filtered listing."""

    page: int = Field(ge=1)
    limit: int = Field(ge=1)
    total_count: int = Field(ge=0)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @computed_field
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.limit)

    @computed_field
    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @computed_field
    @property
    def has_prev(self) -> bool:
        return self.page > 1
