"""Question aggregate root."""

from datetime import datetime

from pydantic import Field, field_validator

from qna.domain.model.common import DomainModel
from qna.domain.value import QuestionId, UserId


class Question(DomainModel):
    """Question aggregate root.

    Owns its answers and comments; deleting a question deletes both.
    Tags keep their submitted order and are not de-duplicated.
    """

    id: QuestionId
    title: str = Field(min_length=10, max_length=200)
    description: str = Field(min_length=20, max_length=10000)
    tags: list[str] = Field(min_length=1, max_length=10)
    author_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str]) -> list[str]:
        """Each tag must be 1-20 characters."""
        for tag in v:
            if len(tag) < 1 or len(tag) > 20:
                raise ValueError("Tags must be 1-20 characters")
        return v
