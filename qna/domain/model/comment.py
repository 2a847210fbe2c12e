"""Comment entity.

Comments hang off either a question or an answer and are deleted with it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from qna.domain.model.common import DomainModel
from qna.domain.value import AnswerId, CommentId, QuestionId, UserId


class Comment(DomainModel):
    """Comment on a question or an answer."""

    id: CommentId
    content: str = Field(min_length=1, max_length=1000)
    author_id: UserId
    question_id: Optional[QuestionId] = None
    answer_id: Optional[AnswerId] = None
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_single_parent(self) -> "Comment":
        """A comment belongs to exactly one question or answer."""
        if (self.question_id is None) == (self.answer_id is None):
            raise ValueError("Comment must belong to exactly one question or answer")
        return self
