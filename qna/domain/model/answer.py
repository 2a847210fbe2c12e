"""Answer entity."""

from datetime import datetime

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import AnswerId, QuestionId, UserId


class Answer(DomainModel):
    """Answer entity.

    Business rules:
    - One answer per user per question (enforced by database unique constraint)
    - At most one accepted answer per question; only AcceptanceService
      changes is_accepted
    - question_id never changes after creation
    """

    id: AnswerId
    content: str = Field(min_length=20, max_length=10000)
    question_id: QuestionId
    author_id: UserId
    is_accepted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
