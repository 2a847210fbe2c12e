"""Vote entity.

Votes are up or down opinions on answers. Each user holds at most one
vote per answer; casting again toggles or switches it.
"""

from datetime import datetime

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import AnswerId, UserId, VoteId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per answer (enforced by database unique constraint)
    - Switching direction updates the row in place, keeping created_at
    """

    id: VoteId
    type: VoteType
    user_id: UserId
    answer_id: AnswerId
    created_at: datetime = Field(default_factory=datetime.now)
