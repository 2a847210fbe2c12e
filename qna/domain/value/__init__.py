"""Domain value objects for the Q&A platform."""

from qna.domain.value.identifiers import (
    AnswerId,
    CommentId,
    QuestionId,
    UserId,
    VoteId,
)
from qna.domain.value.types import (
    Actor,
    Pagination,
    QuestionAcceptanceState,
    UserRole,
    Username,
    VoteAction,
    VoteCount,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "VoteId",
    "CommentId",
    # Types
    "Actor",
    "Pagination",
    "QuestionAcceptanceState",
    "UserRole",
    "Username",
    "VoteAction",
    "VoteCount",
    "VoteType",
]
