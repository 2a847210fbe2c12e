"""Repository interfaces for the Q&A domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from qna.domain.repository.answer import AnswerRepository
from qna.domain.repository.comment import CommentRepository
from qna.domain.repository.question import (
    QuestionFilter,
    QuestionQuery,
    QuestionRepository,
    QuestionSortField,
    SortOrder,
)
from qna.domain.repository.user import UserRepository
from qna.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "QuestionRepository",
    "AnswerRepository",
    "VoteRepository",
    "CommentRepository",
    "QuestionFilter",
    "QuestionQuery",
    "QuestionSortField",
    "SortOrder",
]
