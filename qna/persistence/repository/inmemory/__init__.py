"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository
from .comment import InMemoryCommentRepository
from .database import InMemoryDatabase
from .question import InMemoryQuestionRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryAnswerRepository",
    "InMemoryCommentRepository",
    "InMemoryDatabase",
    "InMemoryQuestionRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
