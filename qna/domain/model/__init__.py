"""Domain model entities for the Q&A platform."""

from qna.domain.model.answer import Answer
from qna.domain.model.comment import Comment
from qna.domain.model.question import Question
from qna.domain.model.user import User
from qna.domain.model.vote import Vote

__all__ = [
    "User",
    "Question",
    "Answer",
    "Vote",
    "Comment",
]
