"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from typing import Optional
from uuid import uuid4

from qna.domain.model import Answer, Comment, Question, User
from qna.domain.value import (
    Actor,
    AnswerId,
    CommentId,
    QuestionId,
    UserId,
    UserRole,
    Username,
)

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def at(minutes: int) -> datetime:
    """Deterministic timestamp ``minutes`` after BASE_TIME."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_user(name: str = "alice", role: UserRole = UserRole.USER) -> User:
    """Build a user with a fresh ID."""
    return User(id=UserId(uuid4()), username=Username(name), role=role)


def actor_for(user: User) -> Actor:
    """Actor for an existing user, carrying their role."""
    return Actor(user_id=user.id, role=user.role)


def make_question(
    author_id: UserId,
    title: str = "How do I reverse a list in Python?",
    description: str = "I have a list and want it in reverse order without copying.",
    tags: Optional[list[str]] = None,
    created_at: Optional[datetime] = None,
) -> Question:
    """Build a valid question."""
    created = created_at or datetime.now()
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        description=description,
        tags=tags or ["python"],
        author_id=author_id,
        created_at=created,
        updated_at=created,
    )


def make_answer(
    question_id: QuestionId,
    author_id: UserId,
    content: str = "Use list.reverse() to reverse the list in place.",
    is_accepted: bool = False,
    created_at: Optional[datetime] = None,
) -> Answer:
    """Build a valid answer."""
    created = created_at or datetime.now()
    return Answer(
        id=AnswerId(uuid4()),
        content=content,
        question_id=question_id,
        author_id=author_id,
        is_accepted=is_accepted,
        created_at=created,
        updated_at=created,
    )


def make_comment(
    author_id: UserId,
    question_id: Optional[QuestionId] = None,
    answer_id: Optional[AnswerId] = None,
    content: str = "Nice one",
    created_at: Optional[datetime] = None,
) -> Comment:
    """Build a comment on a question or an answer."""
    return Comment(
        id=CommentId(uuid4()),
        content=content,
        author_id=author_id,
        question_id=question_id,
        answer_id=answer_id,
        created_at=created_at or datetime.now(),
    )
