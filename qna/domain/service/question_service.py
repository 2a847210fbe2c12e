"""Question domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from qna.domain.error import NotFoundError
from qna.domain.model import Question
from qna.domain.repository import QuestionRepository
from qna.domain.value import Actor, QuestionId

from .base import Service
from .policy import OwnerOrAdminPolicy


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(self, question_repository: QuestionRepository) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
        """
        self.question_repository = question_repository

    async def get_question(self, question_id: QuestionId) -> Question:
        """Get a question by ID.

        Raises:
            NotFoundError: If question not found
        """
        with logfire.span("question_service.get_question", question_id=str(question_id)):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def create_question(
        self, actor: Actor, title: str, description: str, tags: list[str]
    ) -> Question:
        """Ask a new question.

        Args:
            actor: Authenticated caller, becomes the author
            title: Question title
            description: Question body
            tags: Topic tags

        Returns:
            Created question
        """
        with logfire.span(
            "question_service.create_question", user_id=str(actor.user_id), title=title
        ):
            now = datetime.now()
            question = Question(
                id=QuestionId(uuid4()),
                title=title,
                description=description,
                tags=tags,
                author_id=actor.user_id,
                created_at=now,
                updated_at=now,
            )
            saved = await self.question_repository.save(question)
            logfire.info("Question created", question_id=str(saved.id))
            return saved

    async def update_question(
        self,
        actor: Actor,
        question_id: QuestionId,
        title: Optional[str] = None,
        description: Optional[str] = None,
        tags: Optional[list[str]] = None,
    ) -> Question:
        """Partially update a question. Omitted fields keep their value.

        Raises:
            NotFoundError: If question not found
            NotAuthorizedError: If caller is neither the author nor an admin
        """
        with logfire.span(
            "question_service.update_question",
            question_id=str(question_id),
            user_id=str(actor.user_id),
        ):
            question = await self.get_question(question_id)
            OwnerOrAdminPolicy.check(
                actor, question.author_id, "You can only edit your own questions"
            )

            changes: dict = {}
            if title is not None:
                changes["title"] = title
            if description is not None:
                changes["description"] = description
            if tags is not None:
                changes["tags"] = tags

            updated = question.revise(**changes)
            saved = await self.question_repository.save(updated)
            logfire.info(
                "Question updated",
                question_id=str(question_id),
                fields=sorted(changes),
            )
            return saved

    async def delete_question(self, actor: Actor, question_id: QuestionId) -> None:
        """Delete a question with its answers, votes and comments.

        Raises:
            NotFoundError: If question not found
            NotAuthorizedError: If caller is neither the author nor an admin
        """
        with logfire.span(
            "question_service.delete_question",
            question_id=str(question_id),
            user_id=str(actor.user_id),
        ):
            question = await self.get_question(question_id)
            OwnerOrAdminPolicy.check(
                actor, question.author_id, "You can only delete your own questions"
            )

            await self.question_repository.delete(question_id)
            logfire.info("Question deleted", question_id=str(question_id))

    async def popular_tags(self, limit: int = 20) -> list[tuple[str, int]]:
        """Most used tags, most used first."""
        with logfire.span("question_service.popular_tags", limit=limit):
            return await self.question_repository.popular_tags(limit)
