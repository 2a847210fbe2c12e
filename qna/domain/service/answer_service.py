"""Answer domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from qna.domain.error import BusinessRuleViolationError, NotFoundError
from qna.domain.model import Answer
from qna.domain.repository import AnswerRepository, QuestionRepository
from qna.domain.value import Actor, AnswerId, QuestionId

from .base import Service
from .policy import OwnerOrAdminPolicy

DUPLICATE_ANSWER_MESSAGE = (
    "You have already answered this question. "
    "You can edit your existing answer instead."
)


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository

    async def get_answer(self, answer_id: AnswerId) -> Answer:
        """Get an answer by ID.

        Raises:
            NotFoundError: If answer not found
        """
        with logfire.span("answer_service.get_answer", answer_id=str(answer_id)):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                logfire.warn("Answer not found", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))
            return answer

    async def list_for_question(self, question_id: QuestionId) -> list[Answer]:
        """All answers to a question, unordered.

        Raises:
            NotFoundError: If question not found
        """
        with logfire.span(
            "answer_service.list_for_question", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))

            answers = await self.answer_repository.find_by_question(question_id)
            logfire.info(
                "Answers loaded", question_id=str(question_id), count=len(answers)
            )
            return answers

    async def create_answer(
        self, actor: Actor, question_id: QuestionId, content: str
    ) -> Answer:
        """Answer a question.

        Args:
            actor: Authenticated caller
            question_id: Question being answered
            content: Answer body

        Returns:
            Created answer

        Raises:
            NotFoundError: If question not found
            BusinessRuleViolationError: If the caller already answered
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            user_id=str(actor.user_id),
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Answer to non-existent question", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))

            existing = await self.answer_repository.find_by_question_and_author(
                question_id, actor.user_id
            )
            if existing:
                logfire.warn(
                    "Duplicate answer attempt",
                    question_id=str(question_id),
                    user_id=str(actor.user_id),
                )
                raise BusinessRuleViolationError(DUPLICATE_ANSWER_MESSAGE)

            now = datetime.now()
            answer = Answer(
                id=AnswerId(uuid4()),
                content=content,
                question_id=question_id,
                author_id=actor.user_id,
                created_at=now,
                updated_at=now,
            )

            try:
                saved = await self.answer_repository.save(answer)
            except IntegrityError:
                logfire.warn(
                    "Duplicate answer caught by constraint",
                    question_id=str(question_id),
                    user_id=str(actor.user_id),
                )
                raise BusinessRuleViolationError(DUPLICATE_ANSWER_MESSAGE)

            logfire.info("Answer created", answer_id=str(saved.id))
            return saved

    async def update_answer(
        self, actor: Actor, answer_id: AnswerId, content: str
    ) -> Answer:
        """Replace an answer's content.

        Raises:
            NotFoundError: If answer not found
            NotAuthorizedError: If caller is neither the author nor an admin
        """
        with logfire.span(
            "answer_service.update_answer",
            answer_id=str(answer_id),
            user_id=str(actor.user_id),
        ):
            answer = await self.get_answer(answer_id)
            OwnerOrAdminPolicy.check(
                actor, answer.author_id, "You can only edit your own answers"
            )

            # Validates content before touching the store
            answer.revise(content=content)

            updated = await self.answer_repository.update_content(answer_id, content)
            if not updated:
                raise NotFoundError("Answer", str(answer_id))

            logfire.info("Answer updated", answer_id=str(answer_id))
            return updated

    async def delete_answer(self, actor: Actor, answer_id: AnswerId) -> None:
        """Delete an answer with its votes and comments.

        Raises:
            NotFoundError: If answer not found
            NotAuthorizedError: If caller is neither the author nor an admin
        """
        with logfire.span(
            "answer_service.delete_answer",
            answer_id=str(answer_id),
            user_id=str(actor.user_id),
        ):
            answer = await self.get_answer(answer_id)
            OwnerOrAdminPolicy.check(
                actor, answer.author_id, "You can only delete your own answers"
            )

            await self.answer_repository.delete(answer_id)
            logfire.info("Answer deleted", answer_id=str(answer_id))
