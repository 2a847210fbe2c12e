"""Answer acceptance domain service."""

import logfire

from qna.domain.error import NotFoundError
from qna.domain.model import Answer
from qna.domain.repository import AnswerRepository, QuestionRepository
from qna.domain.value import Actor, AnswerId

from .base import Service
from .policy import QuestionOwnerPolicy


class AcceptanceService(Service):
    """Grants accepted-answer status.

    A question has at most one accepted answer. Accepting a new answer
    clears the previous one in the same transition. There is no unaccept.
    """

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
    ) -> None:
        """Initialize acceptance service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository

    async def accept_answer(self, actor: Actor, answer_id: AnswerId) -> Answer:
        """Mark an answer as the accepted answer of its question.

        Args:
            actor: Authenticated caller, must be the question author
            answer_id: Answer to accept

        Returns:
            The accepted answer

        Raises:
            NotFoundError: If the answer or its question doesn't exist
            NotAuthorizedError: If the caller didn't ask the question
        """
        with logfire.span(
            "acceptance_service.accept_answer",
            answer_id=str(answer_id),
            user_id=str(actor.user_id),
        ):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                logfire.warn("Accept on non-existent answer", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))

            question = await self.question_repository.find_by_id(answer.question_id)
            if not question:
                logfire.warn(
                    "Accept on answer with missing question",
                    question_id=str(answer.question_id),
                )
                raise NotFoundError("Question", str(answer.question_id))

            QuestionOwnerPolicy.check(actor, question)

            # Locks the question until the request transaction ends
            state = await self.answer_repository.get_acceptance_state(
                question.id, for_update=True
            )

            if state.is_accepted(answer.id):
                logfire.info("Answer already accepted", answer_id=str(answer_id))
                return answer.model_copy(update={"is_accepted": True})

            await self.answer_repository.apply_acceptance_state(
                state.accept(answer.id)
            )
            logfire.info(
                "Answer accepted",
                answer_id=str(answer_id),
                question_id=str(question.id),
                previous=str(state.accepted_answer_id)
                if state.accepted_answer_id
                else None,
            )
            return answer.model_copy(update={"is_accepted": True})
