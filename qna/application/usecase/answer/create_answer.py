"""Create answer use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.base import ApiModel
from qna.application.usecase.common import AnswerView
from qna.domain.service import AnswerService
from qna.domain.value import Actor, QuestionId, UserId, VoteCount


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: str
    content: str
    author_id: str


class CreateAnswerResponse(ApiModel):
    """Create answer response."""

    message: str
    answer: AnswerView


class CreateAnswerUseCase:
    """Use case for answering a question."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
        """
        self.answer_service = answer_service

    async def execute(self, request: CreateAnswerRequest) -> CreateAnswerResponse:
        """Execute create answer flow.

        Raises:
            NotFoundError: If question not found
            BusinessRuleViolationError: If the author already answered
        """
        actor = Actor(user_id=UserId(UUID(request.author_id)))
        answer = await self.answer_service.create_answer(
            actor, QuestionId(UUID(request.question_id)), request.content
        )

        # A new answer has no votes yet
        return CreateAnswerResponse(
            message="Answer created successfully",
            answer=AnswerView.of(answer, VoteCount()),
        )
