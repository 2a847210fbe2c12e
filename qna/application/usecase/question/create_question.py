"""Create question use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.base import ApiModel
from qna.application.usecase.common import QuestionView
from qna.domain.service import QuestionService
from qna.domain.value import Actor, UserId


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: str
    description: str
    tags: list[str]
    author_id: str


class CreateQuestionResponse(ApiModel):
    """Create question response."""

    message: str
    question: QuestionView


class CreateQuestionUseCase:
    """Use case for asking a question."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        actor = Actor(user_id=UserId(UUID(request.author_id)))
        question = await self.question_service.create_question(
            actor,
            title=request.title,
            description=request.description,
            tags=[t.strip() for t in request.tags],
        )
        return CreateQuestionResponse(
            message="Question created successfully",
            question=QuestionView.of(question),
        )
