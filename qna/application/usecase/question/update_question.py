"""Update question use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.base import ApiModel
from qna.application.usecase.common import QuestionView
from qna.domain.service import QuestionService
from qna.domain.value import Actor, QuestionId, UserId, UserRole


class UpdateQuestionRequest(BaseModel):
    """Update question request. Omitted fields are left unchanged."""

    question_id: str
    user_id: str
    role: UserRole = UserRole.USER
    title: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[list[str]] = None


class UpdateQuestionResponse(ApiModel):
    """Update question response."""

    message: str
    question: QuestionView


class UpdateQuestionUseCase:
    """Use case for editing a question."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: UpdateQuestionRequest) -> UpdateQuestionResponse:
        """Execute update question flow.

        Raises:
            NotFoundError: If question not found
            NotAuthorizedError: If caller is neither the author nor an admin
        """
        actor = Actor(user_id=UserId(UUID(request.user_id)), role=request.role)
        question = await self.question_service.update_question(
            actor,
            QuestionId(UUID(request.question_id)),
            title=request.title,
            description=request.description,
            tags=[t.strip() for t in request.tags] if request.tags is not None else None,
        )
        return UpdateQuestionResponse(
            message="Question updated successfully",
            question=QuestionView.of(question),
        )
