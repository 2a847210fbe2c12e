"""Delete question use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.common import MessageResponse
from qna.domain.service import QuestionService
from qna.domain.value import Actor, QuestionId, UserId, UserRole


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: str
    user_id: str
    role: UserRole = UserRole.USER


class DeleteQuestionUseCase:
    """Use case for deleting a question with everything under it."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: DeleteQuestionRequest) -> MessageResponse:
        actor = Actor(user_id=UserId(UUID(request.user_id)), role=request.role)
        await self.question_service.delete_question(
            actor, QuestionId(UUID(request.question_id))
        )
        return MessageResponse(message="Question deleted successfully")
