"""Delete answer use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.common import MessageResponse
from qna.domain.service import AnswerService
from qna.domain.value import Actor, AnswerId, UserId, UserRole


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    answer_id: str
    user_id: str
    role: UserRole = UserRole.USER


class DeleteAnswerUseCase:
    """Use case for deleting an answer."""

    def __init__(self, answer_service: AnswerService) -> None:
        self.answer_service = answer_service

    async def execute(self, request: DeleteAnswerRequest) -> MessageResponse:
        actor = Actor(user_id=UserId(UUID(request.user_id)), role=request.role)
        await self.answer_service.delete_answer(actor, AnswerId(UUID(request.answer_id)))
        return MessageResponse(message="Answer deleted successfully")
