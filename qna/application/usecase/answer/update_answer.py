"""Update answer use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.base import ApiModel
from qna.application.usecase.common import AnswerView
from qna.domain.service import AnswerService, VoteService
from qna.domain.value import Actor, AnswerId, UserId, UserRole


class UpdateAnswerRequest(BaseModel):
    """Update answer request."""

    answer_id: str
    content: str
    user_id: str
    role: UserRole = UserRole.USER


class UpdateAnswerResponse(ApiModel):
    """Update answer response."""

    message: str
    answer: AnswerView


class UpdateAnswerUseCase:
    """Use case for editing an answer's content."""

    def __init__(self, answer_service: AnswerService, vote_service: VoteService) -> None:
        """Initialize update answer use case.

        Args:
            answer_service: Answer domain service
            vote_service: Vote domain service (tally for the response)
        """
        self.answer_service = answer_service
        self.vote_service = vote_service

    async def execute(self, request: UpdateAnswerRequest) -> UpdateAnswerResponse:
        """Execute update answer flow.

        Raises:
            NotFoundError: If answer not found
            NotAuthorizedError: If caller is neither the author nor an admin
        """
        actor = Actor(user_id=UserId(UUID(request.user_id)), role=request.role)
        answer = await self.answer_service.update_answer(
            actor, AnswerId(UUID(request.answer_id)), request.content
        )
        vote_count = await self.vote_service.get_vote_count(answer.id)

        return UpdateAnswerResponse(
            message="Answer updated successfully",
            answer=AnswerView.of(answer, vote_count),
        )
