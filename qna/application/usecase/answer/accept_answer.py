"""Accept answer use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.base import ApiModel
from qna.application.usecase.common import AnswerView
from qna.domain.service import AcceptanceService, VoteService
from qna.domain.value import Actor, AnswerId, UserId, UserRole


class AcceptAnswerRequest(BaseModel):
    """Accept answer request."""

    answer_id: str
    user_id: str
    role: UserRole = UserRole.USER


class AcceptAnswerResponse(ApiModel):
    """Accept answer response."""

    message: str
    answer: AnswerView


class AcceptAnswerUseCase:
    """Use case for the question author to accept an answer."""

    def __init__(
        self, acceptance_service: AcceptanceService, vote_service: VoteService
    ) -> None:
        """Initialize accept answer use case.

        Args:
            acceptance_service: Acceptance domain service
            vote_service: Vote domain service (tally for the response)
        """
        self.acceptance_service = acceptance_service
        self.vote_service = vote_service

    async def execute(self, request: AcceptAnswerRequest) -> AcceptAnswerResponse:
        """Execute accept answer flow.

        Raises:
            NotFoundError: If answer or question not found
            NotAuthorizedError: If caller is not the question author
        """
        actor = Actor(user_id=UserId(UUID(request.user_id)), role=request.role)
        answer = await self.acceptance_service.accept_answer(
            actor, AnswerId(UUID(request.answer_id))
        )
        vote_count = await self.vote_service.get_vote_count(answer.id)

        return AcceptAnswerResponse(
            message="Answer accepted successfully",
            answer=AnswerView.of(answer, vote_count),
        )
