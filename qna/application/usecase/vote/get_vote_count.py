"""Get vote count use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.base import ApiModel
from qna.application.usecase.common import VoteCountView
from qna.domain.service import AnswerService, VoteService
from qna.domain.value import AnswerId


class GetVoteCountRequest(BaseModel):
    """Get vote count request."""

    answer_id: str


class GetVoteCountResponse(ApiModel):
    """Get vote count response."""

    vote_count: VoteCountView


class GetVoteCountUseCase:
    """Use case for reading the vote tally of an answer."""

    def __init__(self, vote_service: VoteService, answer_service: AnswerService) -> None:
        self.vote_service = vote_service
        self.answer_service = answer_service

    async def execute(self, request: GetVoteCountRequest) -> GetVoteCountResponse:
        answer = await self.answer_service.get_answer(AnswerId(UUID(request.answer_id)))
        count = await self.vote_service.get_vote_count(answer.id)
        return GetVoteCountResponse(vote_count=VoteCountView.of(count))
