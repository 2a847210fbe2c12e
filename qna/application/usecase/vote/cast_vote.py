"""Cast vote use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.base import ApiModel
from qna.application.usecase.common import VoteCountView
from qna.domain.service import VoteService
from qna.domain.value import AnswerId, UserId, VoteType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    answer_id: str
    user_id: str  # User ID from authenticated user
    type: str  # "up" or "down", any case


class CastVoteResponse(ApiModel):
    """Cast vote response."""

    message: str
    vote_count: VoteCountView
    user_vote: Optional[VoteType]


class CastVoteUseCase:
    """Use case for voting on an answer (register, switch or toggle off)."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Raises:
            ValidationError: If the vote type is invalid
            NotFoundError: If the answer doesn't exist
        """
        result = await self.vote_service.cast_vote(
            user_id=UserId(UUID(request.user_id)),
            answer_id=AnswerId(UUID(request.answer_id)),
            vote_type=request.type,
        )

        return CastVoteResponse(
            message=result.message,
            vote_count=VoteCountView.of(result.vote_count),
            user_vote=result.user_vote,
        )
