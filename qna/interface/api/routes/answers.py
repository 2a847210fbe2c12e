"""Answer routes: voting, acceptance, edits."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel, Field

from qna.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerResponse,
    AcceptAnswerUseCase,
    DeleteAnswerRequest,
    DeleteAnswerUseCase,
    UpdateAnswerRequest,
    UpdateAnswerResponse,
    UpdateAnswerUseCase,
)
from qna.application.usecase.auth import GetCurrentUserUseCase
from qna.application.usecase.common import MessageResponse
from qna.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetVoteCountRequest,
    GetVoteCountResponse,
    GetVoteCountUseCase,
)
from qna.interface.api.dependencies import require_user

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for voting on an answer."""

    type: str


class AnswerContentAPIRequest(BaseModel):
    """API request carrying answer content."""

    content: str = Field(min_length=20, max_length=10000)


@router.post("/{answer_id}/vote", response_model=CastVoteResponse)
async def cast_vote(
    answer_id: UUID,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> CastVoteResponse:
    """Vote on an answer.

    Voting the same direction again removes the vote; voting the other
    direction switches it. Requires authentication.

    Args:
        answer_id: Answer UUID
        request: Vote direction ("up" or "down")
        cast_vote_use_case: Cast vote use case from DI
        get_current_user_use_case: Get current user use case from DI
        authorization: Bearer credential

    Returns:
        Action message, fresh tally and the caller's current vote
    """
    user = await require_user(authorization, get_current_user_use_case)
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            answer_id=str(answer_id), user_id=user.user_id, type=request.type
        )
    )


@router.get("/{answer_id}/votes", response_model=GetVoteCountResponse)
async def get_vote_count(
    answer_id: UUID,
    get_vote_count_use_case: FromDishka[GetVoteCountUseCase],
) -> GetVoteCountResponse:
    """Get the vote tally of an answer. Public."""
    return await get_vote_count_use_case.execute(
        GetVoteCountRequest(answer_id=str(answer_id))
    )


@router.post("/{answer_id}/accept", response_model=AcceptAnswerResponse)
async def accept_answer(
    answer_id: UUID,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> AcceptAnswerResponse:
    """Accept an answer. Only the question author may do this.

    Args:
        answer_id: Answer UUID
        accept_answer_use_case: Accept answer use case from DI
        get_current_user_use_case: Get current user use case from DI
        authorization: Bearer credential

    Returns:
        The accepted answer with its tally
    """
    user = await require_user(authorization, get_current_user_use_case)
    return await accept_answer_use_case.execute(
        AcceptAnswerRequest(
            answer_id=str(answer_id), user_id=user.user_id, role=user.role
        )
    )


@router.put("/{answer_id}", response_model=UpdateAnswerResponse)
async def update_answer(
    answer_id: UUID,
    request: AnswerContentAPIRequest,
    update_answer_use_case: FromDishka[UpdateAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> UpdateAnswerResponse:
    """Edit an answer. Author or admin only."""
    user = await require_user(authorization, get_current_user_use_case)
    return await update_answer_use_case.execute(
        UpdateAnswerRequest(
            answer_id=str(answer_id),
            content=request.content,
            user_id=user.user_id,
            role=user.role,
        )
    )


@router.delete("/{answer_id}", response_model=MessageResponse)
async def delete_answer(
    answer_id: UUID,
    delete_answer_use_case: FromDishka[DeleteAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> MessageResponse:
    """Delete an answer with its votes and comments. Author or admin only."""
    user = await require_user(authorization, get_current_user_use_case)
    return await delete_answer_use_case.execute(
        DeleteAnswerRequest(
            answer_id=str(answer_id), user_id=user.user_id, role=user.role
        )
    )
