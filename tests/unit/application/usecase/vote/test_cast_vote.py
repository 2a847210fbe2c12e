"""Unit tests for CastVoteUseCase and GetVoteCountUseCase."""

from uuid import uuid4

import pytest

from qna.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetVoteCountRequest,
    GetVoteCountUseCase,
)
from qna.domain.error import NotFoundError
from qna.domain.repository import AnswerRepository, QuestionRepository
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _answer(env):
    question_repo = await env.get(QuestionRepository)
    answer_repo = await env.get(AnswerRepository)
    question = await question_repo.save(make_question(make_user().id))
    return await answer_repo.save(make_answer(question.id, make_user().id))


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_response_shape(self, unit_env):
        """Response serializes to camelCase with the fresh tally."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        answer = await _answer(unit_env)

        # Act
        response = await use_case.execute(
            CastVoteRequest(answer_id=str(answer.id), user_id=str(uuid4()), type="up")
        )

        # Assert
        assert response.model_dump(by_alias=True, mode="json") == {
            "message": "Vote registered",
            "voteCount": {"upVotes": 1, "downVotes": 0, "total": 1},
            "userVote": "up",
        }

    @pytest.mark.asyncio
    async def test_toggle_off_clears_user_vote(self, unit_env):
        """Removing a vote reports a null userVote."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        answer = await _answer(unit_env)
        request = CastVoteRequest(
            answer_id=str(answer.id), user_id=str(uuid4()), type="down"
        )
        await use_case.execute(request)

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.message == "Vote removed"
        assert response.user_vote is None
        assert response.vote_count.total == 0


class TestGetVoteCountUseCase:
    """Tests for GetVoteCountUseCase."""

    @pytest.mark.asyncio
    async def test_counts_votes(self, unit_env):
        """Public tally reflects cast votes."""
        # Arrange
        cast = await unit_env.get(CastVoteUseCase)
        use_case = await unit_env.get(GetVoteCountUseCase)
        answer = await _answer(unit_env)
        for vote_type in ("up", "up", "up", "down"):
            await cast.execute(
                CastVoteRequest(
                    answer_id=str(answer.id), user_id=str(uuid4()), type=vote_type
                )
            )

        # Act
        response = await use_case.execute(GetVoteCountRequest(answer_id=str(answer.id)))

        # Assert
        assert response.vote_count.up_votes == 3
        assert response.vote_count.down_votes == 1
        assert response.vote_count.total == 2

    @pytest.mark.asyncio
    async def test_unknown_answer(self, unit_env):
        """Tally for an unknown answer is NotFound."""
        use_case = await unit_env.get(GetVoteCountUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetVoteCountRequest(answer_id=str(uuid4())))
