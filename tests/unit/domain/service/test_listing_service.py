"""Unit tests for ListingService."""

from uuid import uuid4

import pytest

from qna.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionFilter,
    QuestionQuery,
    QuestionRepository,
    QuestionSortField,
    SortOrder,
)
from qna.domain.service import ListingService, VoteService
from qna.domain.value import UserId, VoteType
from tests.conftest import at, make_answer, make_comment, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _vote(env, answer_id, ups: int = 0, downs: int = 0) -> None:
    vote_service = await env.get(VoteService)
    for _ in range(ups):
        await vote_service.cast_vote(UserId(uuid4()), answer_id, "up")
    for _ in range(downs):
        await vote_service.cast_vote(UserId(uuid4()), answer_id, "down")


class TestRankAnswers:
    """Tests for answer ordering."""

    @pytest.mark.asyncio
    async def test_accepted_answer_ranks_first(self, unit_env):
        """An accepted answer outranks a higher-voted one."""
        # Arrange
        listing = await unit_env.get(ListingService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        question = await question_repo.save(make_question(make_user().id))
        popular = await answer_repo.save(make_answer(question.id, make_user().id))
        accepted = await answer_repo.save(
            make_answer(question.id, make_user().id, is_accepted=True)
        )
        await _vote(unit_env, popular.id, ups=5)
        await _vote(unit_env, accepted.id, ups=1)

        # Act
        ranked = await listing.rank_answers(
            await answer_repo.find_by_question(question.id)
        )

        # Assert
        assert [r.answer.id for r in ranked] == [accepted.id, popular.id]
        assert ranked[0].vote_count.total == 1
        assert ranked[1].vote_count.total == 5

    @pytest.mark.asyncio
    async def test_orders_by_score_then_newest(self, unit_env):
        """Higher score first; equal scores put the newer answer first."""
        # Arrange
        listing = await unit_env.get(ListingService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        question = await question_repo.save(make_question(make_user().id))
        older = await answer_repo.save(
            make_answer(question.id, make_user().id, created_at=at(1))
        )
        newer = await answer_repo.save(
            make_answer(question.id, make_user().id, created_at=at(2))
        )
        best = await answer_repo.save(
            make_answer(question.id, make_user().id, created_at=at(0))
        )
        await _vote(unit_env, older.id, ups=2, downs=1)
        await _vote(unit_env, newer.id, ups=1)
        await _vote(unit_env, best.id, ups=3)

        # Act
        ranked = await listing.rank_answers(
            await answer_repo.find_by_question(question.id)
        )

        # Assert
        assert [r.answer.id for r in ranked] == [best.id, newer.id, older.id]

    @pytest.mark.asyncio
    async def test_attaches_comment_counts_and_user_vote(self, unit_env):
        """Ranked answers carry comment counts and the caller's vote."""
        # Arrange
        listing = await unit_env.get(ListingService)
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        comment_repo = await unit_env.get(CommentRepository)

        viewer = make_user("viewer")
        question = await question_repo.save(make_question(make_user().id))
        answer = await answer_repo.save(make_answer(question.id, make_user().id))
        await comment_repo.save(make_comment(viewer.id, answer_id=answer.id))
        await comment_repo.save(make_comment(viewer.id, answer_id=answer.id))
        await vote_service.cast_vote(viewer.id, answer.id, "down")

        # Act
        ranked = await listing.rank_answers([answer], user_id=viewer.id)
        anonymous = await listing.rank_answers([answer])

        # Assert
        assert ranked[0].comment_count == 2
        assert ranked[0].user_vote == VoteType.DOWN
        assert anonymous[0].user_vote is None

    @pytest.mark.asyncio
    async def test_empty_input(self, unit_env):
        """No answers rank to an empty list."""
        listing = await unit_env.get(ListingService)

        assert await listing.rank_answers([]) == []


class TestListQuestions:
    """Tests for question listings."""

    @pytest.mark.asyncio
    async def test_answer_state_filters(self, unit_env):
        """unanswered and accepted filters select by answer state."""
        # Arrange
        listing = await unit_env.get(ListingService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        author = make_user().id
        lonely = await question_repo.save(make_question(author, created_at=at(0)))
        answered = await question_repo.save(make_question(author, created_at=at(1)))
        solved = await question_repo.save(make_question(author, created_at=at(2)))
        await answer_repo.save(make_answer(answered.id, make_user().id))
        await answer_repo.save(
            make_answer(solved.id, make_user().id, is_accepted=True)
        )

        # Act
        unanswered = await listing.list_questions(
            QuestionQuery(filter=QuestionFilter.UNANSWERED)
        )
        accepted = await listing.list_questions(
            QuestionQuery(filter=QuestionFilter.ACCEPTED)
        )
        with_answers = await listing.list_questions(
            QuestionQuery(filter=QuestionFilter.ANSWERED)
        )

        # Assert
        assert [s.question.id for s in unanswered.questions] == [lonely.id]
        assert [s.question.id for s in accepted.questions] == [solved.id]
        assert all(s.has_accepted_answer for s in accepted.questions)
        assert [s.question.id for s in with_answers.questions] == [
            solved.id,
            answered.id,
        ]

    @pytest.mark.asyncio
    async def test_summaries_carry_aggregates(self, unit_env):
        """Each summary has answer count, vote total and accepted flag."""
        # Arrange
        listing = await unit_env.get(ListingService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        question = await question_repo.save(make_question(make_user().id))
        first = await answer_repo.save(make_answer(question.id, make_user().id))
        second = await answer_repo.save(
            make_answer(question.id, make_user().id, is_accepted=True)
        )
        await _vote(unit_env, first.id, ups=3)
        await _vote(unit_env, second.id, downs=1)

        # Act
        page = await listing.list_questions(QuestionQuery())

        # Assert
        summary = page.questions[0]
        assert summary.answer_count == 2
        assert summary.total_votes == 2
        assert summary.has_accepted_answer is True

    @pytest.mark.asyncio
    async def test_pagination(self, unit_env):
        """Pages are cut after filtering and report their metadata."""
        # Arrange
        listing = await unit_env.get(ListingService)
        question_repo = await unit_env.get(QuestionRepository)
        author = make_user().id
        questions = [
            await question_repo.save(make_question(author, created_at=at(i)))
            for i in range(5)
        ]

        # Act
        page = await listing.list_questions(QuestionQuery(), page=2, limit=2)

        # Assert
        assert [s.question.id for s in page.questions] == [
            questions[2].id,
            questions[1].id,
        ]
        assert page.pagination.total_count == 5
        assert page.pagination.total_pages == 3
        assert page.pagination.has_next is True
        assert page.pagination.has_prev is True

    @pytest.mark.asyncio
    async def test_page_past_the_end_is_empty(self, unit_env):
        """A page beyond the last one has no questions."""
        # Arrange
        listing = await unit_env.get(ListingService)
        question_repo = await unit_env.get(QuestionRepository)
        await question_repo.save(make_question(make_user().id))

        # Act
        page = await listing.list_questions(QuestionQuery(), page=3, limit=10)

        # Assert
        assert page.questions == []
        assert page.pagination.total_count == 1
        assert page.pagination.has_next is False

    @pytest.mark.asyncio
    async def test_sort_by_votes(self, unit_env):
        """Vote sort ranks by summed answer scores, unanswered as zero."""
        # Arrange
        listing = await unit_env.get(ListingService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        author = make_user().id

        disliked = await question_repo.save(make_question(author, created_at=at(0)))
        unanswered = await question_repo.save(make_question(author, created_at=at(1)))
        liked = await question_repo.save(make_question(author, created_at=at(2)))
        net_zero = await question_repo.save(make_question(author, created_at=at(3)))

        bad = await answer_repo.save(make_answer(disliked.id, make_user().id))
        good = await answer_repo.save(make_answer(liked.id, make_user().id))
        even = await answer_repo.save(make_answer(net_zero.id, make_user().id))
        await _vote(unit_env, bad.id, downs=2)
        await _vote(unit_env, good.id, ups=4)
        await _vote(unit_env, even.id, ups=1, downs=1)

        # Act
        desc = await listing.list_questions(
            QuestionQuery(), sort=QuestionSortField.VOTES, order=SortOrder.DESC
        )
        asc = await listing.list_questions(
            QuestionQuery(), sort=QuestionSortField.VOTES, order=SortOrder.ASC
        )

        # Assert
        assert [s.question.id for s in desc.questions] == [
            liked.id,
            net_zero.id,
            unanswered.id,
            disliked.id,
        ]
        assert [s.total_votes for s in desc.questions] == [4, 0, 0, -2]
        assert asc.questions[0].question.id == disliked.id
        assert asc.questions[-1].question.id == liked.id

    @pytest.mark.asyncio
    async def test_sort_by_votes_paginates_after_ranking(self, unit_env):
        """The vote-sorted page is cut from the fully ranked set."""
        # Arrange
        listing = await unit_env.get(ListingService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        author = make_user().id

        oldest = await question_repo.save(make_question(author, created_at=at(0)))
        await question_repo.save(make_question(author, created_at=at(1)))
        await question_repo.save(make_question(author, created_at=at(2)))
        answer = await answer_repo.save(make_answer(oldest.id, make_user().id))
        await _vote(unit_env, answer.id, ups=1)

        # Act
        page = await listing.list_questions(
            QuestionQuery(), sort=QuestionSortField.VOTES, page=1, limit=1
        )

        # Assert
        assert [s.question.id for s in page.questions] == [oldest.id]
        assert page.pagination.total_count == 3

    @pytest.mark.asyncio
    async def test_sort_by_title_ascending(self, unit_env):
        """Title sort is alphabetical."""
        # Arrange
        listing = await unit_env.get(ListingService)
        question_repo = await unit_env.get(QuestionRepository)
        author = make_user().id
        for title in ("Zebra striping in tables", "Apples and oranges compared"):
            await question_repo.save(make_question(author, title=title))

        # Act
        page = await listing.list_questions(
            QuestionQuery(), sort=QuestionSortField.TITLE, order=SortOrder.ASC
        )

        # Assert
        assert [s.question.title for s in page.questions] == [
            "Apples and oranges compared",
            "Zebra striping in tables",
        ]

    @pytest.mark.asyncio
    async def test_search_and_tags(self, unit_env):
        """Search matches title or description; tags match any."""
        # Arrange
        listing = await unit_env.get(ListingService)
        question_repo = await unit_env.get(QuestionRepository)
        author = make_user().id

        asyncio_q = await question_repo.save(
            make_question(
                author,
                title="Cancelling tasks with asyncio",
                tags=["python", "asyncio"],
            )
        )
        rust_q = await question_repo.save(
            make_question(
                author,
                title="Borrow checker complaints",
                description="The compiler rejects my ASYNCIO-like executor code.",
                tags=["rust"],
            )
        )

        # Act
        searched = await listing.list_questions(QuestionQuery(search="asyncio"))
        tagged = await listing.list_questions(QuestionQuery(tags=["rust", "go"]))
        both = await listing.list_questions(
            QuestionQuery(search="asyncio", tags=["python"])
        )

        # Assert
        assert {s.question.id for s in searched.questions} == {
            asyncio_q.id,
            rust_q.id,
        }
        assert [s.question.id for s in tagged.questions] == [rust_q.id]
        assert [s.question.id for s in both.questions] == [asyncio_q.id]
