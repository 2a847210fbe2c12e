"""Ranking and listing of questions and answers."""

from dataclasses import dataclass
from typing import Optional, Sequence

import logfire

from qna.domain.model import Answer, Question
from qna.domain.repository import (
    AnswerRepository,
    QuestionQuery,
    QuestionRepository,
    QuestionSortField,
    SortOrder,
)
from qna.domain.repository.comment import CommentRepository
from qna.domain.value import Pagination, UserId, VoteCount, VoteType

from .base import Service
from .vote_service import VoteService


@dataclass
class RankedAnswer:
    """Answer with the aggregates shown next to it."""

    answer: Answer
    vote_count: VoteCount
    comment_count: int = 0
    user_vote: Optional[VoteType] = None


@dataclass
class QuestionSummary:
    """Question with its listing aggregates."""

    question: Question
    answer_count: int
    total_votes: int
    has_accepted_answer: bool
    comment_count: int = 0


@dataclass
class QuestionPage:
    """One page of a question listing."""

    questions: list[QuestionSummary]
    pagination: Pagination


class ListingService(Service):
    """Composes vote aggregates with sorting, filtering and pagination.

    Aggregates are fetched in batch before ordering so answers rank on
    live vote counts.
    """

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        comment_repository: CommentRepository,
        vote_service: VoteService,
    ) -> None:
        """Initialize listing service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
            comment_repository: Comment repository
            vote_service: Vote domain service (aggregates)
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.comment_repository = comment_repository
        self.vote_service = vote_service

    async def rank_answers(
        self, answers: Sequence[Answer], user_id: Optional[UserId] = None
    ) -> list[RankedAnswer]:
        """Attach aggregates and order answers for display.

        Order: accepted first, then net score, then newest.

        Args:
            answers: Answers of one question
            user_id: Caller, to include their own vote on each answer

        Returns:
            Ranked answers
        """
        if not answers:
            return []

        with logfire.span("listing_service.rank_answers", count=len(answers)):
            answer_ids = [a.id for a in answers]
            vote_counts = await self.vote_service.get_vote_counts(answer_ids)
            comment_counts = await self.comment_repository.count_by_answers(answer_ids)
            user_votes = (
                await self.vote_service.get_user_votes(user_id, answer_ids)
                if user_id
                else {}
            )

            ranked = [
                RankedAnswer(
                    answer=a,
                    vote_count=vote_counts[a.id],
                    comment_count=comment_counts.get(a.id, 0),
                    user_vote=user_votes.get(a.id),
                )
                for a in answers
            ]
            ranked.sort(
                key=lambda r: (
                    r.answer.is_accepted,
                    r.vote_count.total,
                    r.answer.created_at,
                ),
                reverse=True,
            )
            return ranked

    async def list_questions(
        self,
        query: QuestionQuery,
        sort: QuestionSortField = QuestionSortField.CREATED_AT,
        order: SortOrder = SortOrder.DESC,
        page: int = 1,
        limit: int = 10,
    ) -> QuestionPage:
        """Filter, sort and paginate questions with their aggregates.

        Args:
            query: Search, tag and answer-state filters
            sort: Sort key
            order: Sort direction
            page: 1-based page number
            limit: Page size

        Returns:
            The requested page with pagination metadata
        """
        with logfire.span(
            "listing_service.list_questions",
            sort=sort.value,
            order=order.value,
            filter=query.filter.value,
            page=page,
            limit=limit,
        ):
            total_count = await self.question_repository.count(query)
            pagination = Pagination(page=page, limit=limit, total_count=total_count)

            questions = await self.question_repository.find_all(
                query,
                sort=sort,
                order=order,
                limit=pagination.limit,
                offset=pagination.offset,
            )

            # Aggregates for the returned page only
            question_ids = [q.id for q in questions]
            totals = await self.vote_service.get_question_totals(question_ids)
            comment_counts = await self.comment_repository.count_by_questions(
                question_ids
            )
            answer_counts = (
                await self.answer_repository.count_by_questions(question_ids)
                if question_ids
                else {}
            )
            accepted = (
                await self.answer_repository.find_questions_with_accepted(question_ids)
                if question_ids
                else set()
            )

            summaries = [
                QuestionSummary(
                    question=q,
                    answer_count=answer_counts.get(q.id, 0),
                    total_votes=totals.get(q.id, 0),
                    has_accepted_answer=q.id in accepted,
                    comment_count=comment_counts.get(q.id, 0),
                )
                for q in questions
            ]

            logfire.info(
                "Questions listed", count=len(summaries), total=total_count
            )
            return QuestionPage(questions=summaries, pagination=pagination)

