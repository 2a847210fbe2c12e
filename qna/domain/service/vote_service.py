"""Vote domain service."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from qna.domain.error import ConflictError, NotFoundError
from qna.domain.model.vote import Vote
from qna.domain.repository import AnswerRepository, VoteRepository
from qna.domain.value import (
    AnswerId,
    QuestionId,
    UserId,
    VoteAction,
    VoteCount,
    VoteId,
    VoteType,
)

from .base import Service


@dataclass
class CastVoteResult:
    """Outcome of a vote cast."""

    action: VoteAction
    user_vote: Optional[VoteType]
    vote_count: VoteCount

    @property
    def message(self) -> str:
        return f"Vote {self.action.value}"


class VoteService(Service):
    """Domain service for vote operations.

    A user holds at most one vote per answer. Casting the same direction
    twice removes the vote; casting the opposite direction flips it.
    Vote counts are always tallied from vote rows.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            answer_repository: Answer repository
        """
        self.vote_repository = vote_repository
        self.answer_repository = answer_repository

    async def cast_vote(
        self, user_id: UserId, answer_id: AnswerId, vote_type: str
    ) -> CastVoteResult:
        """Cast, flip or toggle off a vote on an answer.

        Args:
            user_id: Voting user
            answer_id: Answer being voted on
            vote_type: "up" or "down" (case-insensitive)

        Returns:
            What happened to the caller's vote, with the fresh tally

        Raises:
            ValidationError: If vote_type is not "up" or "down"
            NotFoundError: If the answer doesn't exist
            ConflictError: If a concurrent insert still wins after a retry
        """
        parsed = VoteType.parse(vote_type)

        with logfire.span(
            "vote_service.cast_vote",
            answer_id=str(answer_id),
            user_id=str(user_id),
            vote_type=parsed.value,
        ):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                logfire.warn("Vote on non-existent answer", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))

            try:
                action = await self._apply(user_id, answer_id, parsed)
            except IntegrityError:
                # Another request inserted this user's vote first
                logfire.warn(
                    "Concurrent vote insert, retrying",
                    user_id=str(user_id),
                    answer_id=str(answer_id),
                )
                try:
                    action = await self._apply(user_id, answer_id, parsed)
                except IntegrityError:
                    logfire.error(
                        "Vote insert conflict after retry",
                        user_id=str(user_id),
                        answer_id=str(answer_id),
                    )
                    raise ConflictError("Vote could not be recorded")

            vote_count = await self.vote_repository.count_by_answer(answer_id)
            logfire.info(
                "Vote cast",
                answer_id=str(answer_id),
                action=action.value,
                total=vote_count.total,
            )

            return CastVoteResult(
                action=action,
                user_vote=None if action == VoteAction.REMOVED else parsed,
                vote_count=vote_count,
            )

    async def _apply(
        self, user_id: UserId, answer_id: AnswerId, vote_type: VoteType
    ) -> VoteAction:
        existing = await self.vote_repository.find_by_user_and_answer(
            user_id, answer_id, for_update=True
        )

        if existing is None:
            vote = Vote(
                id=VoteId(uuid4()),
                type=vote_type,
                user_id=user_id,
                answer_id=answer_id,
                created_at=datetime.now(),
            )
            await self.vote_repository.save(vote)
            return VoteAction.REGISTERED

        if existing.type == vote_type:
            await self.vote_repository.delete(existing.id)
            return VoteAction.REMOVED

        await self.vote_repository.update_type(existing.id, vote_type)
        return VoteAction.UPDATED

    async def get_vote_count(self, answer_id: AnswerId) -> VoteCount:
        """Tally votes on one answer.

        Args:
            answer_id: Answer ID

        Returns:
            Vote count ({0, 0, 0} when nobody voted)
        """
        with logfire.span("vote_service.get_vote_count", answer_id=str(answer_id)):
            return await self.vote_repository.count_by_answer(answer_id)

    async def get_vote_counts(
        self, answer_ids: Sequence[AnswerId]
    ) -> dict[AnswerId, VoteCount]:
        """Tally votes on many answers at once.

        Args:
            answer_ids: Answer IDs

        Returns:
            Vote count for every requested answer
        """
        if not answer_ids:
            return {}

        # Single grouped query (avoid N+1)
        counts = await self.vote_repository.count_by_answers(answer_ids)
        return {aid: counts.get(aid, VoteCount()) for aid in answer_ids}

    async def get_user_votes(
        self, user_id: UserId, answer_ids: Sequence[AnswerId]
    ) -> dict[AnswerId, VoteType]:
        """Which direction a user voted on each of the given answers.

        Args:
            user_id: User ID
            answer_ids: Answer IDs to check

        Returns:
            Mapping for the answers the user voted on
        """
        if not answer_ids:
            return {}

        votes = await self.vote_repository.find_by_user_and_answers(
            user_id, answer_ids
        )
        return {vote.answer_id: vote.type for vote in votes}

    async def get_question_totals(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, int]:
        """Sum of answer net scores per question.

        Args:
            question_ids: Question IDs

        Returns:
            Mapping of question ID to summed score (missing means 0)
        """
        if not question_ids:
            return {}

        return await self.vote_repository.total_by_questions(question_ids)
