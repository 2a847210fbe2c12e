"""PostgreSQL implementation of Vote repository."""

from typing import Dict, List, Optional, Sequence

import logfire
from sqlalchemy import and_, case, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Vote
from qna.domain.repository import VoteRepository
from qna.domain.value import (
    AnswerId,
    QuestionId,
    UserId,
    VoteCount,
    VoteId,
    VoteType,
)
from qna.persistence.mappers import row_to_vote, vote_to_dict
from qna.persistence.tables import answers_table, votes_table

_up = func.count(case((votes_table.c.type == VoteType.UP.value, 1)))
_down = func.count(case((votes_table.c.type == VoteType.DOWN.value, 1)))


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_answer(
        self,
        user_id: UserId,
        answer_id: AnswerId,
        for_update: bool = False,
    ) -> Optional[Vote]:
        """Find a user's vote on an answer."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.answer_id == answer_id,
            )
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user_and_answers(
        self, user_id: UserId, answer_ids: Sequence[AnswerId]
    ) -> List[Vote]:
        """Find a user's votes on multiple answers (batch query)."""
        if not answer_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.answer_id.in_(answer_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote inside a savepoint.

        A unique violation rolls back only the savepoint, so the caller
        can re-read and retry within the same transaction.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return vote

    async def update_type(self, vote_id: VoteId, vote_type: VoteType) -> None:
        """Switch a vote's direction in place."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote_id)
            .values(type=vote_type.value)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_answer(self, answer_id: AnswerId) -> VoteCount:
        """Tally up and down votes on one answer."""
        stmt = select(_up.label("up"), _down.label("down")).where(
            votes_table.c.answer_id == answer_id
        )
        result = await self.session.execute(stmt)
        row = result.one()
        return VoteCount(up_votes=row.up or 0, down_votes=row.down or 0)

    async def count_by_answers(
        self, answer_ids: Sequence[AnswerId]
    ) -> Dict[AnswerId, VoteCount]:
        """Tally votes on many answers with a single grouped query."""
        if not answer_ids:
            return {}

        with logfire.span("vote_repository.count_by_answers", count=len(answer_ids)):
            stmt = (
                select(votes_table.c.answer_id, _up.label("up"), _down.label("down"))
                .where(votes_table.c.answer_id.in_(answer_ids))
                .group_by(votes_table.c.answer_id)
            )
            result = await self.session.execute(stmt)
            return {
                AnswerId(row.answer_id): VoteCount(up_votes=row.up, down_votes=row.down)
                for row in result.fetchall()
            }

    async def total_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> Dict[QuestionId, int]:
        """Sum net vote scores per question across its answers."""
        if not question_ids:
            return {}

        with logfire.span(
            "vote_repository.total_by_questions", count=len(question_ids)
        ):
            stmt = (
                select(answers_table.c.question_id, (_up - _down).label("total"))
                .select_from(
                    votes_table.join(
                        answers_table, votes_table.c.answer_id == answers_table.c.id
                    )
                )
                .where(answers_table.c.question_id.in_(question_ids))
                .group_by(answers_table.c.question_id)
            )
            result = await self.session.execute(stmt)
            return {QuestionId(row.question_id): row.total for row in result.fetchall()}
