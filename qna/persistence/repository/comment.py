"""PostgreSQL implementation of Comment repository."""

from typing import Dict, List, Sequence

import logfire
from sqlalchemy import asc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Comment
from qna.domain.repository import CommentRepository
from qna.domain.value import AnswerId, QuestionId
from qna.persistence.mappers import comment_to_dict, row_to_comment
from qna.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_question(self, question_id: QuestionId) -> List[Comment]:
        """Find comments on a question, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.question_id == question_id)
            .order_by(asc(comments_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_answers(
        self, answer_ids: Sequence[AnswerId]
    ) -> Dict[AnswerId, List[Comment]]:
        """Load comments for many answers, grouped by answer, oldest first."""
        if not answer_ids:
            return {}

        with logfire.span("comment_repository.find_by_answers", count=len(answer_ids)):
            stmt = (
                select(comments_table)
                .where(comments_table.c.answer_id.in_(answer_ids))
                .order_by(asc(comments_table.c.created_at))
            )
            result = await self.session.execute(stmt)

            grouped: Dict[AnswerId, List[Comment]] = {}
            for row in result.fetchall():
                comment = row_to_comment(row._asdict())
                grouped.setdefault(AnswerId(comment.answer_id), []).append(comment)
            return grouped

    async def count_by_answers(
        self, answer_ids: Sequence[AnswerId]
    ) -> Dict[AnswerId, int]:
        """Count comments per answer (batch query)."""
        if not answer_ids:
            return {}

        stmt = (
            select(comments_table.c.answer_id, func.count().label("n"))
            .where(comments_table.c.answer_id.in_(answer_ids))
            .group_by(comments_table.c.answer_id)
        )
        result = await self.session.execute(stmt)
        return {AnswerId(row.answer_id): row.n for row in result.fetchall()}

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> Dict[QuestionId, int]:
        """Count question-level comments per question (batch query)."""
        if not question_ids:
            return {}

        stmt = (
            select(comments_table.c.question_id, func.count().label("n"))
            .where(comments_table.c.question_id.in_(question_ids))
            .group_by(comments_table.c.question_id)
        )
        result = await self.session.execute(stmt)
        return {QuestionId(row.question_id): row.n for row in result.fetchall()}

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment
