"""PostgreSQL implementation of Question repository."""

from typing import List, Optional

import logfire
from sqlalchemy import String, asc, case, desc, exists, func, select
from sqlalchemy.dialects.postgresql import array
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from qna.domain.model import Question
from qna.domain.repository.question import (
    QuestionFilter,
    QuestionQuery,
    QuestionRepository,
    QuestionSortField,
    SortOrder,
)
from qna.domain.value import QuestionId, VoteType
from qna.persistence.mappers import question_to_dict, row_to_question
from qna.persistence.tables import answers_table, questions_table, votes_table


def _apply_query(stmt: Select, query: QuestionQuery) -> Select:
    """Add search, tag and answer-state filters to a statement."""
    if query.search:
        stmt = stmt.where(
            questions_table.c.title.icontains(query.search, autoescape=True)
            | questions_table.c.description.icontains(query.search, autoescape=True)
        )

    if query.tags:
        # Contains any of the requested tags
        stmt = stmt.where(
            questions_table.c.tags.overlap(array(query.tags, type_=String(20)))
        )

    has_answer = exists().where(answers_table.c.question_id == questions_table.c.id)
    if query.filter == QuestionFilter.ANSWERED:
        stmt = stmt.where(has_answer)
    elif query.filter == QuestionFilter.UNANSWERED:
        stmt = stmt.where(~has_answer)
    elif query.filter == QuestionFilter.ACCEPTED:
        stmt = stmt.where(
            exists().where(
                answers_table.c.question_id == questions_table.c.id,
                answers_table.c.is_accepted.is_(True),
            )
        )

    return stmt


def _vote_total():
    """Net score summed over a question's answers, correlated to the outer row.

    Questions without answers or votes score 0.
    """
    score = case(
        (votes_table.c.type == VoteType.UP.value, 1),
        (votes_table.c.type == VoteType.DOWN.value, -1),
        else_=0,
    )
    total = (
        select(func.sum(score))
        .select_from(
            votes_table.join(
                answers_table, votes_table.c.answer_id == answers_table.c.id
            )
        )
        .where(answers_table.c.question_id == questions_table.c.id)
        .scalar_subquery()
    )
    return func.coalesce(total, 0)


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        with logfire.span(
            "question_repository.find_by_id", question_id=str(question_id)
        ):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_question(row._asdict()) if row else None

    async def find_all(
        self,
        query: QuestionQuery,
        sort: QuestionSortField = QuestionSortField.CREATED_AT,
        order: SortOrder = SortOrder.DESC,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering, ordering and pagination."""
        with logfire.span(
            "question_repository.find_all",
            sort=sort.value,
            order=order.value,
            filter=query.filter.value,
            tags=query.tags,
            limit=limit,
            offset=offset,
        ):
            stmt = _apply_query(select(questions_table), query)

            if sort == QuestionSortField.ANSWERS:
                key = (
                    select(func.count(answers_table.c.id))
                    .where(answers_table.c.question_id == questions_table.c.id)
                    .scalar_subquery()
                )
            elif sort == QuestionSortField.VOTES:
                key = _vote_total()
            elif sort == QuestionSortField.UPDATED_AT:
                key = questions_table.c.updated_at
            elif sort == QuestionSortField.TITLE:
                key = questions_table.c.title
            else:
                key = questions_table.c.created_at

            direction = desc if order == SortOrder.DESC else asc
            stmt = stmt.order_by(direction(key), desc(questions_table.c.created_at))

            if limit is not None:
                stmt = stmt.limit(limit)
            if offset:
                stmt = stmt.offset(offset)

            result = await self.session.execute(stmt)
            questions = [row_to_question(row._asdict()) for row in result.fetchall()]
            logfire.info("Found questions", count=len(questions))
            return questions

    async def count(self, query: QuestionQuery) -> int:
        """Count questions matching the query."""
        with logfire.span(
            "question_repository.count", filter=query.filter.value, tags=query.tags
        ):
            stmt = _apply_query(
                select(func.count()).select_from(questions_table), query
            )
            result = await self.session.execute(stmt)
            count = result.scalar() or 0
            logfire.info("Question count", count=count)
            return count

    async def save(self, question: Question) -> Question:
        """Save a question (create or update)."""
        with logfire.span(
            "question_repository.save", question_id=str(question.id), title=question.title
        ):
            existing = await self.find_by_id(question.id)

            question_dict = question_to_dict(question)

            if existing:
                logfire.info("Updating existing question", question_id=str(question.id))
                stmt = (
                    questions_table.update()
                    .where(questions_table.c.id == question.id)
                    .values(**question_dict)
                )
            else:
                logfire.info(
                    "Inserting new question",
                    question_id=str(question.id),
                    tags=question.tags,
                )
                stmt = questions_table.insert().values(**question_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return question

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question (hard delete, cascades in the database)."""
        stmt = questions_table.delete().where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def popular_tags(self, limit: int = 20) -> List[tuple[str, int]]:
        """Most used tags by question count."""
        with logfire.span("question_repository.popular_tags", limit=limit):
            tag = func.unnest(questions_table.c.tags).label("tag")
            inner = select(questions_table.c.id, tag).subquery()
            stmt = (
                select(inner.c.tag, func.count(func.distinct(inner.c.id)).label("n"))
                .group_by(inner.c.tag)
                .order_by(desc("n"), asc(inner.c.tag))
                .limit(limit)
            )
            result = await self.session.execute(stmt)
            return [(row.tag, row.n) for row in result.fetchall()]
