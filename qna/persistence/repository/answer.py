"""PostgreSQL implementation of Answer repository."""

from datetime import datetime
from typing import Dict, List, Optional, Sequence, Set

import logfire
from sqlalchemy import and_, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Answer
from qna.domain.repository import AnswerRepository
from qna.domain.value import AnswerId, QuestionAcceptanceState, QuestionId, UserId
from qna.persistence.mappers import answer_to_dict, row_to_answer
from qna.persistence.tables import answers_table, questions_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question."""
        stmt = select(answers_table).where(answers_table.c.question_id == question_id)
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def find_by_question_and_author(
        self, question_id: QuestionId, author_id: UserId
    ) -> Optional[Answer]:
        """Find an author's answer to a question."""
        stmt = select(answers_table).where(
            and_(
                answers_table.c.question_id == question_id,
                answers_table.c.author_id == author_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def save(self, answer: Answer) -> Answer:
        """Insert an answer inside a savepoint."""
        stmt = answers_table.insert().values(**answer_to_dict(answer))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return answer

    async def update_content(
        self, answer_id: AnswerId, content: str
    ) -> Optional[Answer]:
        """Replace content and bump updated_at."""
        with logfire.span("answer_repository.update_content", answer_id=str(answer_id)):
            stmt = (
                update(answers_table)
                .where(answers_table.c.id == answer_id)
                .values(content=content, updated_at=datetime.now())
                .returning(answers_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()

            if row is None:
                logfire.warn("Answer not found for update", answer_id=str(answer_id))
                return None
            return row_to_answer(row._asdict())

    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer (cascades in the database)."""
        stmt = answers_table.delete().where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def get_acceptance_state(
        self, question_id: QuestionId, for_update: bool = False
    ) -> QuestionAcceptanceState:
        """Read the accepted answer of a question, optionally locking it."""
        with logfire.span(
            "answer_repository.get_acceptance_state",
            question_id=str(question_id),
            for_update=for_update,
        ):
            if for_update:
                lock = (
                    select(questions_table.c.id)
                    .where(questions_table.c.id == question_id)
                    .with_for_update()
                )
                await self.session.execute(lock)

            stmt = select(answers_table.c.id).where(
                and_(
                    answers_table.c.question_id == question_id,
                    answers_table.c.is_accepted.is_(True),
                )
            )
            result = await self.session.execute(stmt)
            accepted = result.scalar()
            return QuestionAcceptanceState(
                question_id=question_id,
                accepted_answer_id=AnswerId(accepted) if accepted else None,
            )

    async def apply_acceptance_state(self, state: QuestionAcceptanceState) -> None:
        """Clear other accepted answers, then set the target, in one savepoint."""
        with logfire.span(
            "answer_repository.apply_acceptance_state",
            question_id=str(state.question_id),
            accepted_answer_id=str(state.accepted_answer_id),
        ):
            async with self.session.begin_nested():
                # Clear first so the partial unique index never sees two
                clear = (
                    update(answers_table)
                    .where(
                        and_(
                            answers_table.c.question_id == state.question_id,
                            answers_table.c.is_accepted.is_(True),
                        )
                    )
                    .values(is_accepted=False)
                )
                if state.accepted_answer_id is not None:
                    clear = clear.where(answers_table.c.id != state.accepted_answer_id)
                await self.session.execute(clear)

                if state.accepted_answer_id is not None:
                    accept = (
                        update(answers_table)
                        .where(
                            and_(
                                answers_table.c.id == state.accepted_answer_id,
                                answers_table.c.question_id == state.question_id,
                            )
                        )
                        .values(is_accepted=True)
                    )
                    await self.session.execute(accept)

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> Dict[QuestionId, int]:
        """Count answers per question (batch query)."""
        if not question_ids:
            return {}

        stmt = (
            select(answers_table.c.question_id, func.count().label("n"))
            .where(answers_table.c.question_id.in_(question_ids))
            .group_by(answers_table.c.question_id)
        )
        result = await self.session.execute(stmt)
        return {QuestionId(row.question_id): row.n for row in result.fetchall()}

    async def find_questions_with_accepted(
        self, question_ids: Sequence[QuestionId]
    ) -> Set[QuestionId]:
        """Which questions have an accepted answer (batch query)."""
        if not question_ids:
            return set()

        stmt = (
            select(answers_table.c.question_id)
            .where(
                and_(
                    answers_table.c.question_id.in_(question_ids),
                    answers_table.c.is_accepted.is_(True),
                )
            )
            .distinct()
        )
        result = await self.session.execute(stmt)
        return {QuestionId(row.question_id) for row in result.fetchall()}
