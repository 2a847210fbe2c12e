"""In-memory answer repository for testing."""

from typing import Dict, List, Optional, Sequence, Set

from sqlalchemy.exc import IntegrityError

from qna.domain.model import Answer
from qna.domain.repository import AnswerRepository
from qna.domain.value import AnswerId, QuestionAcceptanceState, QuestionId, UserId

from .database import InMemoryDatabase


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        return self.db.answers.get(answer_id)

    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        return [a for a in self.db.answers.values() if a.question_id == question_id]

    async def find_by_question_and_author(
        self, question_id: QuestionId, author_id: UserId
    ) -> Optional[Answer]:
        for answer in self.db.answers.values():
            if answer.question_id == question_id and answer.author_id == author_id:
                return answer
        return None

    async def save(self, answer: Answer) -> Answer:
        """Save an answer.

        Raises:
            IntegrityError: If the author already answered the question
        """
        if await self.find_by_question_and_author(answer.question_id, answer.author_id):
            raise IntegrityError("Duplicate answer", None, Exception())

        self.db.answers[answer.id] = answer
        return answer

    async def update_content(
        self, answer_id: AnswerId, content: str
    ) -> Optional[Answer]:
        answer = self.db.answers.get(answer_id)
        if answer is None:
            return None

        updated = answer.revise(content=content)
        self.db.answers[answer_id] = updated
        return updated

    async def delete(self, answer_id: AnswerId) -> bool:
        return self.db.delete_answer(answer_id)

    async def get_acceptance_state(
        self, question_id: QuestionId, for_update: bool = False
    ) -> QuestionAcceptanceState:
        accepted = next(
            (
                a.id
                for a in self.db.answers.values()
                if a.question_id == question_id and a.is_accepted
            ),
            None,
        )
        return QuestionAcceptanceState(
            question_id=question_id, accepted_answer_id=accepted
        )

    async def apply_acceptance_state(self, state: QuestionAcceptanceState) -> None:
        for answer in list(self.db.answers.values()):
            if answer.question_id != state.question_id:
                continue
            should_accept = answer.id == state.accepted_answer_id
            if answer.is_accepted != should_accept:
                self.db.answers[answer.id] = answer.model_copy(
                    update={"is_accepted": should_accept}
                )

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> Dict[QuestionId, int]:
        wanted = set(question_ids)
        counts: Dict[QuestionId, int] = {}
        for answer in self.db.answers.values():
            if answer.question_id in wanted:
                counts[answer.question_id] = counts.get(answer.question_id, 0) + 1
        return counts

    async def find_questions_with_accepted(
        self, question_ids: Sequence[QuestionId]
    ) -> Set[QuestionId]:
        wanted = set(question_ids)
        return {
            a.question_id
            for a in self.db.answers.values()
            if a.is_accepted and a.question_id in wanted
        }
