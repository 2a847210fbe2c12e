"""In-memory question repository for testing."""

from collections import Counter
from typing import List, Optional

from qna.domain.model import Question
from qna.domain.repository.question import (
    QuestionFilter,
    QuestionQuery,
    QuestionRepository,
    QuestionSortField,
    SortOrder,
)
from qna.domain.value import QuestionId, VoteType

from .database import InMemoryDatabase


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    def _matches(self, question: Question, query: QuestionQuery) -> bool:
        if query.search:
            needle = query.search.lower()
            if (
                needle not in question.title.lower()
                and needle not in question.description.lower()
            ):
                return False

        if query.tags and not set(query.tags) & set(question.tags):
            return False

        answers = [a for a in self.db.answers.values() if a.question_id == question.id]
        if query.filter == QuestionFilter.ANSWERED:
            return bool(answers)
        if query.filter == QuestionFilter.UNANSWERED:
            return not answers
        if query.filter == QuestionFilter.ACCEPTED:
            return any(a.is_accepted for a in answers)
        return True

    def _answer_count(self, question_id: QuestionId) -> int:
        return sum(1 for a in self.db.answers.values() if a.question_id == question_id)

    def _vote_total(self, question_id: QuestionId) -> int:
        answer_ids = {
            a.id for a in self.db.answers.values() if a.question_id == question_id
        }
        return sum(
            1 if v.type == VoteType.UP else -1
            for v in self.db.votes.values()
            if v.answer_id in answer_ids
        )

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        return self.db.questions.get(question_id)

    async def find_all(
        self,
        query: QuestionQuery,
        sort: QuestionSortField = QuestionSortField.CREATED_AT,
        order: SortOrder = SortOrder.DESC,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Question]:
        keys = {
            QuestionSortField.CREATED_AT: lambda q: q.created_at,
            QuestionSortField.UPDATED_AT: lambda q: q.updated_at,
            QuestionSortField.TITLE: lambda q: q.title,
            QuestionSortField.ANSWERS: lambda q: self._answer_count(q.id),
            QuestionSortField.VOTES: lambda q: self._vote_total(q.id),
        }

        matched = [q for q in self.db.questions.values() if self._matches(q, query)]
        # Tie-break first, then the stable primary sort
        matched.sort(key=lambda q: q.created_at, reverse=True)
        matched.sort(key=keys[sort], reverse=order == SortOrder.DESC)

        end = None if limit is None else offset + limit
        return matched[offset:end]

    async def count(self, query: QuestionQuery) -> int:
        return sum(1 for q in self.db.questions.values() if self._matches(q, query))

    async def save(self, question: Question) -> Question:
        self.db.questions[question.id] = question
        return question

    async def delete(self, question_id: QuestionId) -> bool:
        return self.db.delete_question(question_id)

    async def popular_tags(self, limit: int = 20) -> List[tuple[str, int]]:
        counts = Counter(
            tag for q in self.db.questions.values() for tag in set(q.tags)
        )
        return sorted(counts.items(), key=lambda item: (-item[1], item[0]))[:limit]
