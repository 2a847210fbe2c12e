"""In-memory comment repository for testing."""

from typing import Dict, List, Sequence

from qna.domain.model import Comment
from qna.domain.repository import CommentRepository
from qna.domain.value import AnswerId, QuestionId

from .database import InMemoryDatabase


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    def _oldest_first(self) -> List[Comment]:
        return sorted(self.db.comments.values(), key=lambda c: c.created_at)

    async def find_by_question(self, question_id: QuestionId) -> List[Comment]:
        return [c for c in self._oldest_first() if c.question_id == question_id]

    async def find_by_answers(
        self, answer_ids: Sequence[AnswerId]
    ) -> Dict[AnswerId, List[Comment]]:
        wanted = set(answer_ids)
        grouped: Dict[AnswerId, List[Comment]] = {}
        for comment in self._oldest_first():
            if comment.answer_id in wanted:
                grouped.setdefault(comment.answer_id, []).append(comment)
        return grouped

    async def count_by_answers(
        self, answer_ids: Sequence[AnswerId]
    ) -> Dict[AnswerId, int]:
        wanted = set(answer_ids)
        counts: Dict[AnswerId, int] = {}
        for comment in self.db.comments.values():
            if comment.answer_id in wanted:
                counts[comment.answer_id] = counts.get(comment.answer_id, 0) + 1
        return counts

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> Dict[QuestionId, int]:
        wanted = set(question_ids)
        counts: Dict[QuestionId, int] = {}
        for comment in self.db.comments.values():
            if comment.question_id in wanted:
                counts[comment.question_id] = counts.get(comment.question_id, 0) + 1
        return counts

    async def save(self, comment: Comment) -> Comment:
        self.db.comments[comment.id] = comment
        return comment
