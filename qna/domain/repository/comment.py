"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Sequence

from qna.domain.model.comment import Comment
from qna.domain.value import AnswerId, QuestionId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Comments are read alongside questions and answers; they are
    removed by cascade when their parent goes.
    """

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[Comment]:
        """Find comments on a question, oldest first.

        Args:
            question_id: The question ID

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def find_by_answers(
        self, answer_ids: Sequence[AnswerId]
    ) -> Dict[AnswerId, List[Comment]]:
        """Find comments on multiple answers, oldest first (batch query).

        Args:
            answer_ids: Answers to load comments for

        Returns:
            Mapping of answer ID to its comments (missing means none)
        """
        pass

    @abstractmethod
    async def count_by_answers(
        self, answer_ids: Sequence[AnswerId]
    ) -> Dict[AnswerId, int]:
        """Count comments on multiple answers (batch query).

        Args:
            answer_ids: Answers to count comments for

        Returns:
            Mapping of answer ID to comment count (missing means 0)
        """
        pass

    @abstractmethod
    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> Dict[QuestionId, int]:
        """Count comments attached directly to multiple questions.

        Args:
            question_ids: Questions to count comments for

        Returns:
            Mapping of question ID to comment count (missing means 0)
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass
