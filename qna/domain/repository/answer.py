"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence, Set

from qna.domain.model.answer import Answer
from qna.domain.value import AnswerId, QuestionAcceptanceState, QuestionId, UserId


class AnswerRepository(ABC):
    """Repository for Answer entity.

    Defines the contract for answer persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question (unordered).

        Args:
            question_id: The question ID

        Returns:
            List of answers
        """
        pass

    @abstractmethod
    async def find_by_question_and_author(
        self, question_id: QuestionId, author_id: UserId
    ) -> Optional[Answer]:
        """Find an author's answer to a question.

        Args:
            question_id: The question ID
            author_id: The author's user ID

        Returns:
            The answer if the author already answered, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create).

        Args:
            answer: The answer to save

        Returns:
            The saved answer

        Raises:
            IntegrityError: If the author already answered the question
        """
        pass

    @abstractmethod
    async def update_content(
        self, answer_id: AnswerId, content: str
    ) -> Optional[Answer]:
        """Replace an answer's content and bump updated_at.

        Args:
            answer_id: ID of the answer to update
            content: New content

        Returns:
            Updated answer, or None if the answer doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer, cascading to its votes and comments.

        Args:
            answer_id: The answer ID to delete

        Returns:
            True if an answer was deleted
        """
        pass

    @abstractmethod
    async def get_acceptance_state(
        self, question_id: QuestionId, for_update: bool = False
    ) -> QuestionAcceptanceState:
        """Read which answer is accepted on a question.

        Args:
            question_id: The question ID
            for_update: Lock the question so concurrent acceptance
                transitions on it serialize until the transaction ends

        Returns:
            Current acceptance state
        """
        pass

    @abstractmethod
    async def apply_acceptance_state(self, state: QuestionAcceptanceState) -> None:
        """Make ``state`` the acceptance state of its question.

        Clears is_accepted on every other answer of the question and sets it
        on the accepted one, as one atomic unit.

        Args:
            state: Target acceptance state
        """
        pass

    @abstractmethod
    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> Dict[QuestionId, int]:
        """Count answers for multiple questions (batch query).

        Args:
            question_ids: Questions to count answers for

        Returns:
            Mapping of question ID to answer count (missing means 0)
        """
        pass

    @abstractmethod
    async def find_questions_with_accepted(
        self, question_ids: Sequence[QuestionId]
    ) -> Set[QuestionId]:
        """Which of the given questions have an accepted answer (batch query).

        Args:
            question_ids: Questions to check

        Returns:
            Subset of question IDs with an accepted answer
        """
        pass
