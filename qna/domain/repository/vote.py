"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from qna.domain.model.vote import Vote
from qna.domain.value import AnswerId, QuestionId, UserId, VoteCount, VoteId, VoteType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_user_and_answer(
        self,
        user_id: UserId,
        answer_id: AnswerId,
        for_update: bool = False,
    ) -> Optional[Vote]:
        """Find a user's vote on an answer.

        Args:
            user_id: The user's ID
            answer_id: The answer's ID
            for_update: Lock the row until the transaction ends

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_answers(
        self, user_id: UserId, answer_ids: Sequence[AnswerId]
    ) -> List[Vote]:
        """Find a user's votes on multiple answers (batch query).

        Args:
            user_id: The user's ID
            answer_ids: Answers to check

        Returns:
            The user's votes on those answers
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        A failed insert leaves the surrounding transaction usable.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the user already voted on the answer
        """
        pass

    @abstractmethod
    async def update_type(self, vote_id: VoteId, vote_type: VoteType) -> None:
        """Switch a vote's direction in place.

        Args:
            vote_id: The vote ID
            vote_type: New direction
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote.

        Args:
            vote_id: The vote ID to delete

        Returns:
            True if a vote was deleted
        """
        pass

    @abstractmethod
    async def count_by_answer(self, answer_id: AnswerId) -> VoteCount:
        """Tally votes on one answer.

        Args:
            answer_id: The answer's ID

        Returns:
            Vote count ({0, 0, 0} when there are no votes)
        """
        pass

    @abstractmethod
    async def count_by_answers(
        self, answer_ids: Sequence[AnswerId]
    ) -> Dict[AnswerId, VoteCount]:
        """Tally votes on multiple answers with one grouped query.

        Args:
            answer_ids: Answers to tally

        Returns:
            Mapping of answer ID to vote count (missing means no votes)
        """
        pass

    @abstractmethod
    async def total_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> Dict[QuestionId, int]:
        """Sum of answer vote totals per question (batch query).

        Args:
            question_ids: Questions to aggregate

        Returns:
            Mapping of question ID to summed net score (missing means 0)
        """
        pass
