"""Question repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from pydantic import Field

from qna.domain.model.question import Question
from qna.domain.value import QuestionId
from qna.domain.value.common import ValueObject


class QuestionSortField(str, Enum):
    """Sort keys for question listings."""

    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    TITLE = "title"
    ANSWERS = "answers"  # Number of answers
    VOTES = "votes"  # Sum of answer vote totals (computed, not stored)


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class QuestionFilter(str, Enum):
    """Answer-state filter for question listings."""

    ALL = "all"
    ANSWERED = "answered"  # At least one answer
    UNANSWERED = "unanswered"  # No answers
    ACCEPTED = "accepted"  # Has an accepted answer


class QuestionQuery(ValueObject):
    """Filters applied to a question listing.

    - search: case-insensitive substring of title or description
    - tags: question matches if it has any of these tags
    """

    search: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    filter: QuestionFilter = QuestionFilter.ALL


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        query: QuestionQuery,
        sort: QuestionSortField = QuestionSortField.CREATED_AT,
        order: SortOrder = SortOrder.DESC,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions matching the query, ordered and windowed.

        Ties on the sort key break by created_at descending.

        Args:
            query: Search, tag and answer-state filters
            sort: Sort key; VOTES ranks by the summed net score of the
                question's answers, 0 when there are none
            order: Sort direction
            limit: Maximum number of questions to return (None for all)
            offset: Number of questions to skip

        Returns:
            List of questions matching the criteria
        """
        pass

    @abstractmethod
    async def count(self, query: QuestionQuery) -> int:
        """Count questions matching the query.

        Args:
            query: Search, tag and answer-state filters

        Returns:
            Number of matching questions
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update).

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question, cascading to its answers, votes and comments.

        Args:
            question_id: The question ID to delete

        Returns:
            True if a question was deleted
        """
        pass

    @abstractmethod
    async def popular_tags(self, limit: int = 20) -> List[tuple[str, int]]:
        """Most used tags with the number of questions carrying each.

        Args:
            limit: Maximum number of tags

        Returns:
            (tag, count) pairs, most used first
        """
        pass
