"""List questions use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field, field_validator

from qna.application.usecase.base import ApiModel
from qna.application.usecase.common import PaginationView, QuestionListItem
from qna.domain.repository import (
    QuestionFilter,
    QuestionQuery,
    QuestionSortField,
    SortOrder,
)
from qna.domain.service import ListingService, UserService


class ListQuestionsRequest(BaseModel):
    """List questions request.

    Validated before any query runs; invalid values raise a pydantic
    ValidationError.
    """

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    search: Optional[str] = Field(default=None, max_length=100)
    tags: list[str] = Field(default_factory=list)
    sort_by: QuestionSortField = QuestionSortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC
    filter: QuestionFilter = QuestionFilter.ALL

    @field_validator("search", mode="before")
    @classmethod
    def blank_search_is_none(cls, v: Optional[str]) -> Optional[str]:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, v):
        """Accept a comma-separated string; trim items and drop empty ones."""
        if v is None:
            return []
        if isinstance(v, str):
            v = v.split(",")
        return [t.strip() for t in v if t and t.strip()]


class ListQuestionsResponse(ApiModel):
    """List questions response."""

    questions: list[QuestionListItem]
    pagination: PaginationView


class ListQuestionsUseCase:
    """Use case for listing questions with search, filters, sort and pages."""

    def __init__(
        self, listing_service: ListingService, user_service: UserService
    ) -> None:
        """Initialize list questions use case.

        Args:
            listing_service: Listing/ranking domain service
            user_service: User lookups for author summaries
        """
        self.listing_service = listing_service
        self.user_service = user_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: Validated listing options

        Returns:
            One page of questions with pagination metadata
        """
        with logfire.span(
            "list_questions.execute",
            sort_by=request.sort_by.value,
            sort_order=request.sort_order.value,
            filter=request.filter.value,
            page=request.page,
            limit=request.limit,
        ):
            query = QuestionQuery(
                search=request.search, tags=request.tags, filter=request.filter
            )
            page = await self.listing_service.list_questions(
                query,
                sort=request.sort_by,
                order=request.sort_order,
                page=request.page,
                limit=request.limit,
            )

            authors = await self.user_service.get_many(
                [s.question.author_id for s in page.questions]
            )

            return ListQuestionsResponse(
                questions=[
                    QuestionListItem.of_summary(s, authors) for s in page.questions
                ],
                pagination=PaginationView.of(page.pagination),
            )
