"""List answers use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from qna.application.usecase.base import ApiModel
from qna.application.usecase.common import AnswerWithCommentsView
from qna.domain.repository import CommentRepository
from qna.domain.service import AnswerService, ListingService, UserService
from qna.domain.value import QuestionId, UserId


class ListAnswersRequest(BaseModel):
    """List answers request."""

    question_id: str
    user_id: str | None = None  # Current user ID (if authenticated)


class ListAnswersResponse(ApiModel):
    """List answers response."""

    answers: list[AnswerWithCommentsView]
    total_count: int


class ListAnswersUseCase:
    """Use case for listing a question's answers with their comment threads."""

    def __init__(
        self,
        answer_service: AnswerService,
        listing_service: ListingService,
        user_service: UserService,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize list answers use case.

        Args:
            answer_service: Answer domain service
            listing_service: Listing/ranking domain service
            user_service: User lookups for author summaries
            comment_repository: Comment repository
        """
        self.answer_service = answer_service
        self.listing_service = listing_service
        self.user_service = user_service
        self.comment_repository = comment_repository

    async def execute(self, request: ListAnswersRequest) -> ListAnswersResponse:
        """Execute list answers flow.

        Raises:
            NotFoundError: If question not found
        """
        with logfire.span("list_answers.execute", question_id=request.question_id):
            answers = await self.answer_service.list_for_question(
                QuestionId(UUID(request.question_id))
            )
            user_id = UserId(UUID(request.user_id)) if request.user_id else None
            ranked = await self.listing_service.rank_answers(answers, user_id=user_id)

            threads = await self.comment_repository.find_by_answers(
                [a.id for a in answers]
            )
            authors = await self.user_service.get_many(
                [a.author_id for a in answers]
                + [c.author_id for thread in threads.values() for c in thread]
            )

            return ListAnswersResponse(
                answers=[
                    AnswerWithCommentsView.of_thread(
                        r, threads.get(r.answer.id, []), authors
                    )
                    for r in ranked
                ],
                total_count=len(ranked),
            )
