"""Get question use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.base import ApiModel
from qna.application.usecase.common import (
    CommentView,
    QuestionView,
    RankedAnswerView,
)
from qna.domain.repository import CommentRepository
from qna.domain.service import (
    AnswerService,
    ListingService,
    QuestionService,
    UserService,
)
from qna.domain.value import QuestionId, UserId


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str
    user_id: str | None = None  # Current user ID (if authenticated)


class QuestionDetail(QuestionView):
    """Question with ranked answers and its comments."""

    answers: list[RankedAnswerView]
    comments: list[CommentView]
    answer_count: int
    comment_count: int


class GetQuestionResponse(ApiModel):
    """Get question response."""

    question: QuestionDetail


class GetQuestionUseCase:
    """Use case for reading a question with its answers and comments."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        listing_service: ListingService,
        user_service: UserService,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            listing_service: Listing/ranking domain service
            user_service: User lookups for author summaries
            comment_repository: Comment repository
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.listing_service = listing_service
        self.user_service = user_service
        self.comment_repository = comment_repository

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Raises:
            NotFoundError: If question not found
        """
        question_id = QuestionId(UUID(request.question_id))
        question = await self.question_service.get_question(question_id)

        answers = await self.answer_service.list_for_question(question_id)
        user_id = UserId(UUID(request.user_id)) if request.user_id else None
        ranked = await self.listing_service.rank_answers(answers, user_id=user_id)

        comments = await self.comment_repository.find_by_question(question_id)

        # One lookup covers every author on the page
        authors = await self.user_service.get_many(
            [question.author_id]
            + [a.author_id for a in answers]
            + [c.author_id for c in comments]
        )

        return GetQuestionResponse(
            question=QuestionDetail(
                **QuestionView.of(question, authors).model_dump(),
                answers=[RankedAnswerView.of_ranked(r, authors) for r in ranked],
                comments=[CommentView.of(c, authors) for c in comments],
                answer_count=len(ranked),
                comment_count=len(comments),
            )
        )
