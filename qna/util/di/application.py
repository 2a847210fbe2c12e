"""Application layer DI providers."""

from dishka import Scope, provide

from qna.application.usecase.answer import (
    AcceptAnswerUseCase,
    CreateAnswerUseCase,
    DeleteAnswerUseCase,
    ListAnswersUseCase,
    UpdateAnswerUseCase,
)
from qna.application.usecase.auth import GetCurrentUserUseCase
from qna.application.usecase.question import (
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    PopularTagsUseCase,
    UpdateQuestionUseCase,
)
from qna.application.usecase.vote import CastVoteUseCase, GetVoteCountUseCase
from qna.domain.repository import CommentRepository
from qna.domain.service import (
    AcceptanceService,
    AnswerService,
    JWTService,
    ListingService,
    QuestionService,
    UserService,
    VoteService,
)
from qna.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Vote use cases
    @provide
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide
    def get_vote_count_use_case(
        self, vote_service: VoteService, answer_service: AnswerService
    ) -> GetVoteCountUseCase:
        """Provide vote count use case."""
        return GetVoteCountUseCase(
            vote_service=vote_service, answer_service=answer_service
        )

    # Answer use cases
    @provide
    def get_accept_answer_use_case(
        self, acceptance_service: AcceptanceService, vote_service: VoteService
    ) -> AcceptAnswerUseCase:
        """Provide accept answer use case."""
        return AcceptAnswerUseCase(
            acceptance_service=acceptance_service, vote_service=vote_service
        )

    @provide
    def get_create_answer_use_case(
        self, answer_service: AnswerService
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(answer_service=answer_service)

    @provide
    def get_update_answer_use_case(
        self, answer_service: AnswerService, vote_service: VoteService
    ) -> UpdateAnswerUseCase:
        """Provide update answer use case."""
        return UpdateAnswerUseCase(
            answer_service=answer_service, vote_service=vote_service
        )

    @provide
    def get_delete_answer_use_case(
        self, answer_service: AnswerService
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(answer_service=answer_service)

    @provide
    def get_list_answers_use_case(
        self,
        answer_service: AnswerService,
        listing_service: ListingService,
        user_service: UserService,
        comment_repository: CommentRepository,
    ) -> ListAnswersUseCase:
        """Provide list answers use case."""
        return ListAnswersUseCase(
            answer_service=answer_service,
            listing_service=listing_service,
            user_service=user_service,
            comment_repository=comment_repository,
        )

    # Question use cases
    @provide
    def get_list_questions_use_case(
        self, listing_service: ListingService, user_service: UserService
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            listing_service=listing_service, user_service=user_service
        )

    @provide
    def get_get_question_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        listing_service: ListingService,
        user_service: UserService,
        comment_repository: CommentRepository,
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service,
            answer_service=answer_service,
            listing_service=listing_service,
            user_service=user_service,
            comment_repository=comment_repository,
        )

    @provide
    def get_create_question_use_case(
        self, question_service: QuestionService
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(question_service=question_service)

    @provide
    def get_update_question_use_case(
        self, question_service: QuestionService
    ) -> UpdateQuestionUseCase:
        """Provide update question use case."""
        return UpdateQuestionUseCase(question_service=question_service)

    @provide
    def get_delete_question_use_case(
        self, question_service: QuestionService
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(question_service=question_service)

    @provide
    def get_popular_tags_use_case(
        self, question_service: QuestionService
    ) -> PopularTagsUseCase:
        """Provide popular tags use case."""
        return PopularTagsUseCase(question_service=question_service)
