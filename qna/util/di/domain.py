"""Domain layer DI providers."""

from dishka import Scope, provide

from qna.config import AuthSettings
from qna.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
    UserRepository,
    VoteRepository,
)
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


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(question_repository=question_repository)

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_repository=question_repository,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        answer_repository: AnswerRepository,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_acceptance_service(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
    ) -> AcceptanceService:
        """Provide answer acceptance domain service."""
        return AcceptanceService(
            answer_repository=answer_repository,
            question_repository=question_repository,
        )

    @provide
    def get_listing_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        comment_repository: CommentRepository,
        vote_service: VoteService,
    ) -> ListingService:
        """Provide listing/ranking domain service."""
        return ListingService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            comment_repository=comment_repository,
            vote_service=vote_service,
        )
