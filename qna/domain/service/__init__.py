"""Domain services."""

from .acceptance_service import AcceptanceService
from .answer_service import DUPLICATE_ANSWER_MESSAGE, AnswerService
from .base import Service
from .jwt_service import JWTService
from .listing_service import (
    ListingService,
    QuestionPage,
    QuestionSummary,
    RankedAnswer,
)
from .policy import OwnerOrAdminPolicy, QuestionOwnerPolicy
from .question_service import QuestionService
from .user_service import UserService
from .vote_service import CastVoteResult, VoteService

__all__ = [
    "AcceptanceService",
    "AnswerService",
    "CastVoteResult",
    "DUPLICATE_ANSWER_MESSAGE",
    "JWTService",
    "ListingService",
    "OwnerOrAdminPolicy",
    "QuestionOwnerPolicy",
    "QuestionPage",
    "QuestionService",
    "QuestionSummary",
    "RankedAnswer",
    "Service",
    "UserService",
    "VoteService",
]
