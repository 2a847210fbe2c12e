"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .get_vote_count import (
    GetVoteCountRequest,
    GetVoteCountResponse,
    GetVoteCountUseCase,
)

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetVoteCountRequest",
    "GetVoteCountResponse",
    "GetVoteCountUseCase",
]
