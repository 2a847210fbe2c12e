"""In-memory vote repository for testing."""

from typing import Dict, List, Optional, Sequence

from sqlalchemy.exc import IntegrityError

from qna.domain.model import Vote
from qna.domain.repository import VoteRepository
from qna.domain.value import (
    AnswerId,
    QuestionId,
    UserId,
    VoteCount,
    VoteId,
    VoteType,
)

from .database import InMemoryDatabase


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    async def find_by_user_and_answer(
        self,
        user_id: UserId,
        answer_id: AnswerId,
        for_update: bool = False,
    ) -> Optional[Vote]:
        for vote in self.db.votes.values():
            if vote.user_id == user_id and vote.answer_id == answer_id:
                return vote
        return None

    async def find_by_user_and_answers(
        self, user_id: UserId, answer_ids: Sequence[AnswerId]
    ) -> List[Vote]:
        wanted = set(answer_ids)
        return [
            v
            for v in self.db.votes.values()
            if v.user_id == user_id and v.answer_id in wanted
        ]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        if await self.find_by_user_and_answer(vote.user_id, vote.answer_id):
            raise IntegrityError("Duplicate vote", None, Exception())

        self.db.votes[vote.id] = vote
        return vote

    async def update_type(self, vote_id: VoteId, vote_type: VoteType) -> None:
        vote = self.db.votes.get(vote_id)
        if vote is not None:
            self.db.votes[vote_id] = vote.model_copy(update={"type": vote_type})

    async def delete(self, vote_id: VoteId) -> bool:
        return self.db.votes.pop(vote_id, None) is not None

    async def count_by_answer(self, answer_id: AnswerId) -> VoteCount:
        return (await self.count_by_answers([answer_id])).get(answer_id, VoteCount())

    async def count_by_answers(
        self, answer_ids: Sequence[AnswerId]
    ) -> Dict[AnswerId, VoteCount]:
        wanted = set(answer_ids)
        tallies: Dict[AnswerId, list[int]] = {}
        for vote in self.db.votes.values():
            if vote.answer_id not in wanted:
                continue
            up_down = tallies.setdefault(vote.answer_id, [0, 0])
            up_down[0 if vote.type == VoteType.UP else 1] += 1
        return {
            aid: VoteCount(up_votes=up, down_votes=down)
            for aid, (up, down) in tallies.items()
        }

    async def total_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> Dict[QuestionId, int]:
        wanted = set(question_ids)
        totals: Dict[QuestionId, int] = {}
        for vote in self.db.votes.values():
            answer = self.db.answers.get(vote.answer_id)
            if answer is None or answer.question_id not in wanted:
                continue
            delta = 1 if vote.type == VoteType.UP else -1
            totals[answer.question_id] = totals.get(answer.question_id, 0) + delta
        return totals
