"""Response views shared by question and answer use cases."""

from datetime import datetime
from typing import Mapping, Optional

from qna.domain.model import Answer, Comment, Question, User
from qna.domain.service import QuestionSummary, RankedAnswer
from qna.domain.value import Pagination, UserId, VoteCount, VoteType

from .base import ApiModel


Authors = Mapping[UserId, User]


class UserSummaryView(ApiModel):
    """Author shown next to a question, answer or comment."""

    id: str
    username: str
    avatar: Optional[str] = None

    @classmethod
    def of(cls, user: User) -> "UserSummaryView":
        return cls(id=str(user.id), username=str(user.username), avatar=user.avatar)

    @classmethod
    def lookup(
        cls, authors: Optional[Authors], user_id: UserId
    ) -> Optional["UserSummaryView"]:
        user = authors.get(user_id) if authors else None
        return cls.of(user) if user else None


class VoteCountView(ApiModel):
    """Vote tally."""

    up_votes: int
    down_votes: int
    total: int

    @classmethod
    def of(cls, count: VoteCount) -> "VoteCountView":
        return cls(
            up_votes=count.up_votes, down_votes=count.down_votes, total=count.total
        )


class AnswerView(ApiModel):
    """Answer with its vote tally."""

    id: str
    content: str
    question_id: str
    author_id: str
    author: Optional[UserSummaryView] = None
    is_accepted: bool
    created_at: datetime
    updated_at: datetime
    vote_count: VoteCountView

    @classmethod
    def of(
        cls,
        answer: Answer,
        vote_count: VoteCount,
        authors: Optional[Authors] = None,
    ) -> "AnswerView":
        return cls(
            id=str(answer.id),
            content=answer.content,
            question_id=str(answer.question_id),
            author_id=str(answer.author_id),
            author=UserSummaryView.lookup(authors, answer.author_id),
            is_accepted=answer.is_accepted,
            created_at=answer.created_at,
            updated_at=answer.updated_at,
            vote_count=VoteCountView.of(vote_count),
        )


class CommentView(ApiModel):
    """Comment on a question or an answer."""

    id: str
    content: str
    author_id: str
    author: Optional[UserSummaryView] = None
    created_at: datetime

    @classmethod
    def of(
        cls, comment: Comment, authors: Optional[Authors] = None
    ) -> "CommentView":
        return cls(
            id=str(comment.id),
            content=comment.content,
            author_id=str(comment.author_id),
            author=UserSummaryView.lookup(authors, comment.author_id),
            created_at=comment.created_at,
        )


class RankedAnswerView(AnswerView):
    """Answer as listed under a question."""

    comment_count: int
    user_vote: Optional[VoteType] = None

    @classmethod
    def of_ranked(
        cls, ranked: RankedAnswer, authors: Optional[Authors] = None
    ) -> "RankedAnswerView":
        base = AnswerView.of(ranked.answer, ranked.vote_count, authors)
        return cls(
            **base.model_dump(),
            comment_count=ranked.comment_count,
            user_vote=ranked.user_vote,
        )


class AnswerWithCommentsView(RankedAnswerView):
    """Answer with its comment thread, oldest first."""

    comments: list[CommentView]

    @classmethod
    def of_thread(
        cls,
        ranked: RankedAnswer,
        comments: list[Comment],
        authors: Optional[Authors] = None,
    ) -> "AnswerWithCommentsView":
        return cls(
            **RankedAnswerView.of_ranked(ranked, authors).model_dump(),
            comments=[CommentView.of(c, authors) for c in comments],
        )


class QuestionView(ApiModel):
    """Question fields."""

    id: str
    title: str
    description: str
    tags: list[str]
    author_id: str
    author: Optional[UserSummaryView] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def of(
        cls, question: Question, authors: Optional[Authors] = None
    ) -> "QuestionView":
        return cls(
            id=str(question.id),
            title=question.title,
            description=question.description,
            tags=list(question.tags),
            author_id=str(question.author_id),
            author=UserSummaryView.lookup(authors, question.author_id),
            created_at=question.created_at,
            updated_at=question.updated_at,
        )


class QuestionListItem(QuestionView):
    """Question as listed, with aggregates."""

    answer_count: int
    comment_count: int
    total_votes: int
    has_accepted_answer: bool

    @classmethod
    def of_summary(
        cls, summary: QuestionSummary, authors: Optional[Authors] = None
    ) -> "QuestionListItem":
        return cls(
            **QuestionView.of(summary.question, authors).model_dump(),
            answer_count=summary.answer_count,
            comment_count=summary.comment_count,
            total_votes=summary.total_votes,
            has_accepted_answer=summary.has_accepted_answer,
        )


class PaginationView(ApiModel):
    """Pagination metadata."""

    page: int
    limit: int
    total_count: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def of(cls, pagination: Pagination) -> "PaginationView":
        return cls(
            page=pagination.page,
            limit=pagination.limit,
            total_count=pagination.total_count,
            total_pages=pagination.total_pages,
            has_next=pagination.has_next,
            has_prev=pagination.has_prev,
        )


class MessageResponse(ApiModel):
    """Plain acknowledgement."""

    message: str
