"""Shared in-memory store backing the in-memory repositories."""

from qna.domain.model import Answer, Comment, Question, User, Vote
from qna.domain.value import AnswerId, CommentId, QuestionId, UserId, VoteId


class InMemoryDatabase:
    """Tables as dicts keyed by ID, with the cascades the schema declares."""

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.questions: dict[QuestionId, Question] = {}
        self.answers: dict[AnswerId, Answer] = {}
        self.votes: dict[VoteId, Vote] = {}
        self.comments: dict[CommentId, Comment] = {}

    def delete_answer(self, answer_id: AnswerId) -> bool:
        if self.answers.pop(answer_id, None) is None:
            return False
        self.votes = {k: v for k, v in self.votes.items() if v.answer_id != answer_id}
        self.comments = {
            k: c for k, c in self.comments.items() if c.answer_id != answer_id
        }
        return True

    def delete_question(self, question_id: QuestionId) -> bool:
        if self.questions.pop(question_id, None) is None:
            return False
        for answer in list(self.answers.values()):
            if answer.question_id == question_id:
                self.delete_answer(answer.id)
        self.comments = {
            k: c for k, c in self.comments.items() if c.question_id != question_id
        }
        return True
