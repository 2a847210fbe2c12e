"""Authorization policies for mutating questions and answers."""

from qna.domain.error import NotAuthorizedError
from qna.domain.model.question import Question
from qna.domain.value import Actor, UserId


class OwnerOrAdminPolicy:
    """The resource author or an ADMIN may mutate the resource."""

    @staticmethod
    def check(actor: Actor, owner_id: UserId, message: str) -> None:
        """Raise NotAuthorizedError unless actor owns the resource or is ADMIN.

        Args:
            actor: Authenticated caller
            owner_id: Author of the resource
            message: Error detail returned to the caller
        """
        if actor.user_id != owner_id and not actor.is_admin:
            raise NotAuthorizedError(message)


class QuestionOwnerPolicy:
    """Only the question author may accept answers. ADMIN does not bypass."""

    message = "Only the question owner can accept answers"

    @classmethod
    def check(cls, actor: Actor, question: Question) -> None:
        if actor.user_id != question.author_id:
            raise NotAuthorizedError(cls.message)
