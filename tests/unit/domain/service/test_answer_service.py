"""Unit tests for AnswerService."""

from uuid import uuid4

import pydantic
import pytest
from sqlalchemy.exc import IntegrityError

from qna.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
)
from qna.domain.model import Answer
from qna.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
    VoteRepository,
)
from qna.domain.service import DUPLICATE_ANSWER_MESSAGE, AnswerService, VoteService
from qna.domain.value import QuestionId, UserRole
from qna.persistence.repository.inmemory import InMemoryAnswerRepository
from tests.conftest import actor_for, make_answer, make_comment, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

CONTENT = "Slicing with [::-1] returns a reversed copy of the list."


class TestCreateAnswer:
    """Tests for answering questions."""

    @pytest.mark.asyncio
    async def test_create_answer(self, unit_env):
        """A user can answer a question once."""
        # Arrange
        service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(make_user().id))
        author = make_user("bob")

        # Act
        answer = await service.create_answer(actor_for(author), question.id, CONTENT)

        # Assert
        assert answer.content == CONTENT
        assert answer.author_id == author.id
        assert answer.question_id == question.id
        assert answer.is_accepted is False

    @pytest.mark.asyncio
    async def test_second_answer_by_same_user_rejected(self, unit_env):
        """A user cannot answer the same question twice."""
        # Arrange
        service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(make_user().id))
        actor = actor_for(make_user("bob"))
        await service.create_answer(actor, question.id, CONTENT)

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await service.create_answer(actor, question.id, CONTENT + " Again.")
        assert str(exc_info.value) == DUPLICATE_ANSWER_MESSAGE

    @pytest.mark.asyncio
    async def test_duplicate_caught_by_constraint(self, unit_env):
        """A duplicate that slips past the lookup is still a rule violation."""
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await question_repo.save(make_question(make_user().id))
        service = AnswerService(_RacingAnswerRepository(answer_repo.db), question_repo)

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError, match="already answered"):
            await service.create_answer(actor_for(make_user()), question.id, CONTENT)

    @pytest.mark.asyncio
    async def test_unknown_question(self, unit_env):
        """Answering a missing question raises NotFoundError."""
        # Arrange
        service = await unit_env.get(AnswerService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.create_answer(
                actor_for(make_user()), QuestionId(uuid4()), CONTENT
            )

    @pytest.mark.asyncio
    async def test_short_content_rejected(self, unit_env):
        """Answers need at least 20 characters."""
        # Arrange
        service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(make_user().id))

        # Act & Assert
        with pytest.raises(pydantic.ValidationError):
            await service.create_answer(actor_for(make_user()), question.id, "Too short")


class TestUpdateAnswer:
    """Tests for editing answers."""

    @pytest.mark.asyncio
    async def test_author_updates_content(self, unit_env):
        """The author can replace the content."""
        # Arrange
        service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        author = make_user("bob")
        answer = await answer_repo.save(make_answer(QuestionId(uuid4()), author.id))

        # Act
        updated = await service.update_answer(actor_for(author), answer.id, CONTENT)

        # Assert
        assert updated.content == CONTENT
        assert updated.updated_at >= answer.updated_at
        assert (await answer_repo.find_by_id(answer.id)).content == CONTENT

    @pytest.mark.asyncio
    async def test_admin_may_update(self, unit_env):
        """ADMIN can edit any answer."""
        # Arrange
        service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        answer = await answer_repo.save(make_answer(QuestionId(uuid4()), make_user().id))
        admin = make_user("root", role=UserRole.ADMIN)

        # Act
        updated = await service.update_answer(actor_for(admin), answer.id, CONTENT)

        # Assert
        assert updated.content == CONTENT

    @pytest.mark.asyncio
    async def test_moderator_is_not_admin(self, unit_env):
        """MODERATOR gets no edit rights on other users' answers."""
        # Arrange
        service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        answer = await answer_repo.save(make_answer(QuestionId(uuid4()), make_user().id))
        moderator = make_user("mod", role=UserRole.MODERATOR)

        # Act & Assert
        with pytest.raises(NotAuthorizedError, match="You can only edit your own answers"):
            await service.update_answer(actor_for(moderator), answer.id, CONTENT)

    @pytest.mark.asyncio
    async def test_invalid_content_leaves_answer_untouched(self, unit_env):
        """Validation runs before the store is written."""
        # Arrange
        service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        author = make_user("bob")
        answer = await answer_repo.save(make_answer(QuestionId(uuid4()), author.id))

        # Act & Assert
        with pytest.raises(pydantic.ValidationError):
            await service.update_answer(actor_for(author), answer.id, "short")
        assert (await answer_repo.find_by_id(answer.id)).content == answer.content


class TestDeleteAnswer:
    """Tests for deleting answers."""

    @pytest.mark.asyncio
    async def test_delete_cascades_votes_and_comments(self, unit_env):
        """Deleting an answer removes its votes and comments."""
        # Arrange
        service = await unit_env.get(AnswerService)
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        vote_repo = await unit_env.get(VoteRepository)
        comment_repo = await unit_env.get(CommentRepository)

        author = make_user("bob")
        question = await question_repo.save(make_question(make_user().id))
        answer = await answer_repo.save(make_answer(question.id, author.id))
        await vote_service.cast_vote(make_user().id, answer.id, "up")
        await comment_repo.save(make_comment(author.id, answer_id=answer.id))

        # Act
        await service.delete_answer(actor_for(author), answer.id)

        # Assert
        assert await answer_repo.find_by_id(answer.id) is None
        assert (await vote_repo.count_by_answer(answer.id)).total == 0
        assert await comment_repo.count_by_answers([answer.id]) == {}

    @pytest.mark.asyncio
    async def test_stranger_cannot_delete(self, unit_env):
        """Only the author or an ADMIN can delete."""
        # Arrange
        service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        answer = await answer_repo.save(make_answer(QuestionId(uuid4()), make_user().id))

        # Act & Assert
        with pytest.raises(NotAuthorizedError, match="delete your own answers"):
            await service.delete_answer(actor_for(make_user("eve")), answer.id)
        assert await answer_repo.find_by_id(answer.id) is not None


class _RacingAnswerRepository(InMemoryAnswerRepository):
    """Misses the duplicate on lookup and trips the unique constraint on insert."""

    async def find_by_question_and_author(self, question_id, author_id):
        return None

    async def save(self, answer: Answer) -> Answer:
        raise IntegrityError("Duplicate answer", None, Exception())
