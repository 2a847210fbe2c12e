"""Fixtures for API tests against the ASGI app with in-memory persistence."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

import httpx
import pytest_asyncio
from dishka import AsyncContainer

from qna.domain.model import Comment, User
from qna.domain.repository import CommentRepository, UserRepository
from qna.domain.service import JWTService
from qna.domain.value import AnswerId, QuestionId, UserRole
from qna.interface.api.app import create_app
from tests.conftest import at, make_comment, make_user
from tests.di import build_test_container

DESCRIPTION = "Looking for an explanation with a small runnable example."
ANSWER = "Use a context manager so the resource is always released."


@dataclass
class ApiHarness:
    """HTTP client plus direct access to the app's container."""

    client: httpx.AsyncClient
    container: AsyncContainer

    async def login(
        self,
        name: str = "alice",
        role: UserRole = UserRole.USER,
        avatar: Optional[str] = None,
    ) -> tuple[User, dict[str, str]]:
        """Store a user and return it with its Authorization header."""
        user = make_user(name, role=role).model_copy(update={"avatar": avatar})
        async with self.container() as request_container:
            user_repo = await request_container.get(UserRepository)
            jwt_service = await request_container.get(JWTService)
            user = await user_repo.save(user)
            token = jwt_service.create_token(str(user.id))
        return user, {"Authorization": f"Bearer {token}"}

    async def ask(self, headers: dict[str, str], **fields) -> dict:
        """Create a question through the API and return it."""
        body = {
            "title": "How do context managers work?",
            "description": DESCRIPTION,
            "tags": ["python"],
            **fields,
        }
        response = await self.client.post("/questions", json=body, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()["question"]

    async def answer(
        self, question_id: str, headers: dict[str, str], content: str = ANSWER
    ) -> dict:
        """Answer a question through the API and return the answer."""
        response = await self.client.post(
            f"/questions/{question_id}/answers",
            json={"content": content},
            headers=headers,
        )
        assert response.status_code == 201, response.text
        return response.json()["answer"]

    async def vote(self, answer_id: str, headers: dict[str, str], type: str) -> dict:
        response = await self.client.post(
            f"/answers/{answer_id}/vote", json={"type": type}, headers=headers
        )
        assert response.status_code == 200, response.text
        return response.json()

    async def comment(
        self,
        user: User,
        content: str,
        minutes: int,
        question_id: Optional[str] = None,
        answer_id: Optional[str] = None,
    ) -> Comment:
        """Store a comment directly; the API has no route for writing them."""
        comment = make_comment(
            user.id,
            question_id=QuestionId(UUID(question_id)) if question_id else None,
            answer_id=AnswerId(UUID(answer_id)) if answer_id else None,
            content=content,
            created_at=at(minutes),
        )
        async with self.container() as request_container:
            comment_repo = await request_container.get(CommentRepository)
            return await comment_repo.save(comment)


@pytest_asyncio.fixture
async def api():
    """App wired to a fresh in-memory container."""
    container = build_test_container(with_fastapi=True)
    app = create_app(container)
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)

    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield ApiHarness(client=client, container=container)

    await container.close()
