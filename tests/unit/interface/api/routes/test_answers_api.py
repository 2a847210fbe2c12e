"""API tests for answer routes."""

from uuid import uuid4

import pytest

from qna.domain.service import JWTService
from qna.domain.value import UserRole
from tests.conftest import make_user


class TestVoteEndpoint:
    """Tests for POST /answers/{id}/vote and GET /answers/{id}/votes."""

    @pytest.mark.asyncio
    async def test_toggle_sequence(self, api):
        """up, up, down reports registered, removed, registered."""
        # Arrange
        _, asker = await api.login("asker")
        _, answerer = await api.login("answerer")
        _, voter = await api.login("voter")
        question = await api.ask(asker)
        answer = await api.answer(question["id"], answerer)

        # Act
        first = await api.vote(answer["id"], voter, "up")
        second = await api.vote(answer["id"], voter, "up")
        third = await api.vote(answer["id"], voter, "down")

        # Assert
        assert first == {
            "message": "Vote registered",
            "voteCount": {"upVotes": 1, "downVotes": 0, "total": 1},
            "userVote": "up",
        }
        assert second["message"] == "Vote removed"
        assert second["userVote"] is None
        assert second["voteCount"]["total"] == 0
        assert third["message"] == "Vote registered"
        assert third["userVote"] == "down"
        assert third["voteCount"] == {"upVotes": 0, "downVotes": 1, "total": -1}

    @pytest.mark.asyncio
    async def test_public_tally(self, api):
        """Vote counts are readable without a token."""
        # Arrange
        _, asker = await api.login("asker")
        question = await api.ask(asker)
        answer = await api.answer(question["id"], asker)
        for name, vote_type in [("a", "up"), ("b", "up"), ("c", "up"), ("d", "down")]:
            _, headers = await api.login(name)
            await api.vote(answer["id"], headers, vote_type)

        # Act
        response = await api.client.get(f"/answers/{answer['id']}/votes")

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "voteCount": {"upVotes": 3, "downVotes": 1, "total": 2}
        }

    @pytest.mark.asyncio
    async def test_requires_authentication(self, api):
        """Anonymous votes are 401."""
        response = await api.client.post(
            f"/answers/{uuid4()}/vote", json={"type": "up"}
        )

        assert response.status_code == 401
        assert response.json() == {
            "error": "Unauthorized",
            "detail": "Authentication required",
        }

    @pytest.mark.asyncio
    async def test_bad_token(self, api):
        """A token that does not verify is 401."""
        response = await api.client.post(
            f"/answers/{uuid4()}/vote",
            json={"type": "up"},
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid authentication token"

    @pytest.mark.asyncio
    async def test_token_for_unknown_user(self, api):
        """A valid token naming no stored user is 401."""
        # Arrange
        async with api.container() as request_container:
            jwt_service = await request_container.get(JWTService)
            token = jwt_service.create_token(str(make_user().id))

        # Act
        response = await api.client.post(
            f"/answers/{uuid4()}/vote",
            json={"type": "up"},
            headers={"Authorization": f"Bearer {token}"},
        )

        # Assert
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_invalid_type(self, api):
        """Unknown vote types are 400."""
        # Arrange
        _, asker = await api.login("asker")
        question = await api.ask(asker)
        answer = await api.answer(question["id"], asker)

        # Act
        response = await api.client.post(
            f"/answers/{answer['id']}/vote", json={"type": "meh"}, headers=asker
        )

        # Assert
        assert response.status_code == 400
        assert response.json() == {
            "error": "ValidationError",
            "detail": 'Vote type must be "up" or "down"',
        }

    @pytest.mark.asyncio
    async def test_unknown_answer(self, api):
        """Voting on a missing answer is 404."""
        _, headers = await api.login()

        response = await api.client.post(
            f"/answers/{uuid4()}/vote", json={"type": "up"}, headers=headers
        )

        assert response.status_code == 404
        assert response.json() == {"error": "NotFoundError", "detail": "Answer not found"}

    @pytest.mark.asyncio
    async def test_malformed_id(self, api):
        """Non-UUID ids are rejected as validation errors."""
        response = await api.client.get("/answers/not-a-uuid/votes")

        assert response.status_code == 400
        assert response.json()["error"] == "ValidationError"


class TestAcceptEndpoint:
    """Tests for POST /answers/{id}/accept."""

    @pytest.mark.asyncio
    async def test_owner_accepts_and_moves_acceptance(self, api):
        """Accepting a second answer unaccepts the first."""
        # Arrange
        _, asker = await api.login("asker")
        _, bob = await api.login("bob")
        _, carol = await api.login("carol")
        question = await api.ask(asker)
        first = await api.answer(question["id"], bob)
        second = await api.answer(question["id"], carol)

        # Act
        accepted_first = await api.client.post(
            f"/answers/{first['id']}/accept", headers=asker
        )
        accepted_second = await api.client.post(
            f"/answers/{second['id']}/accept", headers=asker
        )

        # Assert
        assert accepted_first.status_code == 200
        body = accepted_second.json()
        assert body["message"] == "Answer accepted successfully"
        assert body["answer"]["id"] == second["id"]
        assert body["answer"]["isAccepted"] is True
        assert body["answer"]["voteCount"]["total"] == 0

        listing = await api.client.get(f"/questions/{question['id']}/answers")
        flags = {a["id"]: a["isAccepted"] for a in listing.json()["answers"]}
        assert flags == {first["id"]: False, second["id"]: True}

    @pytest.mark.asyncio
    async def test_admin_forbidden(self, api):
        """ADMIN cannot accept on someone else's question."""
        # Arrange
        _, asker = await api.login("asker")
        _, admin = await api.login("root", role=UserRole.ADMIN)
        question = await api.ask(asker)
        answer = await api.answer(question["id"], asker)

        # Act
        response = await api.client.post(
            f"/answers/{answer['id']}/accept", headers=admin
        )

        # Assert
        assert response.status_code == 403
        assert response.json() == {
            "error": "NotAuthorizedError",
            "detail": "Only the question owner can accept answers",
        }

    @pytest.mark.asyncio
    async def test_unknown_answer(self, api):
        """Accepting a missing answer is 404."""
        _, headers = await api.login()

        response = await api.client.post(f"/answers/{uuid4()}/accept", headers=headers)

        assert response.status_code == 404


class TestEditEndpoints:
    """Tests for PUT and DELETE /answers/{id}."""

    @pytest.mark.asyncio
    async def test_author_updates(self, api):
        """The author can edit the answer."""
        # Arrange
        _, asker = await api.login("asker")
        _, bob = await api.login("bob")
        question = await api.ask(asker)
        answer = await api.answer(question["id"], bob)
        content = "Updated: prefer contextlib.closing for objects without __exit__."

        # Act
        response = await api.client.put(
            f"/answers/{answer['id']}", json={"content": content}, headers=bob
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Answer updated successfully"
        assert body["answer"]["content"] == content

    @pytest.mark.asyncio
    async def test_stranger_forbidden_admin_allowed(self, api):
        """Strangers get 403; ADMIN may edit."""
        # Arrange
        _, asker = await api.login("asker")
        _, eve = await api.login("eve")
        _, admin = await api.login("root", role=UserRole.ADMIN)
        question = await api.ask(asker)
        answer = await api.answer(question["id"], asker)
        body = {"content": "This answer was edited by someone else entirely."}

        # Act
        as_stranger = await api.client.put(
            f"/answers/{answer['id']}", json=body, headers=eve
        )
        as_admin = await api.client.put(
            f"/answers/{answer['id']}", json=body, headers=admin
        )

        # Assert
        assert as_stranger.status_code == 403
        assert as_stranger.json()["detail"] == "You can only edit your own answers"
        assert as_admin.status_code == 200

    @pytest.mark.asyncio
    async def test_short_content(self, api):
        """Content under 20 characters is 400."""
        # Arrange
        _, asker = await api.login("asker")
        question = await api.ask(asker)
        answer = await api.answer(question["id"], asker)

        # Act
        response = await api.client.put(
            f"/answers/{answer['id']}", json={"content": "short"}, headers=asker
        )

        # Assert
        assert response.status_code == 400
        assert response.json()["error"] == "ValidationError"

    @pytest.mark.asyncio
    async def test_delete(self, api):
        """Deleting removes the answer."""
        # Arrange
        _, asker = await api.login("asker")
        question = await api.ask(asker)
        answer = await api.answer(question["id"], asker)

        # Act
        response = await api.client.delete(f"/answers/{answer['id']}", headers=asker)

        # Assert
        assert response.status_code == 200
        assert response.json() == {"message": "Answer deleted successfully"}
        votes = await api.client.get(f"/answers/{answer['id']}/votes")
        assert votes.status_code == 404
