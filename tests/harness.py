"""Test harness for unit and integration tests.

Unit fixtures run entirely in memory. Integration fixtures expect a
migrated PostgreSQL reachable through DATABASE__URL.
"""

import pytest_asyncio

from qna.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a test container with the given
    components unmocked and yields a request-scoped container for service
    access. Everything resolved from one fixture shares one request scope,
    so services and repositories see the same data.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_cast_vote(unit_env):
            service = await unit_env.get(VoteService)
            result = await service.cast_vote(user_id, answer_id, "up")
            assert result.vote_count.up_votes == 1
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_container_fixture(unmock: set[Component] | None = None):
    """Factory for fixtures that yield the app-scoped container itself.

    Each ``async with container() as request:`` block is one request with
    its own session and transaction, committed when the block exits. Use
    this to run several requests side by side against the same database.

    Usage:
        app_env = create_container_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_parallel_requests(app_env):
            async with app_env() as request:
                service = await request.get(VoteService)
    """

    @pytest_asyncio.fixture
    async def _container():
        container = build_test_container(unmock=unmock or set())
        yield container
        await container.close()

    return _container
