"""Test harness for DI-backed tests.

Unit tests run with every component mocked. Integration runs can unmock
``persistence`` against a running PostgreSQL (settings from environment).
"""

import pytest_asyncio

from roster.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a test container with the given
    components unmocked and yields a request-scoped container.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_invite_clubs(unit_env):
            use_case = await unit_env.get(InviteClubsUseCase)
            outcome = await use_case.execute(InviteClubsRequest(emails=[...]))
            assert outcome.skipped == []
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
