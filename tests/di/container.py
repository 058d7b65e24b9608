"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from roster.util.di import PROVIDERS, Component, get_provider
from roster.util.error import DependencyInjectionError


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build test container with selective unmocking.

    Settings are loaded from environment variables, as in production.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks.

    Returns:
        Configured test container

    Raises:
        DependencyInjectionError: If unknown components are requested

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Integration tests - real persistence, assumes postgres running
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        component_name = base.__mock_component__
        use_mock = component_name is not None and component_name not in unmock
        provider_instances.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(*provider_instances)


def _validate_unmock(unmock: set[Component]) -> None:
    """Reject component names no provider declares.

    Raises:
        DependencyInjectionError: If unknown components are requested
    """
    all_components = {
        p.__mock_component__ for p in PROVIDERS if p.__mock_component__ is not None
    }
    unknown = unmock - all_components
    if unknown:
        raise DependencyInjectionError(f"Unknown components: {sorted(unknown)}")
