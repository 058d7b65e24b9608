"""Unit tests for provider selection and the test container."""

import pytest

from roster.adapter.email import MockEmailClient
from roster.application.usecase.invite import (
    AcceptInviteUseCase,
    DeclineInviteUseCase,
    InviteAffiliatesUseCase,
    InviteClubsUseCase,
    InviteCompaniesUseCase,
    ResendInviteUseCase,
)
from roster.application.usecase.onboarding import CompleteOnboardingStepUseCase
from roster.domain.repository import TransactionManager
from roster.domain.service import EmailClient
from roster.persistence.repository.inmemory import InMemoryTransactionManager
from roster.util.di import (
    EmailProvider,
    PersistenceProvider,
    ProdConfigProvider,
    ProdEmailProvider,
    get_provider,
)
from roster.util.di.base import ProviderBase
from roster.util.error import DependencyInjectionError
from tests.di import MockEmailProvider, MockPersistenceProvider, build_test_container
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class OrphanProvider(ProviderBase):
    __mock_component__ = "email"


class OrphanProdProvider(OrphanProvider):
    __is_mock__ = False


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_is_used_as_is(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_selects_by_mock_flag(self):
        assert get_provider(EmailProvider, use_mock=False) is ProdEmailProvider
        assert get_provider(EmailProvider, use_mock=True) is MockEmailProvider
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider

    def test_missing_implementation_raises(self):
        with pytest.raises(DependencyInjectionError, match="No mock implementation"):
            get_provider(OrphanProvider, use_mock=True)


class TestBuildTestContainer:
    def test_unknown_component_is_rejected(self):
        with pytest.raises(DependencyInjectionError, match="Unknown components"):
            build_test_container(unmock={"sms"})

    @pytest.mark.asyncio
    async def test_every_use_case_resolves(self, unit_env):
        for use_case in (
            InviteClubsUseCase,
            InviteAffiliatesUseCase,
            InviteCompaniesUseCase,
            ResendInviteUseCase,
            DeclineInviteUseCase,
            AcceptInviteUseCase,
            CompleteOnboardingStepUseCase,
        ):
            assert isinstance(await unit_env.get(use_case), use_case)

    @pytest.mark.asyncio
    async def test_mock_components_are_wired(self, unit_env):
        assert isinstance(
            await unit_env.get(TransactionManager), InMemoryTransactionManager
        )
        assert isinstance(await unit_env.get(EmailClient), MockEmailClient)
