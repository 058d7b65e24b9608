"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from roster.config import Settings
from roster.domain.repository import (
    AffiliateRepository,
    ClubRepository,
    OnboardingRepository,
    TransactionManager,
    UserRepository,
    VerificationCodeRepository,
)
from roster.persistence.database import create_engine, create_session_factory
from roster.persistence.repository import (
    PostgresAffiliateRepository,
    PostgresClubRepository,
    PostgresOnboardingRepository,
    PostgresTransactionManager,
    PostgresUserRepository,
    PostgresVerificationCodeRepository,
)
from roster.util.di.base import ProviderBase
from roster.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.APP)
    def get_transaction_manager(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> TransactionManager:
        """Provide transaction manager (one session per transaction)."""
        return PostgresTransactionManager(session_factory)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Committed at the end of the request if no exception occurred,
        rolled back otherwise.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_club_repository(self, session: AsyncSession) -> ClubRepository:
        return PostgresClubRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_affiliate_repository(self, session: AsyncSession) -> AffiliateRepository:
        return PostgresAffiliateRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_onboarding_repository(self, session: AsyncSession) -> OnboardingRepository:
        return PostgresOnboardingRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_verification_code_repository(
        self, session: AsyncSession
    ) -> VerificationCodeRepository:
        return PostgresVerificationCodeRepository(session)
