"""PostgreSQL transaction manager."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from roster.domain.repository import TransactionManager, UnitOfWork
from roster.persistence.repository.affiliate import PostgresAffiliateRepository
from roster.persistence.repository.club import PostgresClubRepository
from roster.persistence.repository.onboarding import PostgresOnboardingRepository
from roster.persistence.repository.user import PostgresUserRepository
from roster.persistence.repository.verification_code import (
    PostgresVerificationCodeRepository,
)


class PostgresTransactionManager(TransactionManager):
    """Opens a fresh session and transaction per unit of work.

    Sessions are not shared with the request session or with each other,
    so concurrent invites of one batch run in separate transactions.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize transaction manager.

        Args:
            session_factory: Factory for new database sessions
        """
        self.session_factory = session_factory

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[UnitOfWork]:
        async with self.session_factory() as session:
            try:
                async with session.begin():
                    yield UnitOfWork(
                        users=PostgresUserRepository(session),
                        clubs=PostgresClubRepository(session),
                        affiliates=PostgresAffiliateRepository(session),
                        onboarding=PostgresOnboardingRepository(session),
                        verification_codes=PostgresVerificationCodeRepository(session),
                    )
            except Exception as e:
                logfire.warn(
                    "Transaction rolled back",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise
