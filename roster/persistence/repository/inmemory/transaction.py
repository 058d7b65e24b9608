"""In-memory transaction manager for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from roster.domain.repository import TransactionManager, UnitOfWork

from .affiliate import InMemoryAffiliateRepository
from .club import InMemoryClubRepository
from .onboarding import InMemoryOnboardingRepository
from .store import InMemoryDatabase
from .user import InMemoryUserRepository
from .verification_code import InMemoryVerificationCodeRepository


class InMemoryTransactionManager(TransactionManager):
    """Transaction manager over an InMemoryDatabase.

    Writes go to a snapshot and reach the shared tables only when the block
    exits without an exception.
    """

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self.db = db or InMemoryDatabase()
        self.committed = 0
        self.rolled_back = 0

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[UnitOfWork]:
        start = self.db.snapshot()
        staged = start.snapshot()
        try:
            yield UnitOfWork(
                users=InMemoryUserRepository(staged),
                clubs=InMemoryClubRepository(staged),
                affiliates=InMemoryAffiliateRepository(staged),
                onboarding=InMemoryOnboardingRepository(staged),
                verification_codes=InMemoryVerificationCodeRepository(staged),
            )
            self.db.apply(start, staged)
        except BaseException:
            self.rolled_back += 1
            raise
        self.committed += 1
