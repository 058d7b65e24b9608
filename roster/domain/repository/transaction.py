"""Transaction boundary interface.

Multi-record writes that must succeed or fail together (an invited user and
its club or affiliate record) run inside ``TransactionManager.transaction()``.
Each call opens its own transaction, so concurrent invites never share one.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass

from roster.domain.repository.affiliate import AffiliateRepository
from roster.domain.repository.club import ClubRepository
from roster.domain.repository.onboarding import OnboardingRepository
from roster.domain.repository.user import UserRepository
from roster.domain.repository.verification_code import VerificationCodeRepository


@dataclass(frozen=True)
class UnitOfWork:
    """Repositories bound to a single open transaction."""

    users: UserRepository
    clubs: ClubRepository
    affiliates: AffiliateRepository
    onboarding: OnboardingRepository
    verification_codes: VerificationCodeRepository


class TransactionManager(ABC):
    """Opens atomic units of work."""

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[UnitOfWork]:
        """Open a transaction.

        Commits when the block exits normally and rolls back when it raises;
        the exception is re-raised either way.

        Usage:
            async with transaction_manager.transaction() as uow:
                await uow.users.save(user)
                await uow.clubs.save(club)
        """
        pass
