"""In-memory repository implementations for testing."""

from .affiliate import InMemoryAffiliateRepository
from .club import InMemoryClubRepository
from .onboarding import InMemoryOnboardingRepository
from .store import InMemoryDatabase
from .transaction import InMemoryTransactionManager
from .user import InMemoryUserRepository
from .verification_code import InMemoryVerificationCodeRepository

__all__ = [
    "InMemoryAffiliateRepository",
    "InMemoryClubRepository",
    "InMemoryDatabase",
    "InMemoryOnboardingRepository",
    "InMemoryTransactionManager",
    "InMemoryUserRepository",
    "InMemoryVerificationCodeRepository",
]
