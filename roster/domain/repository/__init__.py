"""Repository interfaces for Roster domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from roster.domain.repository.affiliate import AffiliateRepository
from roster.domain.repository.club import ClubRepository
from roster.domain.repository.onboarding import OnboardingRepository
from roster.domain.repository.transaction import TransactionManager, UnitOfWork
from roster.domain.repository.user import UserRepository
from roster.domain.repository.verification_code import VerificationCodeRepository

__all__ = [
    "AffiliateRepository",
    "ClubRepository",
    "OnboardingRepository",
    "TransactionManager",
    "UnitOfWork",
    "UserRepository",
    "VerificationCodeRepository",
]
