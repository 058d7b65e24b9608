"""PostgreSQL repository implementations."""

from roster.persistence.repository.affiliate import PostgresAffiliateRepository
from roster.persistence.repository.club import PostgresClubRepository
from roster.persistence.repository.onboarding import PostgresOnboardingRepository
from roster.persistence.repository.transaction import PostgresTransactionManager
from roster.persistence.repository.user import PostgresUserRepository
from roster.persistence.repository.verification_code import (
    PostgresVerificationCodeRepository,
)

__all__ = [
    "PostgresAffiliateRepository",
    "PostgresClubRepository",
    "PostgresOnboardingRepository",
    "PostgresTransactionManager",
    "PostgresUserRepository",
    "PostgresVerificationCodeRepository",
]
