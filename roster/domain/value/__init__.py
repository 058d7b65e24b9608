"""Domain value objects for Roster."""

from roster.domain.value.identifiers import (
    AffiliateId,
    ClubId,
    UserId,
    VerificationCodeId,
)
from roster.domain.value.types import (
    AffiliateStatus,
    AffiliateType,
    Email,
    InviteKind,
    RefCode,
    UserStatus,
    UserType,
    VerificationPurpose,
    VerificationStatus,
)

__all__ = [
    # Identifiers
    "UserId",
    "ClubId",
    "AffiliateId",
    "VerificationCodeId",
    # Types
    "AffiliateStatus",
    "AffiliateType",
    "Email",
    "InviteKind",
    "RefCode",
    "UserStatus",
    "UserType",
    "VerificationPurpose",
    "VerificationStatus",
]
