"""Domain value objects for Roster.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from roster.domain.value.common import RootValueObject

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_REF_CODE_PATTERN = re.compile(r"^[A-Z0-9]{4,32}$")


class UserType(str, Enum):
    """Kind of account."""

    ADMIN = "admin"
    CLUB = "club"
    COMPANY = "company"
    PLAYER = "player"
    SUPPORTER = "supporter"


class UserStatus(str, Enum):
    """Account lifecycle status.

    Invited accounts stay pending until the invitee verifies their email.
    """

    PENDING = "pending"
    ACTIVE = "active"


class AffiliateType(str, Enum):
    """Kind of affiliate a club can invite."""

    PLAYER = "player"
    SUPPORTER = "supporter"
    COMPANY = "company"

    @property
    def user_type(self) -> UserType:
        """Account kind created for this affiliate type."""
        return UserType(self.value)


class AffiliateStatus(str, Enum):
    """Status of a club affiliation."""

    PENDING = "pending"
    ACTIVE = "active"


class VerificationPurpose(str, Enum):
    """Flow a verification code belongs to.

    A code issued for one purpose never verifies for another.
    """

    CLUB_INVITE = "club_invite"
    AFFILIATE_INVITE = "affiliate_invite"


class VerificationStatus(str, Enum):
    """Status of a verification code."""

    ACTIVE = "active"
    USED = "used"
    REVOKED = "revoked"
    EXPIRED = "expired"


class InviteKind(str, Enum):
    """Which invitation email an invited address receives."""

    CLUB = "club"
    PLAYER = "player"
    SUPPORTER = "supporter"
    COMPANY = "company"

    @classmethod
    def for_affiliate(cls, affiliate_type: AffiliateType) -> "InviteKind":
        """Invite kind matching an affiliate type."""
        return cls(affiliate_type.value)


class Email(RootValueObject[str]):
    """Email address used as the invitation key.

    Stored trimmed and lower-cased so lookups are case-insensitive.
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Trim and lower-case, then validate the address shape."""
        if not isinstance(v, str):
            raise ValueError("Email must be a string")
        normalized = v.strip().lower()
        if len(normalized) > 255:
            raise ValueError("Email must be at most 255 characters")
        if not _EMAIL_PATTERN.match(normalized):
            raise ValueError(f"Invalid email address: {v!r}")
        return normalized


class RefCode(RootValueObject[str]):
    """Short reference code identifying a club.

    Affiliates inherit the code of the club that invited them.
    """

    @field_validator("root")
    @classmethod
    def validate_ref_code(cls, v: str) -> str:
        """Validate ref code is uppercase alphanumeric."""
        if not _REF_CODE_PATTERN.match(v):
            raise ValueError("Reference code must be 4-32 uppercase letters or digits")
        return v
