"""Verification code entity.

One-time codes prove control of an email address when an invitee accepts an
invitation. Only a hash of the code is stored.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from roster.domain.model.common import DomainModel, utcnow
from roster.domain.value import (
    AffiliateId,
    Email,
    UserId,
    VerificationCodeId,
    VerificationPurpose,
    VerificationStatus,
)


class VerificationCode(DomainModel):
    """Hashed one-time code bound to an email and a purpose.

    Business rules:
    - At most one ACTIVE code per (email, purpose)
    - Expired, used or revoked codes never verify
    """

    id: VerificationCodeId
    email: Email
    purpose: VerificationPurpose
    hashed_code: str
    expires_at: datetime
    user_id: Optional[UserId] = None
    affiliate_id: Optional[AffiliateId] = None
    status: VerificationStatus = VerificationStatus.ACTIVE
    attempts: int = Field(default=0, ge=0)
    max_attempts: int = Field(default=5, ge=1)
    last_attempt_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)

    def is_expired(self, now: datetime) -> bool:
        """Whether the code's lifetime has passed at ``now``."""
        return now > self.expires_at
