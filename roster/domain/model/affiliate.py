"""Affiliate entity.

An affiliate links an invited account (player, supporter or company) to the
club that invited it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from roster.domain.model.common import DomainModel, utcnow
from roster.domain.value import (
    AffiliateId,
    AffiliateStatus,
    AffiliateType,
    ClubId,
    Email,
    RefCode,
    UserId,
)


class Affiliate(DomainModel):
    """Affiliate relation between an account and a club.

    Business rules:
    - One affiliate per email per club
    - Created PENDING and unapproved, unless an admin created it
    - Carries the inviting club's reference code
    """

    id: AffiliateId
    club_id: ClubId
    email: Email
    type: AffiliateType
    user_id: Optional[UserId] = None
    status: AffiliateStatus = AffiliateStatus.PENDING
    is_approved: bool = False
    by_admin: bool = False
    ref_code: RefCode
    created_at: datetime = Field(default_factory=utcnow)
