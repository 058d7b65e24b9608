"""Club profile entity."""

from datetime import datetime

from pydantic import Field

from roster.domain.model.common import DomainModel, utcnow
from roster.domain.value import ClubId, RefCode, UserId


class Club(DomainModel):
    """Club profile attached to a CLUB user.

    The reference code identifies the club publicly and is copied onto every
    affiliate the club invites.
    """

    id: ClubId
    user_id: UserId
    ref_code: RefCode
    created_at: datetime = Field(default_factory=utcnow)
