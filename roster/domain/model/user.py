"""User aggregate root.

Every person or organization that can log in is a User. Invited users are
created pending and become active once they verify their email.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from roster.domain.model.common import DomainModel, utcnow
from roster.domain.value import Email, UserId, UserStatus, UserType


class User(DomainModel):
    """User aggregate root.

    Business rules:
    - Email is unique across all users
    - Users created by an invitation start as PENDING
    """

    id: UserId
    email: Email
    user_type: UserType
    status: UserStatus = UserStatus.PENDING
    name: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
