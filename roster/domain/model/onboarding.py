"""Onboarding progress.

Each account has a set of numbered setup steps still to complete. The set
only ever shrinks; an empty set means onboarding is finished.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from roster.domain.model.common import DomainModel, utcnow
from roster.domain.value import UserId, UserType

DEFAULT_ONBOARDING_STEPS: dict[UserType, frozenset[int]] = {
    UserType.ADMIN: frozenset(),
    UserType.CLUB: frozenset({1, 2}),
    UserType.COMPANY: frozenset({1}),
    UserType.PLAYER: frozenset({1, 2, 3}),
    UserType.SUPPORTER: frozenset({1, 2, 3}),
}


class OnboardingProgress(DomainModel):
    """Remaining onboarding steps of one account (the persisted state)."""

    user_id: UserId
    remaining_steps: frozenset[int]
    updated_at: datetime = Field(default_factory=utcnow)

    @classmethod
    def initial(cls, user_id: UserId, user_type: UserType) -> "OnboardingProgress":
        """Fresh progress record with the default steps for an account kind."""
        return cls(
            user_id=user_id, remaining_steps=DEFAULT_ONBOARDING_STEPS[user_type]
        )


class OnboardingTransition(DomainModel):
    """Result of completing one onboarding step.

    ``is_complete`` and ``next_step`` are derived from ``remaining_steps``
    and never stored.
    """

    remaining_steps: list[int]  # ascending
    completed_step: int
    is_complete: bool
    next_step: Optional[int] = None
