"""Onboarding progress repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from roster.domain.model.onboarding import OnboardingProgress
from roster.domain.value import UserId


class OnboardingRepository(ABC):
    """Repository for per-account onboarding progress."""

    @abstractmethod
    async def find_by_user_id(self, user_id: UserId) -> Optional[OnboardingProgress]:
        """Load the remaining onboarding steps of an account.

        Args:
            user_id: The account's ID

        Returns:
            The progress record if the account has one, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, progress: OnboardingProgress) -> OnboardingProgress:
        """Persist the remaining onboarding steps of an account.

        Args:
            progress: Progress record to store

        Returns:
            The saved progress record
        """
        pass
