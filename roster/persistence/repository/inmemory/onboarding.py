"""In-memory onboarding repository for testing."""

from typing import Optional

from roster.domain.model import OnboardingProgress
from roster.domain.repository import OnboardingRepository
from roster.domain.value import UserId

from .store import InMemoryDatabase


class InMemoryOnboardingRepository(OnboardingRepository):
    """In-memory implementation of OnboardingRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self.db = db or InMemoryDatabase()

    async def find_by_user_id(self, user_id: UserId) -> Optional[OnboardingProgress]:
        return self.db.onboarding.get(user_id)

    async def save(self, progress: OnboardingProgress) -> OnboardingProgress:
        self.db.onboarding[progress.user_id] = progress
        return progress
