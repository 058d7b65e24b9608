"""PostgreSQL implementation of Onboarding repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from roster.domain.model import OnboardingProgress
from roster.domain.repository import OnboardingRepository
from roster.domain.value import UserId
from roster.persistence.mappers import onboarding_to_dict, row_to_onboarding
from roster.persistence.tables import onboarding_progress_table


class PostgresOnboardingRepository(OnboardingRepository):
    """PostgreSQL implementation of OnboardingRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_id(self, user_id: UserId) -> Optional[OnboardingProgress]:
        stmt = select(onboarding_progress_table).where(
            onboarding_progress_table.c.user_id == user_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_onboarding(dict(row)) if row else None

    async def save(self, progress: OnboardingProgress) -> OnboardingProgress:
        """Upsert the progress row of an account.

        Args:
            progress: Progress record to store

        Returns:
            Saved progress record
        """
        values = onboarding_to_dict(progress)
        stmt = insert(onboarding_progress_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[onboarding_progress_table.c.user_id],
            set_={
                "remaining_steps": stmt.excluded.remaining_steps,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return progress
