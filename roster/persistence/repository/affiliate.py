"""PostgreSQL implementation of Affiliate repository."""

from typing import Optional

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from roster.domain.model import Affiliate
from roster.domain.repository import AffiliateRepository
from roster.domain.value import AffiliateId, ClubId, Email
from roster.persistence.mappers import affiliate_to_dict, row_to_affiliate
from roster.persistence.tables import affiliates_table


class PostgresAffiliateRepository(AffiliateRepository):
    """PostgreSQL implementation of AffiliateRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, affiliate_id: AffiliateId) -> Optional[Affiliate]:
        stmt = select(affiliates_table).where(affiliates_table.c.id == affiliate_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_affiliate(dict(row)) if row else None

    async def find_existing_emails(
        self, emails: list[Email], club_id: ClubId
    ) -> set[str]:
        """Return the subset of emails already affiliated with a club.

        Uses index idx_affiliates_club_email.

        Args:
            emails: Candidate emails
            club_id: Club the affiliation is scoped to

        Returns:
            Matching emails
        """
        if not emails:
            return set()
        stmt = select(affiliates_table.c.email).where(
            and_(
                affiliates_table.c.club_id == club_id,
                affiliates_table.c.email.in_([email.root for email in emails]),
            )
        )
        result = await self.session.execute(stmt)
        return set(result.scalars().all())

    async def save(self, affiliate: Affiliate) -> Affiliate:
        affiliate_dict = affiliate_to_dict(affiliate)

        existing = await self.find_by_id(affiliate.id)

        if existing:
            stmt = (
                update(affiliates_table)
                .where(affiliates_table.c.id == affiliate.id)
                .values(**affiliate_dict)
            )
        else:
            stmt = insert(affiliates_table).values(**affiliate_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return affiliate

    async def delete(self, affiliate_id: AffiliateId) -> None:
        stmt = delete(affiliates_table).where(affiliates_table.c.id == affiliate_id)
        await self.session.execute(stmt)
        await self.session.flush()
