"""PostgreSQL implementation of Club repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from roster.domain.model import Club
from roster.domain.repository import ClubRepository
from roster.domain.value import ClubId, Email, RefCode, UserId
from roster.persistence.mappers import club_to_dict, row_to_club
from roster.persistence.tables import clubs_table, users_table


class PostgresClubRepository(ClubRepository):
    """PostgreSQL implementation of ClubRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, club_id: ClubId) -> Optional[Club]:
        stmt = select(clubs_table).where(clubs_table.c.id == club_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_club(dict(row)) if row else None

    async def find_by_user_id(self, user_id: UserId) -> Optional[Club]:
        stmt = select(clubs_table).where(clubs_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_club(dict(row)) if row else None

    async def find_existing_emails(self, emails: list[Email]) -> set[str]:
        """Return the subset of emails whose user owns a club.

        Single query joining clubs to their owning users.

        Args:
            emails: Candidate emails

        Returns:
            Matching emails
        """
        if not emails:
            return set()
        stmt = (
            select(users_table.c.email)
            .select_from(
                clubs_table.join(users_table, clubs_table.c.user_id == users_table.c.id)
            )
            .where(users_table.c.email.in_([email.root for email in emails]))
        )
        result = await self.session.execute(stmt)
        return set(result.scalars().all())

    async def exists_ref_code(self, ref_code: RefCode) -> bool:
        stmt = select(clubs_table.c.id).where(clubs_table.c.ref_code == ref_code.root)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def save(self, club: Club) -> Club:
        club_dict = club_to_dict(club)

        existing = await self.find_by_id(club.id)

        if existing:
            stmt = (
                update(clubs_table)
                .where(clubs_table.c.id == club.id)
                .values(**club_dict)
            )
        else:
            stmt = insert(clubs_table).values(**club_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return club
