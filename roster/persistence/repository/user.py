"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from roster.domain.model import User
from roster.domain.repository import UserRepository
from roster.domain.value import Email, UserId
from roster.persistence.mappers import row_to_user, user_to_dict
from roster.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        stmt = select(users_table).where(users_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_existing_emails(self, emails: list[Email]) -> set[str]:
        """Return the subset of emails that already belong to a user.

        Args:
            emails: Candidate emails

        Returns:
            Matching emails
        """
        if not emails:
            return set()
        stmt = select(users_table.c.email).where(
            users_table.c.email.in_([email.root for email in emails])
        )
        result = await self.session.execute(stmt)
        return set(result.scalars().all())

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        user_dict = user_to_dict(user)

        existing = await self.find_by_id(user.id)

        if existing:
            stmt = (
                update(users_table)
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = insert(users_table).values(**user_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return user

    async def delete(self, user_id: UserId) -> None:
        stmt = delete(users_table).where(users_table.c.id == user_id)
        await self.session.execute(stmt)
        await self.session.flush()
