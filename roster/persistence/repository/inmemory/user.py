"""In-memory user repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from roster.domain.model import User
from roster.domain.repository import UserRepository
from roster.domain.value import Email, UserId

from .store import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self.db = db or InMemoryDatabase()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self.db.users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        for user in self.db.users.values():
            if user.email == email:
                return user
        return None

    async def find_existing_emails(self, emails: list[Email]) -> set[str]:
        wanted = {email.root for email in emails}
        return {user.email.root for user in self.db.users.values()} & wanted

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Raises:
            IntegrityError: If another user already has this email
        """
        existing = await self.find_by_email(user.email)
        if existing is not None and existing.id != user.id:
            raise IntegrityError(
                "duplicate key value violates unique constraint uq_users_email",
                None,
                Exception(),
            )
        self.db.users[user.id] = user
        return user

    async def delete(self, user_id: UserId) -> None:
        self.db.users.pop(user_id, None)
