"""In-memory club repository for testing."""

from typing import Optional

from roster.domain.model import Club
from roster.domain.repository import ClubRepository
from roster.domain.value import ClubId, Email, RefCode, UserId

from .store import InMemoryDatabase


class InMemoryClubRepository(ClubRepository):
    """In-memory implementation of ClubRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self.db = db or InMemoryDatabase()

    async def find_by_id(self, club_id: ClubId) -> Optional[Club]:
        return self.db.clubs.get(club_id)

    async def find_by_user_id(self, user_id: UserId) -> Optional[Club]:
        for club in self.db.clubs.values():
            if club.user_id == user_id:
                return club
        return None

    async def find_existing_emails(self, emails: list[Email]) -> set[str]:
        """Emails whose user owns a club (joins clubs to users)."""
        wanted = {email.root for email in emails}
        owners = {club.user_id for club in self.db.clubs.values()}
        return {
            user.email.root
            for user in self.db.users.values()
            if user.id in owners and user.email.root in wanted
        }

    async def exists_ref_code(self, ref_code: RefCode) -> bool:
        return any(club.ref_code == ref_code for club in self.db.clubs.values())

    async def save(self, club: Club) -> Club:
        self.db.clubs[club.id] = club
        return club
