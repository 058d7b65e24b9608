"""In-memory affiliate repository for testing."""

from typing import Optional

from roster.domain.model import Affiliate
from roster.domain.repository import AffiliateRepository
from roster.domain.value import AffiliateId, ClubId, Email

from .store import InMemoryDatabase


class InMemoryAffiliateRepository(AffiliateRepository):
    """In-memory implementation of AffiliateRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self.db = db or InMemoryDatabase()

    async def find_by_id(self, affiliate_id: AffiliateId) -> Optional[Affiliate]:
        return self.db.affiliates.get(affiliate_id)

    async def find_existing_emails(
        self, emails: list[Email], club_id: ClubId
    ) -> set[str]:
        wanted = {email.root for email in emails}
        return {
            affiliate.email.root
            for affiliate in self.db.affiliates.values()
            if affiliate.club_id == club_id and affiliate.email.root in wanted
        }

    async def save(self, affiliate: Affiliate) -> Affiliate:
        self.db.affiliates[affiliate.id] = affiliate
        return affiliate

    async def delete(self, affiliate_id: AffiliateId) -> None:
        self.db.affiliates.pop(affiliate_id, None)
