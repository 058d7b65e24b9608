"""Affiliate repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from roster.domain.model.affiliate import Affiliate
from roster.domain.value import AffiliateId, ClubId, Email


class AffiliateRepository(ABC):
    """Repository for club affiliates."""

    @abstractmethod
    async def find_by_id(self, affiliate_id: AffiliateId) -> Optional[Affiliate]:
        """Find an affiliate by ID.

        Args:
            affiliate_id: The affiliate's unique identifier

        Returns:
            The affiliate if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_existing_emails(
        self, emails: list[Email], club_id: ClubId
    ) -> set[str]:
        """Return the subset of emails already affiliated with a club.

        Args:
            emails: Candidate emails
            club_id: Club the affiliation is scoped to

        Returns:
            Matching emails as plain strings
        """
        pass

    @abstractmethod
    async def save(self, affiliate: Affiliate) -> Affiliate:
        """Save an affiliate (create or update).

        Args:
            affiliate: The affiliate to save

        Returns:
            The saved affiliate
        """
        pass

    @abstractmethod
    async def delete(self, affiliate_id: AffiliateId) -> None:
        """Delete an affiliate.

        Args:
            affiliate_id: The affiliate's unique identifier
        """
        pass
