"""Club domain service."""

import logfire

from roster.domain.error import NotFoundError
from roster.domain.model.affiliate import Affiliate
from roster.domain.model.club import Club
from roster.domain.repository import (
    AffiliateRepository,
    ClubRepository,
    UserRepository,
)
from roster.domain.value import AffiliateId, ClubId, UserId

from .base import Service

DEFAULT_CLUB_NAME = "Club"


class ClubService(Service):
    """Lookups of clubs and their affiliates."""

    def __init__(
        self,
        club_repository: ClubRepository,
        user_repository: UserRepository,
        affiliate_repository: AffiliateRepository,
    ) -> None:
        """Initialize club service.

        Args:
            club_repository: Club repository
            user_repository: User repository (club owners)
            affiliate_repository: Affiliate repository
        """
        self.club_repository = club_repository
        self.user_repository = user_repository
        self.affiliate_repository = affiliate_repository

    async def get_club(self, club_id: ClubId) -> Club:
        """Get a club by ID.

        Raises:
            NotFoundError: If the club does not exist
        """
        club = await self.club_repository.find_by_id(club_id)
        if club is None:
            logfire.warn("Club not found", club_id=str(club_id))
            raise NotFoundError("Club", str(club_id))
        return club

    async def get_club_by_owner(self, user_id: UserId) -> Club:
        """Get the club owned by an account.

        Raises:
            NotFoundError: If the account owns no club
        """
        club = await self.club_repository.find_by_user_id(user_id)
        if club is None:
            logfire.warn("Club not found for owner", user_id=str(user_id))
            raise NotFoundError("Club", str(user_id))
        return club

    async def get_display_name(self, club: Club) -> str:
        """Name shown to invitees, taken from the club owner's account."""
        owner = await self.user_repository.find_by_id(club.user_id)
        if owner is None or not owner.name:
            return DEFAULT_CLUB_NAME
        return owner.name

    async def get_affiliate(self, affiliate_id: AffiliateId) -> Affiliate:
        """Get an affiliate by ID.

        Raises:
            NotFoundError: If the affiliate does not exist
        """
        affiliate = await self.affiliate_repository.find_by_id(affiliate_id)
        if affiliate is None:
            logfire.warn("Invite not found", affiliate_id=str(affiliate_id))
            raise NotFoundError("Invite", str(affiliate_id))
        return affiliate
