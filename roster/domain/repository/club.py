"""Club repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from roster.domain.model.club import Club
from roster.domain.value import ClubId, Email, RefCode, UserId


class ClubRepository(ABC):
    """Repository for Club profiles."""

    @abstractmethod
    async def find_by_id(self, club_id: ClubId) -> Optional[Club]:
        """Find a club by ID.

        Args:
            club_id: The club's unique identifier

        Returns:
            The club if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: UserId) -> Optional[Club]:
        """Find the club profile owned by a user.

        Args:
            user_id: The owning user's ID

        Returns:
            The club if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_existing_emails(self, emails: list[Email]) -> set[str]:
        """Return the subset of emails whose user already has a club profile.

        Args:
            emails: Candidate emails

        Returns:
            Matching emails as plain strings
        """
        pass

    @abstractmethod
    async def exists_ref_code(self, ref_code: RefCode) -> bool:
        """Check whether a reference code is already taken.

        Args:
            ref_code: Reference code to check

        Returns:
            True if a club uses this code
        """
        pass

    @abstractmethod
    async def save(self, club: Club) -> Club:
        """Save a club (create or update).

        Args:
            club: The club to save

        Returns:
            The saved club
        """
        pass
