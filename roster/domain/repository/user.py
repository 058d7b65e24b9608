"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from roster.domain.model.user import User
from roster.domain.value import Email, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email.

        Args:
            email: Normalized email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_existing_emails(self, emails: list[Email]) -> set[str]:
        """Return the subset of emails that already belong to a user.

        One round trip regardless of how many emails are passed.

        Args:
            emails: Candidate emails

        Returns:
            Matching emails as plain strings
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            IntegrityError: If another user already has this email
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> None:
        """Delete a user.

        Args:
            user_id: The user's unique identifier
        """
        pass
