"""Verification code repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from roster.domain.model.verification_code import VerificationCode
from roster.domain.value import Email, VerificationPurpose


class VerificationCodeRepository(ABC):
    """Repository for one-time verification codes."""

    @abstractmethod
    async def find_active(
        self, email: Email, purpose: VerificationPurpose
    ) -> Optional[VerificationCode]:
        """Find the active code for an email and purpose.

        Args:
            email: Email the code was sent to
            purpose: Flow the code belongs to

        Returns:
            The active code if any, None otherwise
        """
        pass

    @abstractmethod
    async def revoke_active(self, email: Email, purpose: VerificationPurpose) -> int:
        """Revoke every active code for an email and purpose.

        Args:
            email: Email the codes were sent to
            purpose: Flow the codes belong to

        Returns:
            Number of revoked codes
        """
        pass

    @abstractmethod
    async def save(self, code: VerificationCode) -> VerificationCode:
        """Save a code (create or update).

        Args:
            code: The code to save

        Returns:
            The saved code
        """
        pass
