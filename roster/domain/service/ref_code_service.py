"""Club reference code generation."""

import secrets
import string

import logfire

from roster.config import InvitationSettings
from roster.domain.error import RefCodeExhaustedError
from roster.domain.repository import ClubRepository
from roster.domain.value import RefCode

from .base import Service

REF_CODE_ALPHABET = string.ascii_uppercase + string.digits


class RefCodeService(Service):
    """Draws reference codes not yet used by any club."""

    def __init__(self, settings: InvitationSettings) -> None:
        """Initialize ref code service.

        Args:
            settings: Invitation settings (code length and retry budget)
        """
        self.settings = settings

    def draw(self) -> RefCode:
        """Draw a random code without checking uniqueness."""
        return RefCode(
            "".join(
                secrets.choice(REF_CODE_ALPHABET)
                for _ in range(self.settings.ref_code_length)
            )
        )

    async def generate_unique(self, clubs: ClubRepository) -> RefCode:
        """Draw a code that no club uses yet.

        Args:
            clubs: Club repository to check against, usually the one bound
                to the transaction that will store the club

        Returns:
            Unused reference code

        Raises:
            RefCodeExhaustedError: If every attempt collided
        """
        for attempt in range(1, self.settings.ref_code_max_attempts + 1):
            ref_code = self.draw()
            if not await clubs.exists_ref_code(ref_code):
                return ref_code
            logfire.warn("Reference code collision", attempt=attempt)

        logfire.error(
            "Reference code attempts exhausted",
            attempts=self.settings.ref_code_max_attempts,
        )
        raise RefCodeExhaustedError(self.settings.ref_code_max_attempts)
