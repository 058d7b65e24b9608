"""In-memory verification code repository for testing."""

from typing import Optional

from roster.domain.model import VerificationCode
from roster.domain.repository import VerificationCodeRepository
from roster.domain.value import Email, VerificationPurpose, VerificationStatus

from .store import InMemoryDatabase


class InMemoryVerificationCodeRepository(VerificationCodeRepository):
    """In-memory implementation of VerificationCodeRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self.db = db or InMemoryDatabase()

    def _active(
        self, email: Email, purpose: VerificationPurpose
    ) -> list[VerificationCode]:
        return [
            code
            for code in self.db.verification_codes.values()
            if code.email == email
            and code.purpose == purpose
            and code.status == VerificationStatus.ACTIVE
        ]

    async def find_active(
        self, email: Email, purpose: VerificationPurpose
    ) -> Optional[VerificationCode]:
        active = self._active(email, purpose)
        if not active:
            return None
        return max(active, key=lambda code: code.created_at)

    async def revoke_active(self, email: Email, purpose: VerificationPurpose) -> int:
        active = self._active(email, purpose)
        for code in active:
            self.db.verification_codes[code.id] = code.model_copy(
                update={"status": VerificationStatus.REVOKED}
            )
        return len(active)

    async def save(self, code: VerificationCode) -> VerificationCode:
        self.db.verification_codes[code.id] = code
        return code
