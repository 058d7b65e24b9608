"""PostgreSQL implementation of VerificationCode repository."""

from typing import Optional

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from roster.domain.model import VerificationCode
from roster.domain.repository import VerificationCodeRepository
from roster.domain.value import Email, VerificationPurpose, VerificationStatus
from roster.persistence.mappers import (
    row_to_verification_code,
    verification_code_to_dict,
)
from roster.persistence.tables import verification_codes_table


class PostgresVerificationCodeRepository(VerificationCodeRepository):
    """PostgreSQL implementation of VerificationCodeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _active(self, email: Email, purpose: VerificationPurpose):
        return and_(
            verification_codes_table.c.email == email.root,
            verification_codes_table.c.purpose == purpose.value,
            verification_codes_table.c.status == VerificationStatus.ACTIVE.value,
        )

    async def find_active(
        self, email: Email, purpose: VerificationPurpose
    ) -> Optional[VerificationCode]:
        stmt = (
            select(verification_codes_table)
            .where(self._active(email, purpose))
            .order_by(verification_codes_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_verification_code(dict(row)) if row else None

    async def revoke_active(self, email: Email, purpose: VerificationPurpose) -> int:
        stmt = (
            update(verification_codes_table)
            .where(self._active(email, purpose))
            .values(status=VerificationStatus.REVOKED.value)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    async def save(self, code: VerificationCode) -> VerificationCode:
        code_dict = verification_code_to_dict(code)

        stmt = select(verification_codes_table.c.id).where(
            verification_codes_table.c.id == code.id
        )
        existing = (await self.session.execute(stmt)).first()

        if existing:
            stmt = (
                update(verification_codes_table)
                .where(verification_codes_table.c.id == code.id)
                .values(**code_dict)
            )
        else:
            stmt = insert(verification_codes_table).values(**code_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return code
