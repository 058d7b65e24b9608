"""Unit tests for VerificationCodeService."""

from datetime import timedelta

import pytest
from argon2 import PasswordHasher

from roster.config import InvitationSettings
from roster.domain.error import (
    InvalidVerificationCodeError,
    VerificationAttemptsExceededError,
    VerificationCodeError,
    VerificationCodeExpiredError,
)
from roster.domain.service import VerificationCodeService
from roster.domain.service.verification_service import generate_code
from roster.domain.value import Email, VerificationPurpose, VerificationStatus
from roster.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryTransactionManager,
)

EMAIL = Email("invitee@x.io")
PURPOSE = VerificationPurpose.CLUB_INVITE


def fast_hasher() -> PasswordHasher:
    return PasswordHasher(time_cost=1, memory_cost=8, parallelism=1)


class BrokenHasher(PasswordHasher):
    def hash(self, password, *, salt=None):
        raise RuntimeError("hasher unavailable")


def make_service(
    db: InMemoryDatabase, hasher: PasswordHasher | None = None, **settings
) -> VerificationCodeService:
    return VerificationCodeService(
        transaction_manager=InMemoryTransactionManager(db),
        settings=InvitationSettings(**settings),
        hasher=hasher or fast_hasher(),
    )


def wrong(code: str) -> str:
    """A six-digit code different from ``code``."""
    return "100000" if code != "100000" else "100001"


class TestGenerateCode:
    def test_six_digits_without_leading_zero(self):
        for _ in range(50):
            code = generate_code()
            assert len(code) == 6
            assert code.isdigit()
            assert code[0] != "0"


class TestIssue:
    """Tests for issue."""

    @pytest.mark.asyncio
    async def test_stores_only_a_hash(self):
        db = InMemoryDatabase()
        service = make_service(db, code_ttl_minutes=15, code_max_attempts=3)

        code = await service.issue(EMAIL, PURPOSE)

        [record] = db.verification_codes.values()
        assert record.hashed_code != code
        assert code not in record.hashed_code
        assert record.status == VerificationStatus.ACTIVE
        assert record.max_attempts == 3
        assert record.expires_at - record.created_at == timedelta(minutes=15)

    @pytest.mark.asyncio
    async def test_revokes_previous_active_code(self):
        db = InMemoryDatabase()
        service = make_service(db)

        await service.issue(EMAIL, PURPOSE)
        second = await service.issue(EMAIL, PURPOSE)

        statuses = sorted(c.status.value for c in db.verification_codes.values())
        assert statuses == ["active", "revoked"]
        record = await service.verify(EMAIL, second, PURPOSE)
        assert record.status == VerificationStatus.USED

    @pytest.mark.asyncio
    async def test_other_purpose_is_left_alone(self):
        db = InMemoryDatabase()
        service = make_service(db)

        await service.issue(EMAIL, VerificationPurpose.AFFILIATE_INVITE)
        await service.issue(EMAIL, VerificationPurpose.CLUB_INVITE)

        assert all(
            c.status == VerificationStatus.ACTIVE
            for c in db.verification_codes.values()
        )

    @pytest.mark.asyncio
    async def test_storage_failure_raises_verification_code_error(self):
        db = InMemoryDatabase()
        service = make_service(db, hasher=BrokenHasher())

        with pytest.raises(VerificationCodeError, match="hasher unavailable"):
            await service.issue(EMAIL, PURPOSE)

        assert db.verification_codes == {}


class TestVerify:
    """Tests for verify."""

    @pytest.mark.asyncio
    async def test_correct_code_is_marked_used(self):
        db = InMemoryDatabase()
        service = make_service(db)
        code = await service.issue(EMAIL, PURPOSE)

        record = await service.verify(EMAIL, code, PURPOSE)

        assert record.status == VerificationStatus.USED
        assert db.verification_codes[record.id].status == VerificationStatus.USED

    @pytest.mark.asyncio
    async def test_code_cannot_be_used_twice(self):
        db = InMemoryDatabase()
        service = make_service(db)
        code = await service.issue(EMAIL, PURPOSE)
        await service.verify(EMAIL, code, PURPOSE)

        with pytest.raises(InvalidVerificationCodeError, match="not found"):
            await service.verify(EMAIL, code, PURPOSE)

    @pytest.mark.asyncio
    async def test_wrong_guess_is_counted(self):
        """The attempt counter is committed even though verify fails."""
        db = InMemoryDatabase()
        service = make_service(db)
        code = await service.issue(EMAIL, PURPOSE)

        with pytest.raises(InvalidVerificationCodeError):
            await service.verify(EMAIL, wrong(code), PURPOSE)

        [record] = db.verification_codes.values()
        assert record.attempts == 1
        assert record.last_attempt_at is not None
        assert record.status == VerificationStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_attempts_exhausted_blocks_correct_code(self):
        db = InMemoryDatabase()
        service = make_service(db, code_max_attempts=2)
        code = await service.issue(EMAIL, PURPOSE)
        for _ in range(2):
            with pytest.raises(InvalidVerificationCodeError):
                await service.verify(EMAIL, wrong(code), PURPOSE)

        with pytest.raises(VerificationAttemptsExceededError):
            await service.verify(EMAIL, code, PURPOSE)

    @pytest.mark.asyncio
    async def test_expired_code_is_rejected_and_marked(self):
        db = InMemoryDatabase()
        service = make_service(db)
        code = await service.issue(EMAIL, PURPOSE)
        [record] = db.verification_codes.values()
        db.verification_codes[record.id] = record.model_copy(
            update={"expires_at": record.created_at - timedelta(seconds=1)}
        )

        with pytest.raises(VerificationCodeExpiredError):
            await service.verify(EMAIL, code, PURPOSE)

        assert db.verification_codes[record.id].status == VerificationStatus.EXPIRED

    @pytest.mark.asyncio
    async def test_purpose_must_match(self):
        db = InMemoryDatabase()
        service = make_service(db)
        code = await service.issue(EMAIL, VerificationPurpose.CLUB_INVITE)

        with pytest.raises(InvalidVerificationCodeError):
            await service.verify(EMAIL, code, VerificationPurpose.AFFILIATE_INVITE)
