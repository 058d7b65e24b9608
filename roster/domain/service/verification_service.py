"""One-time verification code service."""

import asyncio
import secrets
from datetime import timedelta
from uuid import uuid4

import logfire
from argon2 import PasswordHasher
from argon2.exceptions import VerificationError

from roster.config import InvitationSettings
from roster.domain.error import (
    DomainError,
    InvalidVerificationCodeError,
    VerificationAttemptsExceededError,
    VerificationCodeError,
    VerificationCodeExpiredError,
)
from roster.domain.model.common import utcnow
from roster.domain.model.verification_code import VerificationCode
from roster.domain.repository import TransactionManager
from roster.domain.value import (
    AffiliateId,
    Email,
    UserId,
    VerificationCodeId,
    VerificationPurpose,
    VerificationStatus,
)

from .base import Service

CODE_LENGTH = 6


def generate_code(length: int = CODE_LENGTH) -> str:
    """Random numeric code without a leading zero."""
    return str(secrets.randbelow(9 * 10 ** (length - 1)) + 10 ** (length - 1))


class VerificationCodeService(Service):
    """Issues and checks one-time codes sent with invitations.

    Plain codes leave this service only as the return value of ``issue``;
    storage keeps an argon2 hash. Every issue and verify runs in its own
    transaction.
    """

    def __init__(
        self,
        transaction_manager: TransactionManager,
        settings: InvitationSettings,
        hasher: PasswordHasher | None = None,
    ) -> None:
        """Initialize verification code service.

        Args:
            transaction_manager: Opens one transaction per issue/verify
            settings: Invitation settings (code lifetime and attempt limit)
            hasher: argon2 hasher, defaults to library parameters
        """
        self.transaction_manager = transaction_manager
        self.settings = settings
        self.hasher = hasher or PasswordHasher()

    async def issue(
        self,
        email: Email,
        purpose: VerificationPurpose,
        user_id: UserId | None = None,
        affiliate_id: AffiliateId | None = None,
    ) -> str:
        """Issue a fresh code, revoking any other active one.

        Args:
            email: Email the code will be sent to
            purpose: Flow the code is valid for
            user_id: Account the code belongs to, if any
            affiliate_id: Affiliate invite the code belongs to, if any

        Returns:
            The plain code, to be sent to the invitee

        Raises:
            VerificationCodeError: If the code cannot be stored
        """
        with logfire.span(
            "verification_service.issue",
            email=email.root,
            purpose=purpose.value,
        ):
            code = generate_code()
            try:
                hashed = await asyncio.to_thread(self.hasher.hash, code)
                now = utcnow()
                record = VerificationCode(
                    id=VerificationCodeId(uuid4()),
                    email=email,
                    purpose=purpose,
                    hashed_code=hashed,
                    expires_at=now + timedelta(minutes=self.settings.code_ttl_minutes),
                    user_id=user_id,
                    affiliate_id=affiliate_id,
                    max_attempts=self.settings.code_max_attempts,
                    created_at=now,
                )
                async with self.transaction_manager.transaction() as uow:
                    revoked = await uow.verification_codes.revoke_active(email, purpose)
                    await uow.verification_codes.save(record)
            except Exception as e:
                logfire.error(
                    "Failed to issue verification code",
                    email=email.root,
                    purpose=purpose.value,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise VerificationCodeError(email.root, str(e)) from e

            logfire.info(
                "Verification code issued",
                code_id=str(record.id),
                email=email.root,
                purpose=purpose.value,
                revoked=revoked,
            )
            return code

    async def verify(
        self, email: Email, code: str, purpose: VerificationPurpose
    ) -> VerificationCode:
        """Check a code and mark it used.

        A wrong guess is counted even though the call fails, so the attempt
        update is committed before the error is raised.

        Args:
            email: Email the code was sent to
            code: Code entered by the invitee
            purpose: Flow the code must have been issued for

        Returns:
            The used code record

        Raises:
            InvalidVerificationCodeError: If no active code exists or it does not match
            VerificationCodeExpiredError: If the code has expired
            VerificationAttemptsExceededError: If too many wrong guesses were made
        """
        with logfire.span(
            "verification_service.verify",
            email=email.root,
            purpose=purpose.value,
        ):
            failure: DomainError | None = None
            now = utcnow()

            async with self.transaction_manager.transaction() as uow:
                record = await uow.verification_codes.find_active(email, purpose)

                if record is None:
                    failure = InvalidVerificationCodeError(
                        "Verification code not found or already used"
                    )
                elif record.is_expired(now):
                    await uow.verification_codes.save(
                        record.model_copy(update={"status": VerificationStatus.EXPIRED})
                    )
                    failure = VerificationCodeExpiredError()
                elif record.attempts >= record.max_attempts:
                    failure = VerificationAttemptsExceededError()
                elif not await self._matches(record.hashed_code, code):
                    await uow.verification_codes.save(
                        record.model_copy(
                            update={
                                "attempts": record.attempts + 1,
                                "last_attempt_at": now,
                            }
                        )
                    )
                    failure = InvalidVerificationCodeError()
                else:
                    record = await uow.verification_codes.save(
                        record.model_copy(update={"status": VerificationStatus.USED})
                    )

            if failure is not None:
                logfire.warn(
                    "Verification failed",
                    email=email.root,
                    purpose=purpose.value,
                    reason=str(failure),
                )
                raise failure

            logfire.info(
                "Verification code accepted",
                code_id=str(record.id),
                email=email.root,
                purpose=purpose.value,
            )
            return record

    async def _matches(self, hashed_code: str, code: str) -> bool:
        try:
            return await asyncio.to_thread(self.hasher.verify, hashed_code, code)
        except VerificationError:
            return False
