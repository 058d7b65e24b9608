"""Bulk invitation runner.

Turns a classified batch into a ``BatchOutcome``: ineligible emails are
skipped straight away, every eligible email runs as its own task, and each
task settles into ``Processed`` or ``Skipped``. One email's failure never
affects another's.
"""

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable

import logfire

from roster.config import InvitationSettings
from roster.domain.error import ValidationError
from roster.domain.model.invitation import (
    BatchOutcome,
    InviteeClassification,
    InviteeStatus,
    InviteResult,
    Processed,
    Skipped,
)
from roster.domain.service.dedup_service import unique_emails
from roster.domain.value import Email

InviteOne = Callable[[Email], Awaitable[None]]


@dataclass(frozen=True)
class SkipReasons:
    """User-facing reasons reported for skipped emails."""

    already_an_account: str
    already_related: str
    system_error: str

    def for_status(self, status: InviteeStatus) -> str:
        if status == InviteeStatus.ALREADY_AN_ACCOUNT:
            return self.already_an_account
        return self.already_related


CLUB_INVITE_REASONS = SkipReasons(
    already_an_account="A user with this email already exists.",
    already_related="A club with this email already exists.",
    system_error="System error while creating club invite",
)

AFFILIATE_INVITE_REASONS = SkipReasons(
    already_an_account="An account with this email already exists.",
    already_related="An invitation has already been sent to this email.",
    system_error="System error while creating affiliate invite",
)

ADMIN_COMPANY_INVITE_REASONS = SkipReasons(
    already_an_account="An account with this email already exists.",
    already_related="An invitation has already been sent to this email for this club.",
    system_error="Failed to send invitation due to system error",
)


def check_batch_size(emails: list[Email], settings: InvitationSettings) -> None:
    """Reject batches with more unique emails than the configured maximum.

    Repeated addresses count once.

    Raises:
        ValidationError: If the batch is too large
    """
    count = len(unique_emails(emails))
    if count > settings.max_batch_size:
        raise ValidationError(
            f"At most {settings.max_batch_size} emails can be invited at once, "
            f"got {count}"
        )


async def run_invite_batch(
    classification: InviteeClassification,
    reasons: SkipReasons,
    invite_one: InviteOne,
    settings: InvitationSettings,
) -> BatchOutcome:
    """Invite every eligible email and collect one result per email.

    Waits for all tasks (never fails fast). At most
    ``settings.max_concurrency`` invites run at once. If
    ``settings.batch_timeout_seconds`` is set, invites still running when it
    expires are cancelled and reported with the system error reason.

    Args:
        classification: Unique emails of the batch with their status
        reasons: Skip reasons of this kind of batch
        invite_one: Creates, verifies and notifies one eligible email;
            any exception it raises marks that email skipped
        settings: Invitation settings

    Returns:
        Outcome listing each email once, in input order
    """
    results: dict[str, InviteResult] = {}
    for email, status in classification.statuses.items():
        if status != InviteeStatus.ELIGIBLE:
            results[email] = Skipped(email=email, reason=reasons.for_status(status))

    semaphore = asyncio.Semaphore(settings.max_concurrency)

    async def settle(email: Email) -> InviteResult:
        async with semaphore:
            try:
                await invite_one(email)
            except Exception as e:
                logfire.error(
                    "Invite failed",
                    email=email.root,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return Skipped(email=email.root, reason=reasons.system_error)
            return Processed(email=email.root)

    tasks = {
        asyncio.create_task(settle(email)): email.root
        for email in classification.eligible
    }

    if tasks:
        done, pending = await asyncio.wait(
            tasks, timeout=settings.batch_timeout_seconds
        )
        for task in done:
            results[tasks[task]] = task.result()

        if pending:
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
            logfire.warn(
                "Invite batch timed out",
                timeout_seconds=settings.batch_timeout_seconds,
                unsettled=len(pending),
            )
            for task in pending:
                results[tasks[task]] = Skipped(
                    email=tasks[task], reason=reasons.system_error
                )

    outcome = BatchOutcome.from_results(
        [results[email] for email in classification.statuses]
    )
    logfire.info(
        "Invite batch settled",
        processed=len(outcome.processed),
        skipped=len(outcome.skipped),
    )
    return outcome
