"""Invite clubs use case (admin)."""

import logfire
from pydantic import BaseModel, Field

from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.invite.batch import (
    CLUB_INVITE_REASONS,
    check_batch_size,
    run_invite_batch,
)
from roster.config import Settings
from roster.domain.model import BatchOutcome
from roster.domain.service import (
    DedupService,
    InvitationService,
    InviteNotificationService,
)
from roster.domain.value import Email, InviteKind

PLATFORM_NAME = "Roster"


class InviteClubsRequest(BaseModel):
    """Request to invite clubs by email."""

    emails: list[Email] = Field(min_length=1)


class InviteClubsUseCase(BaseUseCase):
    """Creates pending club accounts and sends their invitations."""

    def __init__(
        self,
        dedup_service: DedupService,
        invitation_service: InvitationService,
        notification_service: InviteNotificationService,
        settings: Settings,
    ) -> None:
        """Initialize use case.

        Args:
            dedup_service: Classifies emails against existing records
            invitation_service: Creates invite records and codes
            notification_service: Sends invitation emails
            settings: Application settings
        """
        self.dedup_service = dedup_service
        self.invitation_service = invitation_service
        self.notification_service = notification_service
        self.settings = settings

    async def execute(self, request: InviteClubsRequest) -> BatchOutcome:
        """Execute invite clubs use case.

        Args:
            request: Emails to invite

        Returns:
            Processed and skipped emails

        Raises:
            ValidationError: If the batch is too large
            ExistenceLookupError: If the existing record lookup failed
        """
        check_batch_size(request.emails, self.settings.invitations)

        with logfire.span("invite_clubs", email_count=len(request.emails)):
            classification = await self.dedup_service.classify_for_clubs(
                request.emails
            )

            async def invite_one(email: Email) -> None:
                invite = await self.invitation_service.create_club_invite(email)
                code = await self.invitation_service.issue_code(invite)
                await self.notification_service.send_invite(
                    email,
                    code,
                    invite.ref_code,
                    inviter_name=PLATFORM_NAME,
                    kind=InviteKind.CLUB,
                )

            return await run_invite_batch(
                classification,
                CLUB_INVITE_REASONS,
                invite_one,
                self.settings.invitations,
            )
