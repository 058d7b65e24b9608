"""Invite companies use case (admin, on behalf of a club)."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.invite.batch import (
    ADMIN_COMPANY_INVITE_REASONS,
    check_batch_size,
    run_invite_batch,
)
from roster.config import Settings
from roster.domain.model import BatchOutcome
from roster.domain.service import (
    ClubService,
    DedupService,
    InvitationService,
    InviteNotificationService,
)
from roster.domain.value import AffiliateType, ClubId, Email, InviteKind


class InviteCompaniesRequest(BaseModel):
    """Request from an admin to invite companies to a club."""

    club_id: str
    emails: list[Email] = Field(min_length=1)


class InviteCompaniesUseCase(BaseUseCase):
    """Creates pre-approved company affiliates for a club and invites them."""

    def __init__(
        self,
        club_service: ClubService,
        dedup_service: DedupService,
        invitation_service: InvitationService,
        notification_service: InviteNotificationService,
        settings: Settings,
    ) -> None:
        """Initialize use case.

        Args:
            club_service: Resolves the target club
            dedup_service: Classifies emails against existing records
            invitation_service: Creates invite records and codes
            notification_service: Sends invitation emails
            settings: Application settings
        """
        self.club_service = club_service
        self.dedup_service = dedup_service
        self.invitation_service = invitation_service
        self.notification_service = notification_service
        self.settings = settings

    async def execute(self, request: InviteCompaniesRequest) -> BatchOutcome:
        """Execute invite companies use case.

        Args:
            request: Target club and company emails

        Returns:
            Processed and skipped emails

        Raises:
            ValidationError: If the batch is too large
            NotFoundError: If the club does not exist
            ExistenceLookupError: If the existing record lookup failed
        """
        check_batch_size(request.emails, self.settings.invitations)
        club_id = ClubId(UUID(request.club_id))

        with logfire.span(
            "invite_companies",
            club_id=request.club_id,
            email_count=len(request.emails),
        ):
            club = await self.club_service.get_club(club_id)
            club_name = await self.club_service.get_display_name(club)
            classification = await self.dedup_service.classify_for_affiliates(
                request.emails, club.id
            )

            async def invite_one(email: Email) -> None:
                invite = await self.invitation_service.create_affiliate_invite(
                    email, club, AffiliateType.COMPANY, by_admin=True
                )
                code = await self.invitation_service.issue_code(invite)
                await self.notification_service.send_invite(
                    email,
                    code,
                    invite.ref_code,
                    inviter_name=club_name,
                    kind=InviteKind.COMPANY,
                )

            return await run_invite_batch(
                classification,
                ADMIN_COMPANY_INVITE_REASONS,
                invite_one,
                self.settings.invitations,
            )
