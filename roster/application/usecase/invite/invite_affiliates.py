"""Invite affiliates use case (club)."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.invite.batch import (
    AFFILIATE_INVITE_REASONS,
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
from roster.domain.value import AffiliateType, Email, InviteKind, UserId


class InviteAffiliatesRequest(BaseModel):
    """Request from a club to invite affiliates of one type."""

    club_user_id: str
    emails: list[Email] = Field(min_length=1)
    affiliate_type: AffiliateType


class InviteAffiliatesUseCase(BaseUseCase):
    """Creates pending affiliate accounts for a club and invites them."""

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
            club_service: Resolves the inviting club
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

    async def execute(self, request: InviteAffiliatesRequest) -> BatchOutcome:
        """Execute invite affiliates use case.

        Args:
            request: Inviting club owner, emails and affiliate type

        Returns:
            Processed and skipped emails

        Raises:
            ValidationError: If the batch is too large
            NotFoundError: If the caller owns no club
            ExistenceLookupError: If the existing record lookup failed
        """
        check_batch_size(request.emails, self.settings.invitations)
        owner_id = UserId(UUID(request.club_user_id))

        with logfire.span(
            "invite_affiliates",
            club_user_id=request.club_user_id,
            affiliate_type=request.affiliate_type.value,
            email_count=len(request.emails),
        ):
            club = await self.club_service.get_club_by_owner(owner_id)
            club_name = await self.club_service.get_display_name(club)
            classification = await self.dedup_service.classify_for_affiliates(
                request.emails, club.id
            )
            kind = InviteKind.for_affiliate(request.affiliate_type)

            async def invite_one(email: Email) -> None:
                invite = await self.invitation_service.create_affiliate_invite(
                    email, club, request.affiliate_type
                )
                code = await self.invitation_service.issue_code(invite)
                await self.notification_service.send_invite(
                    email, code, invite.ref_code, inviter_name=club_name, kind=kind
                )

            return await run_invite_batch(
                classification,
                AFFILIATE_INVITE_REASONS,
                invite_one,
                self.settings.invitations,
            )
