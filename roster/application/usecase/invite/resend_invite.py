"""Resend invite use case (admin)."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from roster.application.usecase.base import BaseUseCase
from roster.domain.service import (
    ClubService,
    InvitationService,
    InviteNotificationService,
)
from roster.domain.value import AffiliateId, InviteKind


class ResendInviteRequest(BaseModel):
    """Request to resend a pending affiliate invite."""

    affiliate_id: str


class ResendInviteResponse(BaseModel):
    """Response after resending an invite."""

    affiliate_id: str
    email: str


class ResendInviteUseCase(BaseUseCase):
    """Issues a fresh code for a pending affiliate and emails it again.

    This is also the recovery path for an invite whose first email failed.
    """

    def __init__(
        self,
        club_service: ClubService,
        invitation_service: InvitationService,
        notification_service: InviteNotificationService,
    ) -> None:
        """Initialize use case.

        Args:
            club_service: Resolves the affiliate and its club
            invitation_service: Re-issues the verification code
            notification_service: Sends the invitation email
        """
        self.club_service = club_service
        self.invitation_service = invitation_service
        self.notification_service = notification_service

    async def execute(self, request: ResendInviteRequest) -> ResendInviteResponse:
        """Execute resend invite use case.

        Args:
            request: Affiliate to re-invite

        Returns:
            The re-invited affiliate

        Raises:
            NotFoundError: If the affiliate or its club does not exist
            InviteAlreadyClaimedError: If the invite was already claimed
            VerificationCodeError: If the code could not be stored
            NotificationError: If the email could not be delivered
        """
        affiliate_id = AffiliateId(UUID(request.affiliate_id))

        with logfire.span("resend_invite", affiliate_id=request.affiliate_id):
            affiliate = await self.club_service.get_affiliate(affiliate_id)
            club = await self.club_service.get_club(affiliate.club_id)
            club_name = await self.club_service.get_display_name(club)

            code = await self.invitation_service.reissue_affiliate_code(affiliate)
            await self.notification_service.send_invite(
                affiliate.email,
                code,
                club.ref_code,
                inviter_name=club_name,
                kind=InviteKind.for_affiliate(affiliate.type),
            )

            logfire.info("Invite resent", affiliate_id=request.affiliate_id)
            return ResendInviteResponse(
                affiliate_id=str(affiliate.id), email=affiliate.email.root
            )
