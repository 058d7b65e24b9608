"""Decline invite use case (admin)."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from roster.application.usecase.base import BaseUseCase
from roster.domain.error import NotificationError
from roster.domain.service import InvitationService, InviteNotificationService
from roster.domain.value import AffiliateId


class DeclineInviteRequest(BaseModel):
    """Request to decline an unapproved affiliate invite."""

    affiliate_id: str


class DeclineInviteResponse(BaseModel):
    """Response after declining an invite."""

    affiliate_id: str
    email: str
    notified: bool


class DeclineInviteUseCase(BaseUseCase):
    """Removes an unapproved affiliate invite and tells the invitee."""

    def __init__(
        self,
        invitation_service: InvitationService,
        notification_service: InviteNotificationService,
    ) -> None:
        """Initialize use case.

        Args:
            invitation_service: Deletes the invite records
            notification_service: Sends the decline notice
        """
        self.invitation_service = invitation_service
        self.notification_service = notification_service

    async def execute(self, request: DeclineInviteRequest) -> DeclineInviteResponse:
        """Execute decline invite use case.

        The decline notice is best effort: the records are already gone when
        it is sent, and a delivery failure only shows up as ``notified=False``.

        Args:
            request: Affiliate to decline

        Returns:
            The declined affiliate and whether the notice was delivered

        Raises:
            NotFoundError: If the affiliate does not exist
            InviteAlreadyClaimedError: If the invite was already approved
        """
        affiliate_id = AffiliateId(UUID(request.affiliate_id))

        with logfire.span("decline_invite", affiliate_id=request.affiliate_id):
            affiliate = await self.invitation_service.decline_affiliate_invite(
                affiliate_id
            )

            notified = True
            try:
                await self.notification_service.send_decline_notice(affiliate.email)
            except NotificationError as e:
                notified = False
                logfire.warn(
                    "Decline notice not delivered",
                    affiliate_id=request.affiliate_id,
                    error=str(e),
                )

            return DeclineInviteResponse(
                affiliate_id=str(affiliate.id),
                email=affiliate.email.root,
                notified=notified,
            )
