"""Invitation email notification service."""

import logfire
from pydantic import BaseModel, Field

from roster.config import EmailSettings
from roster.domain.error import NotificationError
from roster.domain.value import Email, InviteKind, RefCode

from .base import Service


class EmailMessage(BaseModel):
    """Templated outgoing email."""

    to: str
    subject: str
    template: str
    variables: dict[str, str] = Field(default_factory=dict)


class EmailClient:
    """Outbound email interface."""

    async def send(self, message: EmailMessage) -> None:
        """Render and deliver a message.

        Args:
            message: Message to deliver

        Raises:
            EmailDeliveryError: If the provider rejects or cannot be reached
        """
        raise NotImplementedError


INVITE_TEMPLATES: dict[InviteKind, str] = {
    InviteKind.CLUB: "invite-club",
    InviteKind.PLAYER: "invite-player-supporter",
    InviteKind.SUPPORTER: "invite-player-supporter",
    InviteKind.COMPANY: "invite-company",
}

DECLINE_TEMPLATE = "decline-affiliate-invite"


def invite_subject(kind: InviteKind) -> str:
    return f"{kind.value.capitalize()} Affiliate Invite"


class InviteNotificationService(Service):
    """Sends invitation and decline emails."""

    def __init__(self, email_client: EmailClient, settings: EmailSettings) -> None:
        """Initialize notification service.

        Args:
            email_client: Outbound email client
            settings: Email settings (frontend link target)
        """
        self.email_client = email_client
        self.settings = settings

    async def send_invite(
        self,
        email: Email,
        code: str,
        ref_code: RefCode,
        inviter_name: str,
        kind: InviteKind,
    ) -> None:
        """Send the invitation email matching the invite kind.

        Args:
            email: Invitee email
            code: One-time verification code
            ref_code: Club reference code
            inviter_name: Display name of the inviting club
            kind: Which invitation this is

        Raises:
            NotificationError: If the email could not be delivered
        """
        variables = {
            "email": email.root,
            "clubName": inviter_name,
            "userRole": kind.value,
            "refCode": ref_code.root,
            "otp": code,
            "frontendUrl": self.settings.frontend_url,
        }
        message = EmailMessage(
            to=email.root,
            subject=invite_subject(kind),
            template=INVITE_TEMPLATES[kind],
            variables=variables,
        )
        with logfire.span(
            "notification_service.send_invite", email=email.root, kind=kind.value
        ):
            await self._deliver(message)
            logfire.info("Invitation email sent", email=email.root, kind=kind.value)

    async def send_decline_notice(self, email: Email) -> None:
        """Tell an invitee their affiliate invite was declined.

        Args:
            email: Invitee email

        Raises:
            NotificationError: If the email could not be delivered
        """
        message = EmailMessage(
            to=email.root,
            subject="Declined Affiliate Invite",
            template=DECLINE_TEMPLATE,
        )
        with logfire.span("notification_service.send_decline_notice", email=email.root):
            await self._deliver(message)
            logfire.info("Decline notice sent", email=email.root)

    async def _deliver(self, message: EmailMessage) -> None:
        try:
            await self.email_client.send(message)
        except Exception as e:
            logfire.error(
                "Email delivery failed",
                email=message.to,
                template=message.template,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise NotificationError(message.to, str(e)) from e
