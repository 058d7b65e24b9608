"""Unit tests for InviteNotificationService."""

import pytest

from roster.adapter.email import MockEmailClient
from roster.config import EmailSettings
from roster.domain.error import NotificationError
from roster.domain.service import InviteNotificationService
from roster.domain.value import Email, InviteKind, RefCode
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSendInvite:
    """Tests for send_invite."""

    @pytest.mark.asyncio
    async def test_template_follows_invite_kind(self, unit_env):
        notification_service = await unit_env.get(InviteNotificationService)
        email_client = await unit_env.get(MockEmailClient)

        for kind in InviteKind:
            await notification_service.send_invite(
                Email(f"{kind.value}@x.io"),
                "123456",
                RefCode("RIVER001"),
                inviter_name="Riverside FC",
                kind=kind,
            )

        templates = {m.to: m.template for m in email_client.sent}
        assert templates == {
            "club@x.io": "invite-club",
            "player@x.io": "invite-player-supporter",
            "supporter@x.io": "invite-player-supporter",
            "company@x.io": "invite-company",
        }

    @pytest.mark.asyncio
    async def test_variables_carry_code_and_club(self):
        email_client = MockEmailClient()
        service = InviteNotificationService(
            email_client, EmailSettings(frontend_url="https://app.roster.test")
        )

        await service.send_invite(
            Email("p@x.io"),
            "654321",
            RefCode("RIVER001"),
            inviter_name="Riverside FC",
            kind=InviteKind.PLAYER,
        )

        [message] = email_client.sent_to("p@x.io")
        assert message.subject == "Player Affiliate Invite"
        assert message.variables == {
            "email": "p@x.io",
            "clubName": "Riverside FC",
            "userRole": "player",
            "refCode": "RIVER001",
            "otp": "654321",
            "frontendUrl": "https://app.roster.test",
        }

    @pytest.mark.asyncio
    async def test_delivery_failure_raises_notification_error(self):
        email_client = MockEmailClient(failing_recipients={"down@x.io"})
        service = InviteNotificationService(email_client, EmailSettings())

        with pytest.raises(NotificationError) as exc_info:
            await service.send_invite(
                Email("down@x.io"),
                "123456",
                RefCode("RIVER001"),
                inviter_name="Roster",
                kind=InviteKind.CLUB,
            )

        assert exc_info.value.email == "down@x.io"
        assert email_client.sent == []


class TestSendDeclineNotice:
    @pytest.mark.asyncio
    async def test_sends_decline_template(self):
        email_client = MockEmailClient()
        service = InviteNotificationService(email_client, EmailSettings())

        await service.send_decline_notice(Email("p@x.io"))

        [message] = email_client.sent
        assert message.template == "decline-affiliate-invite"
        assert message.subject == "Declined Affiliate Invite"
