"""Unit tests for email clients and templates."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from roster.adapter.email import HttpEmailClient, MockEmailClient
from roster.adapter.email.templates import TEMPLATES, render
from roster.adapter.error import EmailDeliveryError, TemplateError
from roster.config import EmailSettings
from roster.domain.service import EmailMessage

INVITE_VARIABLES = {
    "email": "p@x.io",
    "clubName": "Riverside FC",
    "userRole": "player",
    "refCode": "RIVER001",
    "otp": "482913",
    "frontendUrl": "https://app.roster.test",
}


def invite_message(to: str = "p@x.io") -> EmailMessage:
    return EmailMessage(
        to=to,
        subject="Player Affiliate Invite",
        template="invite-player-supporter",
        variables=INVITE_VARIABLES,
    )


class TestRender:
    """Tests for template rendering."""

    def test_invite_contains_code_and_link(self):
        html = render("invite-player-supporter", INVITE_VARIABLES)

        assert "482913" in html
        assert "RIVER001" in html
        assert "Riverside FC" in html
        assert 'href="https://app.roster.test/register"' in html

    def test_every_invite_template_renders_with_invite_variables(self):
        for name in TEMPLATES:
            assert render(name, INVITE_VARIABLES).startswith("<!DOCTYPE html>")

    def test_unknown_template(self):
        with pytest.raises(TemplateError, match="Unknown email template"):
            render("welcome", {})

    def test_missing_variable(self):
        with pytest.raises(TemplateError, match="otp"):
            render("invite-club", {"email": "c@x.io", "refCode": "X", "frontendUrl": ""})


class TestHttpEmailClient:
    """Tests for HttpEmailClient."""

    @pytest.mark.asyncio
    async def test_posts_rendered_message(self):
        settings = EmailSettings(
            api_url="https://mail.test/send",
            api_key="secret",
            sender="Roster <no-reply@roster.test>",
            timeout_seconds=5.0,
        )

        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = httpx.Response(202, json={"id": "m1"})

            await HttpEmailClient(settings).send(invite_message())

            mock_client.post.assert_called_once()
            args, kwargs = mock_client.post.call_args
            assert args == ("https://mail.test/send",)
            assert kwargs["json"]["from"] == "Roster <no-reply@roster.test>"
            assert kwargs["json"]["to"] == ["p@x.io"]
            assert kwargs["json"]["subject"] == "Player Affiliate Invite"
            assert "482913" in kwargs["json"]["html"]
            assert kwargs["headers"]["Authorization"] == "Bearer secret"
            assert kwargs["timeout"] == 5.0

    @pytest.mark.asyncio
    async def test_no_api_key_sends_no_authorization(self):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = httpx.Response(200)

            await HttpEmailClient(EmailSettings(api_key=None)).send(invite_message())

            _, kwargs = mock_client.post.call_args
            assert "Authorization" not in kwargs["headers"]

    @pytest.mark.asyncio
    async def test_rejected_message_raises(self):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = httpx.Response(422, text="bad recipient")

            with pytest.raises(EmailDeliveryError, match="422"):
                await HttpEmailClient(EmailSettings()).send(invite_message())

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.side_effect = httpx.ConnectError("connection refused")

            with pytest.raises(EmailDeliveryError, match="connection refused"):
                await HttpEmailClient(EmailSettings()).send(invite_message())


class TestMockEmailClient:
    @pytest.mark.asyncio
    async def test_records_and_fails_configured_recipients(self):
        client = MockEmailClient(failing_recipients={"down@x.io"})

        await client.send(invite_message("p@x.io"))
        with pytest.raises(EmailDeliveryError):
            await client.send(invite_message("down@x.io"))

        assert [m.to for m in client.sent] == ["p@x.io"]
