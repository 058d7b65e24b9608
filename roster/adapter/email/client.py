"""Email clients.

``HttpEmailClient`` posts rendered messages to a transactional email HTTP
API. ``MockEmailClient`` keeps them in memory for tests.
"""

import httpx
import logfire

from roster.adapter.email.templates import render
from roster.adapter.error import EmailDeliveryError
from roster.config import EmailSettings
from roster.domain.service.notification_service import EmailClient, EmailMessage


class HttpEmailClient(EmailClient):
    """Email client backed by an HTTP email API."""

    def __init__(self, settings: EmailSettings) -> None:
        """Initialize HTTP email client.

        Args:
            settings: Email settings (API URL, key, sender and timeout)
        """
        self.settings = settings

    async def send(self, message: EmailMessage) -> None:
        """Render a message and post it to the email API.

        Args:
            message: Message to deliver

        Raises:
            EmailDeliveryError: If the API returns a non-2xx status or the
                request fails
        """
        payload = {
            "from": self.settings.sender,
            "to": [message.to],
            "subject": message.subject,
            "html": render(message.template, message.variables),
        }
        headers = {"Content-Type": "application/json"}
        if self.settings.api_key:
            headers["Authorization"] = f"Bearer {self.settings.api_key}"

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.settings.api_url,
                    json=payload,
                    headers=headers,
                    timeout=self.settings.timeout_seconds,
                )
        except httpx.HTTPError as e:
            logfire.error("Email API HTTP error", to=message.to, error=str(e))
            raise EmailDeliveryError(f"HTTP error while sending email: {e}") from e

        if not response.is_success:
            logfire.error(
                "Email API rejected message",
                to=message.to,
                status_code=response.status_code,
                error=response.text,
            )
            raise EmailDeliveryError(
                f"Email API returned {response.status_code} for {message.to}"
            )

        logfire.debug("Email accepted by API", to=message.to, template=message.template)


class MockEmailClient(EmailClient):
    """Email client for testing.

    Records rendered messages instead of sending them. Recipients listed in
    ``failing_recipients`` raise ``EmailDeliveryError``.
    """

    def __init__(self, failing_recipients: set[str] | None = None) -> None:
        self.sent: list[EmailMessage] = []
        self.failing_recipients: set[str] = failing_recipients or set()

    async def send(self, message: EmailMessage) -> None:
        """Record a message, or fail for configured recipients.

        Args:
            message: Message to record

        Raises:
            EmailDeliveryError: If the recipient is configured to fail
        """
        if message.to in self.failing_recipients:
            raise EmailDeliveryError(f"Mock delivery failure for {message.to}")
        # Rendering catches template/variable mismatches in tests
        render(message.template, message.variables)
        self.sent.append(message)

    def sent_to(self, email: str) -> list[EmailMessage]:
        """Messages recorded for one recipient."""
        return [message for message in self.sent if message.to == email]
