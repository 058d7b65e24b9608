"""Email infrastructure providers."""

from dishka import Scope, provide

from roster.adapter.email.client import HttpEmailClient
from roster.config import Settings
from roster.domain.service import EmailClient
from roster.util.di.base import ProviderBase
from roster.util.error import ConfigurationError


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_client(self, settings: Settings) -> EmailClient:
        """Provide HTTP email client.

        Raises:
            ConfigurationError: If no API key is configured in production
        """
        if settings.environment == "production" and not settings.email.api_key:
            raise ConfigurationError("EMAIL__API_KEY must be configured in production")
        return HttpEmailClient(settings.email)
