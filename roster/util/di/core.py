"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from roster.config import AuthSettings, EmailSettings, InvitationSettings, Settings
from roster.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings provider, loaded from environment variables and ``.env``."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        return settings.invitations

    @provide(scope=Scope.APP)
    def provide_email_settings(self, settings: Settings) -> EmailSettings:
        return settings.email
