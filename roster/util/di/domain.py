"""Domain layer DI providers."""

from dishka import Scope, provide

from roster.config import AuthSettings, EmailSettings, InvitationSettings
from roster.domain.repository import (
    AffiliateRepository,
    ClubRepository,
    OnboardingRepository,
    TransactionManager,
    UserRepository,
)
from roster.domain.service import (
    ClubService,
    DedupService,
    EmailClient,
    InvitationService,
    InviteNotificationService,
    JWTService,
    OnboardingService,
    RefCodeService,
    VerificationCodeService,
)
from roster.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Services are REQUEST-scoped to follow the request session; per-invite
    transactions come from the TransactionManager instead.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_club_service(
        self,
        club_repository: ClubRepository,
        user_repository: UserRepository,
        affiliate_repository: AffiliateRepository,
    ) -> ClubService:
        return ClubService(
            club_repository=club_repository,
            user_repository=user_repository,
            affiliate_repository=affiliate_repository,
        )

    @provide
    def get_dedup_service(
        self,
        user_repository: UserRepository,
        club_repository: ClubRepository,
        affiliate_repository: AffiliateRepository,
    ) -> DedupService:
        return DedupService(
            user_repository=user_repository,
            club_repository=club_repository,
            affiliate_repository=affiliate_repository,
        )

    @provide
    def get_ref_code_service(self, settings: InvitationSettings) -> RefCodeService:
        return RefCodeService(settings=settings)

    @provide
    def get_verification_service(
        self,
        transaction_manager: TransactionManager,
        settings: InvitationSettings,
    ) -> VerificationCodeService:
        return VerificationCodeService(
            transaction_manager=transaction_manager, settings=settings
        )

    @provide
    def get_invitation_service(
        self,
        transaction_manager: TransactionManager,
        ref_code_service: RefCodeService,
        verification_service: VerificationCodeService,
    ) -> InvitationService:
        return InvitationService(
            transaction_manager=transaction_manager,
            ref_code_service=ref_code_service,
            verification_service=verification_service,
        )

    @provide
    def get_notification_service(
        self, email_client: EmailClient, settings: EmailSettings
    ) -> InviteNotificationService:
        return InviteNotificationService(email_client=email_client, settings=settings)

    @provide
    def get_onboarding_service(
        self, onboarding_repository: OnboardingRepository
    ) -> OnboardingService:
        return OnboardingService(onboarding_repository=onboarding_repository)
