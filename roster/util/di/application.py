"""Application layer DI providers."""

from dishka import Scope, provide

from roster.application.usecase.invite import (
    AcceptInviteUseCase,
    DeclineInviteUseCase,
    InviteAffiliatesUseCase,
    InviteClubsUseCase,
    InviteCompaniesUseCase,
    ResendInviteUseCase,
)
from roster.application.usecase.onboarding import CompleteOnboardingStepUseCase
from roster.config import Settings
from roster.domain.service import (
    ClubService,
    DedupService,
    InvitationService,
    InviteNotificationService,
    JWTService,
    OnboardingService,
    VerificationCodeService,
)
from roster.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider."""

    # Bulk invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_invite_clubs_use_case(
        self,
        dedup_service: DedupService,
        invitation_service: InvitationService,
        notification_service: InviteNotificationService,
        settings: Settings,
    ) -> InviteClubsUseCase:
        """Provide invite clubs use case."""
        return InviteClubsUseCase(
            dedup_service=dedup_service,
            invitation_service=invitation_service,
            notification_service=notification_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_invite_affiliates_use_case(
        self,
        club_service: ClubService,
        dedup_service: DedupService,
        invitation_service: InvitationService,
        notification_service: InviteNotificationService,
        settings: Settings,
    ) -> InviteAffiliatesUseCase:
        """Provide invite affiliates use case."""
        return InviteAffiliatesUseCase(
            club_service=club_service,
            dedup_service=dedup_service,
            invitation_service=invitation_service,
            notification_service=notification_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_invite_companies_use_case(
        self,
        club_service: ClubService,
        dedup_service: DedupService,
        invitation_service: InvitationService,
        notification_service: InviteNotificationService,
        settings: Settings,
    ) -> InviteCompaniesUseCase:
        """Provide invite companies use case."""
        return InviteCompaniesUseCase(
            club_service=club_service,
            dedup_service=dedup_service,
            invitation_service=invitation_service,
            notification_service=notification_service,
            settings=settings,
        )

    # Invite lifecycle use cases
    @provide(scope=Scope.REQUEST)
    def get_resend_invite_use_case(
        self,
        club_service: ClubService,
        invitation_service: InvitationService,
        notification_service: InviteNotificationService,
    ) -> ResendInviteUseCase:
        """Provide resend invite use case."""
        return ResendInviteUseCase(
            club_service=club_service,
            invitation_service=invitation_service,
            notification_service=notification_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_decline_invite_use_case(
        self,
        invitation_service: InvitationService,
        notification_service: InviteNotificationService,
    ) -> DeclineInviteUseCase:
        """Provide decline invite use case."""
        return DeclineInviteUseCase(
            invitation_service=invitation_service,
            notification_service=notification_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_accept_invite_use_case(
        self,
        verification_service: VerificationCodeService,
        invitation_service: InvitationService,
        jwt_service: JWTService,
    ) -> AcceptInviteUseCase:
        """Provide accept invite use case."""
        return AcceptInviteUseCase(
            verification_service=verification_service,
            invitation_service=invitation_service,
            jwt_service=jwt_service,
        )

    # Onboarding use cases
    @provide(scope=Scope.REQUEST)
    def get_complete_onboarding_step_use_case(
        self, onboarding_service: OnboardingService
    ) -> CompleteOnboardingStepUseCase:
        """Provide complete onboarding step use case."""
        return CompleteOnboardingStepUseCase(onboarding_service=onboarding_service)
