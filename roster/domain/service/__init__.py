"""Domain services."""

from .base import Service
from .club_service import ClubService
from .dedup_service import DedupService
from .invitation_service import InvitationService
from .jwt_service import JWTService
from .notification_service import EmailClient, EmailMessage, InviteNotificationService
from .onboarding_service import OnboardingService
from .ref_code_service import RefCodeService
from .verification_service import VerificationCodeService

__all__ = [
    "ClubService",
    "DedupService",
    "EmailClient",
    "EmailMessage",
    "InvitationService",
    "InviteNotificationService",
    "JWTService",
    "OnboardingService",
    "RefCodeService",
    "Service",
    "VerificationCodeService",
]
