"""Domain model entities for Roster."""

from roster.domain.model.affiliate import Affiliate
from roster.domain.model.club import Club
from roster.domain.model.invitation import (
    BatchOutcome,
    CreatedInvite,
    InviteeClassification,
    InviteeStatus,
    InviteResult,
    Processed,
    Skipped,
    SkippedEmail,
)
from roster.domain.model.onboarding import (
    DEFAULT_ONBOARDING_STEPS,
    OnboardingProgress,
    OnboardingTransition,
)
from roster.domain.model.user import User
from roster.domain.model.verification_code import VerificationCode

__all__ = [
    "Affiliate",
    "BatchOutcome",
    "Club",
    "CreatedInvite",
    "DEFAULT_ONBOARDING_STEPS",
    "InviteResult",
    "InviteeClassification",
    "InviteeStatus",
    "OnboardingProgress",
    "OnboardingTransition",
    "Processed",
    "Skipped",
    "SkippedEmail",
    "User",
    "VerificationCode",
]
