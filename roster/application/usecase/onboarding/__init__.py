"""Onboarding use cases."""

from roster.application.usecase.onboarding.complete_step import (
    CompleteOnboardingStepRequest,
    CompleteOnboardingStepUseCase,
)

__all__ = [
    "CompleteOnboardingStepRequest",
    "CompleteOnboardingStepUseCase",
]
