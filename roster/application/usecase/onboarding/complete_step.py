"""Complete onboarding step use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from roster.application.usecase.base import BaseUseCase
from roster.domain.model import OnboardingTransition
from roster.domain.service import OnboardingService
from roster.domain.value import UserId


class CompleteOnboardingStepRequest(BaseModel):
    """Request to complete one onboarding step."""

    user_id: str
    step: int = Field(ge=1)


class CompleteOnboardingStepUseCase(BaseUseCase):
    """Use case for completing an onboarding step."""

    def __init__(self, onboarding_service: OnboardingService) -> None:
        """Initialize use case.

        Args:
            onboarding_service: Onboarding domain service
        """
        self.onboarding_service = onboarding_service

    async def execute(
        self, request: CompleteOnboardingStepRequest
    ) -> OnboardingTransition:
        """Execute complete onboarding step use case.

        Args:
            request: Account and step

        Returns:
            Remaining steps, completion flag and next step

        Raises:
            NotFoundError: If the account has no onboarding record
            StepNotPendingError: If the step is not pending
        """
        return await self.onboarding_service.complete_onboarding_step(
            UserId(UUID(request.user_id)), request.step
        )
