"""Onboarding routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, Field

from roster.application.usecase.onboarding import (
    CompleteOnboardingStepRequest,
    CompleteOnboardingStepUseCase,
)
from roster.domain.model import OnboardingTransition
from roster.domain.service import JWTService
from roster.interface.api.auth import authenticate

router = APIRouter(prefix="/onboarding", tags=["onboarding"], route_class=DishkaRoute)


class CompleteStepAPIRequest(BaseModel):
    """API request for completing an onboarding step."""

    step: int = Field(ge=1)


@router.post("/steps", response_model=OnboardingTransition)
async def complete_step(
    request: CompleteStepAPIRequest,
    complete_step_use_case: FromDishka[CompleteOnboardingStepUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> OnboardingTransition:
    """Mark one of the caller's onboarding steps as done.

    Returns:
        Remaining steps, completion flag and next step
    """
    payload = authenticate(jwt_service, auth_token)
    return await complete_step_use_case.execute(
        CompleteOnboardingStepRequest(user_id=payload.user_id, step=request.step)
    )
