"""Onboarding progress service."""

import logfire

from roster.domain.error import NotFoundError, StepNotPendingError
from roster.domain.model.common import utcnow
from roster.domain.model.onboarding import OnboardingTransition
from roster.domain.repository import OnboardingRepository
from roster.domain.value import UserId

from .base import Service


def complete_step(remaining: frozenset[int], step: int) -> OnboardingTransition:
    """Remove one step from the remaining set.

    Args:
        remaining: Steps still pending
        step: Step being completed

    Returns:
        Transition with the new remaining steps in ascending order

    Raises:
        StepNotPendingError: If the step is not pending
    """
    if step not in remaining:
        raise StepNotPendingError(step)

    new_remaining = sorted(remaining - {step})
    is_complete = not new_remaining
    return OnboardingTransition(
        remaining_steps=new_remaining,
        completed_step=step,
        is_complete=is_complete,
        next_step=None if is_complete else new_remaining[0],
    )


class OnboardingService(Service):
    """Domain service for onboarding progress."""

    def __init__(self, onboarding_repository: OnboardingRepository) -> None:
        """Initialize onboarding service.

        Args:
            onboarding_repository: Onboarding progress repository
        """
        self.onboarding_repository = onboarding_repository

    async def complete_onboarding_step(
        self, user_id: UserId, step: int
    ) -> OnboardingTransition:
        """Mark a step complete for an account.

        Only the new remaining set is stored; completion and the next step
        are derived.

        Args:
            user_id: Account completing the step
            step: Step number

        Returns:
            The resulting transition

        Raises:
            NotFoundError: If the account has no onboarding record
            StepNotPendingError: If the step is not pending (nothing is stored)
        """
        with logfire.span(
            "onboarding_service.complete_onboarding_step",
            user_id=str(user_id),
            step=step,
        ):
            progress = await self.onboarding_repository.find_by_user_id(user_id)
            if progress is None:
                logfire.warn("Onboarding record not found", user_id=str(user_id))
                raise NotFoundError("Onboarding progress", str(user_id))

            try:
                transition = complete_step(progress.remaining_steps, step)
            except StepNotPendingError:
                logfire.warn(
                    "Onboarding step not pending",
                    user_id=str(user_id),
                    step=step,
                    remaining_steps=sorted(progress.remaining_steps),
                )
                raise

            await self.onboarding_repository.save(
                progress.model_copy(
                    update={
                        "remaining_steps": frozenset(transition.remaining_steps),
                        "updated_at": utcnow(),
                    }
                )
            )
            logfire.info(
                "Onboarding step completed",
                user_id=str(user_id),
                step=step,
                is_complete=transition.is_complete,
                next_step=transition.next_step,
            )
            return transition
