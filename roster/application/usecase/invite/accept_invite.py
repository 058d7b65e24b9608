"""Accept invite use case (invitee)."""

import logfire
from pydantic import BaseModel, Field

from roster.application.usecase.base import BaseUseCase
from roster.domain.service import (
    InvitationService,
    JWTService,
    VerificationCodeService,
)
from roster.domain.value import Email, UserType, VerificationPurpose


class AcceptInviteRequest(BaseModel):
    """Invitee's email with the code they received."""

    email: Email
    code: str = Field(min_length=6, max_length=6, pattern=r"^\d{6}$")
    purpose: VerificationPurpose


class AcceptInviteResponse(BaseModel):
    """Activated account with its session token."""

    user_id: str
    user_type: UserType
    token: str


class AcceptInviteUseCase(BaseUseCase):
    """Verifies an invite code and activates the pending account."""

    def __init__(
        self,
        verification_service: VerificationCodeService,
        invitation_service: InvitationService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize use case.

        Args:
            verification_service: Checks the code
            invitation_service: Activates the invited account
            jwt_service: Issues the session token
        """
        self.verification_service = verification_service
        self.invitation_service = invitation_service
        self.jwt_service = jwt_service

    async def execute(self, request: AcceptInviteRequest) -> AcceptInviteResponse:
        """Execute accept invite use case.

        Args:
            request: Email, code and invite purpose

        Returns:
            The activated account and a session token

        Raises:
            InvalidVerificationCodeError: If the code is missing, wrong, expired
                or exhausted
            NotFoundError: If the invited account no longer exists
        """
        with logfire.span(
            "accept_invite",
            email=request.email.root,
            purpose=request.purpose.value,
        ):
            code = await self.verification_service.verify(
                request.email, request.code, request.purpose
            )
            user = await self.invitation_service.activate_invited_account(code)
            token = self.jwt_service.create_token(str(user.id), user.user_type.value)

            return AcceptInviteResponse(
                user_id=str(user.id), user_type=user.user_type, token=token
            )
