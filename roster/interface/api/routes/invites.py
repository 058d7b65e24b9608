"""Invite routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status
from pydantic import BaseModel, Field

from roster.application.usecase.invite import (
    AcceptInviteRequest,
    AcceptInviteResponse,
    AcceptInviteUseCase,
    DeclineInviteRequest,
    DeclineInviteResponse,
    DeclineInviteUseCase,
    InviteAffiliatesRequest,
    InviteAffiliatesUseCase,
    InviteClubsRequest,
    InviteClubsUseCase,
    InviteCompaniesRequest,
    InviteCompaniesUseCase,
    ResendInviteRequest,
    ResendInviteResponse,
    ResendInviteUseCase,
)
from roster.config import Settings
from roster.domain.model import BatchOutcome
from roster.domain.service import JWTService
from roster.domain.value import AffiliateType, Email, UserType
from roster.interface.api.auth import AUTH_COOKIE, authenticate

router = APIRouter(tags=["invites"], route_class=DishkaRoute)


class InviteEmailsAPIRequest(BaseModel):
    """API request carrying a batch of emails."""

    emails: list[Email] = Field(min_length=1)


class InviteCompaniesAPIRequest(InviteEmailsAPIRequest):
    """API request for an admin inviting companies to a club."""

    club_id: UUID


class InviteAffiliatesAPIRequest(InviteEmailsAPIRequest):
    """API request for a club inviting affiliates."""

    affiliate_type: AffiliateType


@router.post("/admin/clubs/invites", response_model=BatchOutcome)
async def invite_clubs(
    request: InviteEmailsAPIRequest,
    invite_clubs_use_case: FromDishka[InviteClubsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> BatchOutcome:
    """Invite clubs to the platform (admin only).

    Returns:
        Processed and skipped emails
    """
    authenticate(jwt_service, auth_token, UserType.ADMIN)
    return await invite_clubs_use_case.execute(
        InviteClubsRequest(emails=request.emails)
    )


@router.post("/admin/companies/invites", response_model=BatchOutcome)
async def invite_companies(
    request: InviteCompaniesAPIRequest,
    invite_companies_use_case: FromDishka[InviteCompaniesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> BatchOutcome:
    """Invite companies to a club on its behalf (admin only).

    Returns:
        Processed and skipped emails
    """
    authenticate(jwt_service, auth_token, UserType.ADMIN)
    return await invite_companies_use_case.execute(
        InviteCompaniesRequest(club_id=str(request.club_id), emails=request.emails)
    )


@router.post("/clubs/me/affiliates/invites", response_model=BatchOutcome)
async def invite_affiliates(
    request: InviteAffiliatesAPIRequest,
    invite_affiliates_use_case: FromDishka[InviteAffiliatesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> BatchOutcome:
    """Invite players, supporters or companies to the caller's club.

    Returns:
        Processed and skipped emails
    """
    payload = authenticate(jwt_service, auth_token, UserType.CLUB)
    return await invite_affiliates_use_case.execute(
        InviteAffiliatesRequest(
            club_user_id=payload.user_id,
            emails=request.emails,
            affiliate_type=request.affiliate_type,
        )
    )


@router.post(
    "/admin/affiliates/{affiliate_id}/resend", response_model=ResendInviteResponse
)
async def resend_invite(
    affiliate_id: UUID,
    resend_invite_use_case: FromDishka[ResendInviteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ResendInviteResponse:
    """Re-issue the code and re-send the email of a pending invite."""
    authenticate(jwt_service, auth_token, UserType.ADMIN)
    return await resend_invite_use_case.execute(
        ResendInviteRequest(affiliate_id=str(affiliate_id))
    )


@router.post(
    "/admin/affiliates/{affiliate_id}/decline", response_model=DeclineInviteResponse
)
async def decline_invite(
    affiliate_id: UUID,
    decline_invite_use_case: FromDishka[DeclineInviteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeclineInviteResponse:
    """Decline an affiliate invite that has not been approved."""
    authenticate(jwt_service, auth_token, UserType.ADMIN)
    return await decline_invite_use_case.execute(
        DeclineInviteRequest(affiliate_id=str(affiliate_id))
    )


@router.post(
    "/invites/accept",
    response_model=AcceptInviteResponse,
    status_code=status.HTTP_200_OK,
)
async def accept_invite(
    request: AcceptInviteRequest,
    response: Response,
    accept_invite_use_case: FromDishka[AcceptInviteUseCase],
    settings: FromDishka[Settings],
) -> AcceptInviteResponse:
    """Accept an invitation with the emailed code.

    Activates the invited account and sets the auth cookie.

    Returns:
        The activated account and its session token
    """
    result = await accept_invite_use_case.execute(request)

    is_production = settings.environment == "production"
    response.set_cookie(
        key=AUTH_COOKIE,
        value=result.token,
        httponly=True,
        secure=is_production,
        samesite="lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )
    return result
