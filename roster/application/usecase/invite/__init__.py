"""Invite use cases."""

from roster.application.usecase.invite.accept_invite import (
    AcceptInviteRequest,
    AcceptInviteResponse,
    AcceptInviteUseCase,
)
from roster.application.usecase.invite.decline_invite import (
    DeclineInviteRequest,
    DeclineInviteResponse,
    DeclineInviteUseCase,
)
from roster.application.usecase.invite.invite_affiliates import (
    InviteAffiliatesRequest,
    InviteAffiliatesUseCase,
)
from roster.application.usecase.invite.invite_clubs import (
    InviteClubsRequest,
    InviteClubsUseCase,
)
from roster.application.usecase.invite.invite_companies import (
    InviteCompaniesRequest,
    InviteCompaniesUseCase,
)
from roster.application.usecase.invite.resend_invite import (
    ResendInviteRequest,
    ResendInviteResponse,
    ResendInviteUseCase,
)

__all__ = [
    "AcceptInviteRequest",
    "AcceptInviteResponse",
    "AcceptInviteUseCase",
    "DeclineInviteRequest",
    "DeclineInviteResponse",
    "DeclineInviteUseCase",
    "InviteAffiliatesRequest",
    "InviteAffiliatesUseCase",
    "InviteClubsRequest",
    "InviteClubsUseCase",
    "InviteCompaniesRequest",
    "InviteCompaniesUseCase",
    "ResendInviteRequest",
    "ResendInviteResponse",
    "ResendInviteUseCase",
]
