"""Unit tests for AcceptInviteUseCase."""

import pytest

from roster.adapter.email import MockEmailClient
from roster.application.usecase.invite import (
    AcceptInviteRequest,
    AcceptInviteUseCase,
    InviteAffiliatesRequest,
    InviteAffiliatesUseCase,
    InviteClubsRequest,
    InviteClubsUseCase,
)
from roster.domain.error import InvalidVerificationCodeError
from roster.domain.service import JWTService
from roster.domain.value import (
    AffiliateStatus,
    AffiliateType,
    Email,
    UserStatus,
    UserType,
    VerificationPurpose,
)
from roster.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import emails, seed_club
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def emailed_code(email_client: MockEmailClient, address: str) -> str:
    [message] = email_client.sent_to(address)
    return message.variables["otp"]


class TestAcceptInviteUseCase:
    """Tests for AcceptInviteUseCase."""

    @pytest.mark.asyncio
    async def test_club_invite_round_trip(self, unit_env):
        """The emailed code activates the pending club account."""
        db = await unit_env.get(InMemoryDatabase)
        email_client = await unit_env.get(MockEmailClient)
        invite_clubs = await unit_env.get(InviteClubsUseCase)
        accept = await unit_env.get(AcceptInviteUseCase)
        jwt_service = await unit_env.get(JWTService)
        await invite_clubs.execute(InviteClubsRequest(emails=emails("club@x.io")))

        response = await accept.execute(
            AcceptInviteRequest(
                email=Email("club@x.io"),
                code=emailed_code(email_client, "club@x.io"),
                purpose=VerificationPurpose.CLUB_INVITE,
            )
        )

        assert response.user_type == UserType.CLUB
        [user] = db.users.values()
        assert str(user.id) == response.user_id
        assert user.status == UserStatus.ACTIVE
        payload = jwt_service.verify_token(response.token)
        assert payload.user_id == response.user_id
        assert payload.user_type == "club"

    @pytest.mark.asyncio
    async def test_affiliate_invite_round_trip(self, unit_env):
        db = await unit_env.get(InMemoryDatabase)
        email_client = await unit_env.get(MockEmailClient)
        invite_affiliates = await unit_env.get(InviteAffiliatesUseCase)
        accept = await unit_env.get(AcceptInviteUseCase)
        club = seed_club(db)
        await invite_affiliates.execute(
            InviteAffiliatesRequest(
                club_user_id=str(club.user_id),
                emails=emails("p@x.io"),
                affiliate_type=AffiliateType.PLAYER,
            )
        )

        response = await accept.execute(
            AcceptInviteRequest(
                email=Email("p@x.io"),
                code=emailed_code(email_client, "p@x.io"),
                purpose=VerificationPurpose.AFFILIATE_INVITE,
            )
        )

        assert response.user_type == UserType.PLAYER
        [affiliate] = db.affiliates.values()
        assert str(affiliate.user_id) == response.user_id
        assert affiliate.status == AffiliateStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_wrong_code_leaves_account_pending(self, unit_env):
        db = await unit_env.get(InMemoryDatabase)
        email_client = await unit_env.get(MockEmailClient)
        invite_clubs = await unit_env.get(InviteClubsUseCase)
        accept = await unit_env.get(AcceptInviteUseCase)
        await invite_clubs.execute(InviteClubsRequest(emails=emails("club@x.io")))
        code = emailed_code(email_client, "club@x.io")
        wrong = "100000" if code != "100000" else "100001"

        with pytest.raises(InvalidVerificationCodeError):
            await accept.execute(
                AcceptInviteRequest(
                    email=Email("club@x.io"),
                    code=wrong,
                    purpose=VerificationPurpose.CLUB_INVITE,
                )
            )

        [user] = db.users.values()
        assert user.status == UserStatus.PENDING

    def test_code_must_be_six_digits(self):
        with pytest.raises(ValueError):
            AcceptInviteRequest(
                email=Email("club@x.io"),
                code="12ab56",
                purpose=VerificationPurpose.CLUB_INVITE,
            )
