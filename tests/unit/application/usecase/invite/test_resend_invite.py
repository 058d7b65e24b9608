"""Unit tests for ResendInviteUseCase."""

from uuid import uuid4

import pytest

from roster.adapter.email import MockEmailClient
from roster.application.usecase.invite import (
    AcceptInviteRequest,
    AcceptInviteUseCase,
    InviteAffiliatesRequest,
    InviteAffiliatesUseCase,
    ResendInviteRequest,
    ResendInviteUseCase,
)
from roster.domain.error import (
    InviteAlreadyClaimedError,
    NotFoundError,
    NotificationError,
)
from roster.domain.value import (
    AffiliateStatus,
    AffiliateType,
    Email,
    VerificationPurpose,
    VerificationStatus,
)
from roster.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import emails, seed_affiliate, seed_club
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestResendInviteUseCase:
    """Tests for ResendInviteUseCase."""

    @pytest.mark.asyncio
    async def test_pending_invite_is_resent_with_fresh_code(self, unit_env):
        db = await unit_env.get(InMemoryDatabase)
        use_case = await unit_env.get(ResendInviteUseCase)
        email_client = await unit_env.get(MockEmailClient)
        club = seed_club(db, name="Riverside FC")
        affiliate = seed_affiliate(db, club, "p@x.io")

        request = ResendInviteRequest(affiliate_id=str(affiliate.id))

        first = await use_case.execute(request)
        await use_case.execute(request)

        assert first.email == "p@x.io"
        assert len(email_client.sent_to("p@x.io")) == 2
        statuses = sorted(c.status.value for c in db.verification_codes.values())
        assert statuses == [
            VerificationStatus.ACTIVE.value,
            VerificationStatus.REVOKED.value,
        ]

    @pytest.mark.asyncio
    async def test_claimed_invite_is_rejected(self, unit_env):
        db = await unit_env.get(InMemoryDatabase)
        use_case = await unit_env.get(ResendInviteUseCase)
        email_client = await unit_env.get(MockEmailClient)
        club = seed_club(db)
        affiliate = seed_affiliate(db, club, "p@x.io", status=AffiliateStatus.ACTIVE)

        with pytest.raises(InviteAlreadyClaimedError):
            await use_case.execute(ResendInviteRequest(affiliate_id=str(affiliate.id)))

        assert email_client.sent == []

    @pytest.mark.asyncio
    async def test_accepted_invite_cannot_be_resent(self, unit_env):
        """Accepting an invite claims it, so a later resend is refused."""
        db = await unit_env.get(InMemoryDatabase)
        email_client = await unit_env.get(MockEmailClient)
        invite_affiliates = await unit_env.get(InviteAffiliatesUseCase)
        accept = await unit_env.get(AcceptInviteUseCase)
        use_case = await unit_env.get(ResendInviteUseCase)
        club = seed_club(db)
        await invite_affiliates.execute(
            InviteAffiliatesRequest(
                club_user_id=str(club.user_id),
                emails=emails("p@x.io"),
                affiliate_type=AffiliateType.PLAYER,
            )
        )
        [message] = email_client.sent_to("p@x.io")
        await accept.execute(
            AcceptInviteRequest(
                email=Email("p@x.io"),
                code=message.variables["otp"],
                purpose=VerificationPurpose.AFFILIATE_INVITE,
            )
        )
        [affiliate] = db.affiliates.values()

        with pytest.raises(InviteAlreadyClaimedError):
            await use_case.execute(ResendInviteRequest(affiliate_id=str(affiliate.id)))

        assert affiliate.status == AffiliateStatus.ACTIVE
        assert len(email_client.sent_to("p@x.io")) == 1

    @pytest.mark.asyncio
    async def test_delivery_failure_is_reported(self, unit_env):
        db = await unit_env.get(InMemoryDatabase)
        use_case = await unit_env.get(ResendInviteUseCase)
        email_client = await unit_env.get(MockEmailClient)
        email_client.failing_recipients.add("p@x.io")
        club = seed_club(db)
        affiliate = seed_affiliate(db, club, "p@x.io")

        with pytest.raises(NotificationError):
            await use_case.execute(ResendInviteRequest(affiliate_id=str(affiliate.id)))

    @pytest.mark.asyncio
    async def test_unknown_affiliate_is_not_found(self, unit_env):
        use_case = await unit_env.get(ResendInviteUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(ResendInviteRequest(affiliate_id=str(uuid4())))
