"""Unit tests for DeclineInviteUseCase."""

import pytest

from roster.adapter.email import MockEmailClient
from roster.application.usecase.invite import DeclineInviteRequest, DeclineInviteUseCase
from roster.domain.error import InviteAlreadyClaimedError
from roster.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import seed_affiliate, seed_club
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDeclineInviteUseCase:
    """Tests for DeclineInviteUseCase."""

    @pytest.mark.asyncio
    async def test_decline_removes_records_and_notifies(self, unit_env):
        db = await unit_env.get(InMemoryDatabase)
        use_case = await unit_env.get(DeclineInviteUseCase)
        email_client = await unit_env.get(MockEmailClient)
        club = seed_club(db)
        affiliate = seed_affiliate(db, club, "p@x.io")

        response = await use_case.execute(
            DeclineInviteRequest(affiliate_id=str(affiliate.id))
        )

        assert response.notified is True
        assert affiliate.id not in db.affiliates
        assert affiliate.user_id not in db.users
        [message] = email_client.sent
        assert message.template == "decline-affiliate-invite"

    @pytest.mark.asyncio
    async def test_notice_failure_does_not_undo_decline(self, unit_env):
        db = await unit_env.get(InMemoryDatabase)
        use_case = await unit_env.get(DeclineInviteUseCase)
        email_client = await unit_env.get(MockEmailClient)
        email_client.failing_recipients.add("p@x.io")
        club = seed_club(db)
        affiliate = seed_affiliate(db, club, "p@x.io")

        response = await use_case.execute(
            DeclineInviteRequest(affiliate_id=str(affiliate.id))
        )

        assert response.notified is False
        assert affiliate.id not in db.affiliates

    @pytest.mark.asyncio
    async def test_approved_invite_is_kept(self, unit_env):
        db = await unit_env.get(InMemoryDatabase)
        use_case = await unit_env.get(DeclineInviteUseCase)
        club = seed_club(db)
        affiliate = seed_affiliate(db, club, "acme@x.io", is_approved=True)

        with pytest.raises(InviteAlreadyClaimedError):
            await use_case.execute(DeclineInviteRequest(affiliate_id=str(affiliate.id)))

        assert affiliate.id in db.affiliates
