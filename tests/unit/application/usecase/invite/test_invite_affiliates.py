"""Unit tests for InviteAffiliatesUseCase."""

from uuid import uuid4

import pytest

from roster.adapter.email import MockEmailClient
from roster.application.usecase.invite import (
    InviteAffiliatesRequest,
    InviteAffiliatesUseCase,
)
from roster.domain.error import NotFoundError
from roster.domain.model import SkippedEmail
from roster.domain.value import AffiliateType, RefCode
from roster.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import emails, make_user, seed_affiliate, seed_club, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestInviteAffiliatesUseCase:
    """Tests for InviteAffiliatesUseCase."""

    @pytest.mark.asyncio
    async def test_players_get_club_ref_code_and_name(self, unit_env):
        db = await unit_env.get(InMemoryDatabase)
        use_case = await unit_env.get(InviteAffiliatesUseCase)
        email_client = await unit_env.get(MockEmailClient)
        club = seed_club(db, name="Riverside FC", ref_code="RIVER001")

        outcome = await use_case.execute(
            InviteAffiliatesRequest(
                club_user_id=str(club.user_id),
                emails=emails("p1@x.io", "p2@x.io"),
                affiliate_type=AffiliateType.PLAYER,
            )
        )

        assert outcome.processed == ["p1@x.io", "p2@x.io"]
        affiliates = list(db.affiliates.values())
        assert len(affiliates) == 2
        assert all(a.ref_code == RefCode("RIVER001") for a in affiliates)
        assert all(a.is_approved is False for a in affiliates)
        [message] = email_client.sent_to("p1@x.io")
        assert message.template == "invite-player-supporter"
        assert message.variables["clubName"] == "Riverside FC"
        assert message.variables["userRole"] == "player"

    @pytest.mark.asyncio
    async def test_unnamed_club_falls_back_to_default_name(self, unit_env):
        db = await unit_env.get(InMemoryDatabase)
        use_case = await unit_env.get(InviteAffiliatesUseCase)
        email_client = await unit_env.get(MockEmailClient)
        club = seed_club(db, name=None)

        await use_case.execute(
            InviteAffiliatesRequest(
                club_user_id=str(club.user_id),
                emails=emails("fan@x.io"),
                affiliate_type=AffiliateType.SUPPORTER,
            )
        )

        [message] = email_client.sent
        assert message.variables["clubName"] == "Club"

    @pytest.mark.asyncio
    async def test_existing_account_and_relation_are_skipped(self, unit_env):
        db = await unit_env.get(InMemoryDatabase)
        use_case = await unit_env.get(InviteAffiliatesUseCase)
        club = seed_club(db)
        seed_user(db, make_user("taken@x.io"))
        seed_affiliate(db, club, "invited@x.io", with_user=False)

        outcome = await use_case.execute(
            InviteAffiliatesRequest(
                club_user_id=str(club.user_id),
                emails=emails("taken@x.io", "invited@x.io", "new@x.io"),
                affiliate_type=AffiliateType.PLAYER,
            )
        )

        assert outcome.processed == ["new@x.io"]
        assert outcome.skipped == [
            SkippedEmail(
                email="taken@x.io",
                reason="An account with this email already exists.",
            ),
            SkippedEmail(
                email="invited@x.io",
                reason="An invitation has already been sent to this email.",
            ),
        ]

    @pytest.mark.asyncio
    async def test_caller_without_club_is_not_found(self, unit_env):
        db = await unit_env.get(InMemoryDatabase)
        use_case = await unit_env.get(InviteAffiliatesUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                InviteAffiliatesRequest(
                    club_user_id=str(uuid4()),
                    emails=emails("p@x.io"),
                    affiliate_type=AffiliateType.PLAYER,
                )
            )

        assert db.users == {}
