"""Unit tests for InviteClubsUseCase."""

import pytest

from roster.adapter.email import MockEmailClient
from roster.application.usecase.invite import InviteClubsRequest, InviteClubsUseCase
from roster.domain.error import ValidationError
from roster.domain.model import SkippedEmail
from roster.domain.value import UserType
from roster.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import emails, make_user, seed_club, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestInviteClubsUseCase:
    """Tests for InviteClubsUseCase."""

    @pytest.mark.asyncio
    async def test_new_emails_are_processed(self, unit_env):
        db = await unit_env.get(InMemoryDatabase)
        use_case = await unit_env.get(InviteClubsUseCase)
        email_client = await unit_env.get(MockEmailClient)

        outcome = await use_case.execute(
            InviteClubsRequest(emails=emails("a@club.io", "b@club.io"))
        )

        assert outcome.processed == ["a@club.io", "b@club.io"]
        assert outcome.skipped == []
        assert len(db.clubs) == 2
        assert {m.to for m in email_client.sent} == {"a@club.io", "b@club.io"}
        assert all(m.template == "invite-club" for m in email_client.sent)
        assert all(m.variables["clubName"] == "Roster" for m in email_client.sent)

    @pytest.mark.asyncio
    async def test_mixed_batch(self, unit_env):
        """Each unique email lands in exactly one list with a fixed reason."""
        db = await unit_env.get(InMemoryDatabase)
        use_case = await unit_env.get(InviteClubsUseCase)
        seed_user(db, make_user("player@x.io", UserType.PLAYER))
        seed_club(db, email="owner@club.test")

        outcome = await use_case.execute(
            InviteClubsRequest(
                emails=emails(
                    "new@club.io", "player@x.io", "NEW@club.io", "owner@club.test"
                )
            )
        )

        assert outcome.processed == ["new@club.io"]
        assert outcome.skipped == [
            SkippedEmail(
                email="player@x.io", reason="A user with this email already exists."
            ),
            SkippedEmail(
                email="owner@club.test",
                reason="A user with this email already exists.",
            ),
        ]

    @pytest.mark.asyncio
    async def test_notification_failure_keeps_records(self, unit_env):
        """A failed email skips the address but the pending account stays."""
        db = await unit_env.get(InMemoryDatabase)
        use_case = await unit_env.get(InviteClubsUseCase)
        email_client = await unit_env.get(MockEmailClient)
        email_client.failing_recipients.add("down@club.io")

        outcome = await use_case.execute(
            InviteClubsRequest(emails=emails("ok@club.io", "down@club.io"))
        )

        assert outcome.processed == ["ok@club.io"]
        assert outcome.skipped == [
            SkippedEmail(
                email="down@club.io",
                reason="System error while creating club invite",
            )
        ]
        assert {u.email.root for u in db.users.values()} == {
            "ok@club.io",
            "down@club.io",
        }

        # Re-inviting does not create a duplicate account
        email_client.failing_recipients.clear()
        retry = await use_case.execute(
            InviteClubsRequest(emails=emails("down@club.io"))
        )

        assert retry.processed == []
        assert retry.skipped[0].reason == "A user with this email already exists."
        assert len(db.users) == 2

    @pytest.mark.asyncio
    async def test_oversized_batch_is_rejected(self, unit_env):
        db = await unit_env.get(InMemoryDatabase)
        use_case = await unit_env.get(InviteClubsUseCase)
        limit = use_case.settings.invitations.max_batch_size

        with pytest.raises(ValidationError):
            await use_case.execute(
                InviteClubsRequest(
                    emails=emails(*[f"c{i}@club.io" for i in range(limit + 1)])
                )
            )

        assert db.users == {}

    @pytest.mark.asyncio
    async def test_empty_batch_is_a_request_error(self):
        with pytest.raises(ValueError):
            InviteClubsRequest(emails=[])
