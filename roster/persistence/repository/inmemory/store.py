"""Shared in-memory tables for testing."""

from dataclasses import dataclass, field, fields

from sqlalchemy.exc import IntegrityError

from roster.domain.model import (
    Affiliate,
    Club,
    OnboardingProgress,
    User,
    VerificationCode,
)
from roster.domain.value import AffiliateId, ClubId, UserId, VerificationCodeId


@dataclass
class InMemoryDatabase:
    """Tables shared by the in-memory repositories of one test.

    Transactions work on a snapshot and write back only the rows they
    changed, so concurrent transactions keep each other's writes.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    clubs: dict[ClubId, Club] = field(default_factory=dict)
    affiliates: dict[AffiliateId, Affiliate] = field(default_factory=dict)
    onboarding: dict[UserId, OnboardingProgress] = field(default_factory=dict)
    verification_codes: dict[VerificationCodeId, VerificationCode] = field(
        default_factory=dict
    )

    def snapshot(self) -> "InMemoryDatabase":
        """Copy of every table (rows are immutable, so shallow copies suffice)."""
        return InMemoryDatabase(
            **{f.name: dict(getattr(self, f.name)) for f in fields(self)}
        )

    def apply(self, start: "InMemoryDatabase", staged: "InMemoryDatabase") -> None:
        """Write back the rows a transaction changed since ``start``.

        Raises:
            IntegrityError: If a committed user already holds a staged email
        """
        changes = {}
        for f in fields(self):
            before = getattr(start, f.name)
            after = getattr(staged, f.name)
            upserts = {k: v for k, v in after.items() if before.get(k) is not v}
            deletes = [k for k in before if k not in after]
            changes[f.name] = (upserts, deletes)

        taken = {user.email.root: user.id for user in self.users.values()}
        for user in changes["users"][0].values():
            owner = taken.get(user.email.root)
            if owner is not None and owner != user.id:
                raise IntegrityError(
                    "duplicate key value violates unique constraint uq_users_email",
                    None,
                    Exception(),
                )

        for name, (upserts, deletes) in changes.items():
            table = getattr(self, name)
            table.update(upserts)
            for key in deletes:
                table.pop(key, None)
