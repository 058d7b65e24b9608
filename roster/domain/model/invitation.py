"""Invitation batch models.

A batch call returns one BatchOutcome; nothing here is persisted.
"""

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel

from roster.domain.model.common import DomainModel
from roster.domain.value import AffiliateId, ClubId, Email, RefCode, UserId


class InviteeStatus(str, Enum):
    """Classification of an invited email against existing records."""

    ALREADY_AN_ACCOUNT = "already_an_account"
    ALREADY_RELATED = "already_related"
    ELIGIBLE = "eligible"


class InviteeClassification(DomainModel):
    """Batch classification, keyed by normalized email in input order."""

    statuses: dict[str, InviteeStatus]

    def with_status(self, status: InviteeStatus) -> list[Email]:
        """Emails carrying the given status, in input order."""
        return [
            Email(email) for email, current in self.statuses.items() if current == status
        ]

    @property
    def eligible(self) -> list[Email]:
        return self.with_status(InviteeStatus.ELIGIBLE)


class CreatedInvite(DomainModel):
    """Records created for one invited email."""

    email: Email
    user_id: UserId
    ref_code: RefCode
    club_id: Optional[ClubId] = None
    affiliate_id: Optional[AffiliateId] = None


class Processed(DomainModel):
    """Invite created and email sent."""

    outcome: Literal["processed"] = "processed"
    email: str


class Skipped(DomainModel):
    """Invite not (fully) delivered, with a user-presentable reason."""

    outcome: Literal["skipped"] = "skipped"
    email: str
    reason: str


InviteResult = Union[Processed, Skipped]


class SkippedEmail(BaseModel):
    """Skipped entry of a batch response."""

    email: str
    reason: str


class BatchOutcome(BaseModel):
    """Result of a bulk invitation call.

    Every unique input email appears in exactly one of the two lists.
    """

    processed: list[str]
    skipped: list[SkippedEmail]

    @classmethod
    def from_results(cls, results: list[InviteResult]) -> "BatchOutcome":
        """Split per-email results into the two response lists."""
        processed: list[str] = []
        skipped: list[SkippedEmail] = []
        for result in results:
            if isinstance(result, Processed):
                processed.append(result.email)
            else:
                skipped.append(SkippedEmail(email=result.email, reason=result.reason))
        return cls(processed=processed, skipped=skipped)
