"""Batch classification of invited emails against existing records."""

import logfire

from roster.domain.error import ExistenceLookupError
from roster.domain.model.invitation import InviteeClassification, InviteeStatus
from roster.domain.repository import (
    AffiliateRepository,
    ClubRepository,
    UserRepository,
)
from roster.domain.value import ClubId, Email

from .base import Service


def unique_emails(emails: list[Email]) -> list[Email]:
    """Drop repeated emails, keeping the first occurrence.

    Emails are already normalized, so ``Foo@x.io`` and ``foo@x.io`` collapse.
    """
    seen: set[str] = set()
    unique: list[Email] = []
    for email in emails:
        if email.root not in seen:
            seen.add(email.root)
            unique.append(email)
    return unique


def classify(
    emails: list[Email],
    existing_accounts: set[str],
    existing_relations: set[str],
) -> InviteeClassification:
    """Classify each email from the two lookup results.

    An existing account takes priority over an existing relation.

    Args:
        emails: Unique, normalized emails in input order
        existing_accounts: Emails that already have a user
        existing_relations: Emails already related to the inviting scope

    Returns:
        Classification keyed by email, in input order
    """
    statuses: dict[str, InviteeStatus] = {}
    for email in emails:
        if email.root in existing_accounts:
            statuses[email.root] = InviteeStatus.ALREADY_AN_ACCOUNT
        elif email.root in existing_relations:
            statuses[email.root] = InviteeStatus.ALREADY_RELATED
        else:
            statuses[email.root] = InviteeStatus.ELIGIBLE
    return InviteeClassification(statuses=statuses)


class DedupService(Service):
    """Resolves which invited emails may go through the invitation path.

    Each classification costs exactly two bulk lookups, whatever the batch
    size. The result is best effort: a record created after the lookup is
    not seen.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        club_repository: ClubRepository,
        affiliate_repository: AffiliateRepository,
    ) -> None:
        """Initialize dedup service.

        Args:
            user_repository: User repository
            club_repository: Club repository
            affiliate_repository: Affiliate repository
        """
        self.user_repository = user_repository
        self.club_repository = club_repository
        self.affiliate_repository = affiliate_repository

    async def classify_for_clubs(self, emails: list[Email]) -> InviteeClassification:
        """Classify emails for a club (organization) invite batch.

        Args:
            emails: Invited emails, possibly with repeats

        Returns:
            Classification of the unique emails

        Raises:
            ExistenceLookupError: If either lookup fails
        """
        batch = unique_emails(emails)
        with logfire.span("dedup_service.classify_for_clubs", email_count=len(batch)):
            try:
                existing_users = await self.user_repository.find_existing_emails(batch)
                existing_clubs = await self.club_repository.find_existing_emails(batch)
            except Exception as e:
                logfire.error(
                    "Existing record lookup failed",
                    scope="clubs",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise ExistenceLookupError(str(e)) from e

            classification = classify(batch, existing_users, existing_clubs)
            logfire.info(
                "Club invitees classified",
                email_count=len(batch),
                eligible=len(classification.eligible),
            )
            return classification

    async def classify_for_affiliates(
        self, emails: list[Email], club_id: ClubId
    ) -> InviteeClassification:
        """Classify emails for an affiliate invite batch of one club.

        Args:
            emails: Invited emails, possibly with repeats
            club_id: Club the affiliates would join

        Returns:
            Classification of the unique emails

        Raises:
            ExistenceLookupError: If either lookup fails
        """
        batch = unique_emails(emails)
        with logfire.span(
            "dedup_service.classify_for_affiliates",
            club_id=str(club_id),
            email_count=len(batch),
        ):
            try:
                existing_users = await self.user_repository.find_existing_emails(batch)
                existing_affiliates = (
                    await self.affiliate_repository.find_existing_emails(batch, club_id)
                )
            except Exception as e:
                logfire.error(
                    "Existing record lookup failed",
                    scope="affiliates",
                    club_id=str(club_id),
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise ExistenceLookupError(str(e)) from e

            classification = classify(batch, existing_users, existing_affiliates)
            logfire.info(
                "Affiliate invitees classified",
                club_id=str(club_id),
                email_count=len(batch),
                eligible=len(classification.eligible),
            )
            return classification
