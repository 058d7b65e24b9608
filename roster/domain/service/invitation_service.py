"""Invitation domain service.

Creates the records behind one invited email atomically, issues the
verification code once those records are committed, and handles the
invite lifecycle afterwards (re-issue, decline, acceptance).
"""

from uuid import uuid4

import logfire

from roster.domain.error import (
    InvitationCreationError,
    InviteAlreadyClaimedError,
    NotFoundError,
)
from roster.domain.model.affiliate import Affiliate
from roster.domain.model.club import Club
from roster.domain.model.common import utcnow
from roster.domain.model.invitation import CreatedInvite
from roster.domain.model.onboarding import OnboardingProgress
from roster.domain.model.user import User
from roster.domain.model.verification_code import VerificationCode
from roster.domain.repository import TransactionManager
from roster.domain.value import (
    AffiliateId,
    AffiliateStatus,
    AffiliateType,
    ClubId,
    Email,
    UserId,
    UserStatus,
    UserType,
    VerificationPurpose,
)

from .base import Service
from .ref_code_service import RefCodeService
from .verification_service import VerificationCodeService


class InvitationService(Service):
    """Domain service for invitation records."""

    def __init__(
        self,
        transaction_manager: TransactionManager,
        ref_code_service: RefCodeService,
        verification_service: VerificationCodeService,
    ) -> None:
        """Initialize invitation service.

        Args:
            transaction_manager: Opens one transaction per invited email
            ref_code_service: Reference code generator for new clubs
            verification_service: Issues codes after records are committed
        """
        self.transaction_manager = transaction_manager
        self.ref_code_service = ref_code_service
        self.verification_service = verification_service

    async def create_club_invite(self, email: Email) -> CreatedInvite:
        """Create a pending club account with its club profile.

        The user, the club and the onboarding record are written in one
        transaction: either all exist afterwards or none does.

        Args:
            email: Eligible invitee email

        Returns:
            The created records' identifiers

        Raises:
            InvitationCreationError: If the transaction failed (rolled back)
        """
        with logfire.span("invitation_service.create_club_invite", email=email.root):
            try:
                async with self.transaction_manager.transaction() as uow:
                    user = await uow.users.save(
                        User(
                            id=UserId(uuid4()),
                            email=email,
                            user_type=UserType.CLUB,
                            status=UserStatus.PENDING,
                        )
                    )
                    ref_code = await self.ref_code_service.generate_unique(uow.clubs)
                    club = await uow.clubs.save(
                        Club(id=ClubId(uuid4()), user_id=user.id, ref_code=ref_code)
                    )
                    await uow.onboarding.save(
                        OnboardingProgress.initial(user.id, UserType.CLUB)
                    )
            except Exception as e:
                logfire.error(
                    "Club invite transaction failed",
                    email=email.root,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise InvitationCreationError(email.root, str(e)) from e

            logfire.info(
                "Club invite created",
                email=email.root,
                user_id=str(user.id),
                club_id=str(club.id),
            )
            return CreatedInvite(
                email=email, user_id=user.id, ref_code=club.ref_code, club_id=club.id
            )

    async def create_affiliate_invite(
        self,
        email: Email,
        club: Club,
        affiliate_type: AffiliateType,
        by_admin: bool = False,
    ) -> CreatedInvite:
        """Create a pending affiliate account linked to a club.

        Args:
            email: Eligible invitee email
            club: Inviting club, whose reference code the affiliate inherits
            affiliate_type: Player, supporter or company
            by_admin: Whether an admin created the invite (pre-approved)

        Returns:
            The created records' identifiers

        Raises:
            InvitationCreationError: If the transaction failed (rolled back)
        """
        user_type = affiliate_type.user_type
        with logfire.span(
            "invitation_service.create_affiliate_invite",
            email=email.root,
            club_id=str(club.id),
            affiliate_type=affiliate_type.value,
            by_admin=by_admin,
        ):
            try:
                async with self.transaction_manager.transaction() as uow:
                    user = await uow.users.save(
                        User(
                            id=UserId(uuid4()),
                            email=email,
                            user_type=user_type,
                            status=UserStatus.PENDING,
                        )
                    )
                    affiliate = await uow.affiliates.save(
                        Affiliate(
                            id=AffiliateId(uuid4()),
                            club_id=club.id,
                            email=email,
                            type=affiliate_type,
                            user_id=user.id,
                            status=AffiliateStatus.PENDING,
                            is_approved=by_admin,
                            by_admin=by_admin,
                            ref_code=club.ref_code,
                        )
                    )
                    await uow.onboarding.save(
                        OnboardingProgress.initial(user.id, user_type)
                    )
            except Exception as e:
                logfire.error(
                    "Affiliate invite transaction failed",
                    email=email.root,
                    club_id=str(club.id),
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise InvitationCreationError(email.root, str(e)) from e

            logfire.info(
                "Affiliate invite created",
                email=email.root,
                user_id=str(user.id),
                affiliate_id=str(affiliate.id),
                club_id=str(club.id),
            )
            return CreatedInvite(
                email=email,
                user_id=user.id,
                ref_code=affiliate.ref_code,
                club_id=club.id,
                affiliate_id=affiliate.id,
            )

    async def issue_code(self, invite: CreatedInvite) -> str:
        """Issue the verification code for committed invite records.

        Args:
            invite: Records returned by one of the create methods

        Returns:
            The plain verification code

        Raises:
            VerificationCodeError: If the code could not be stored
        """
        purpose = (
            VerificationPurpose.AFFILIATE_INVITE
            if invite.affiliate_id is not None
            else VerificationPurpose.CLUB_INVITE
        )
        return await self.verification_service.issue(
            invite.email,
            purpose,
            user_id=invite.user_id,
            affiliate_id=invite.affiliate_id,
        )

    async def reissue_affiliate_code(self, affiliate: Affiliate) -> str:
        """Issue a new code for a pending affiliate invite.

        Args:
            affiliate: Affiliate whose invite is re-sent

        Returns:
            The plain verification code

        Raises:
            InviteAlreadyClaimedError: If the invitee already claimed the invite
            VerificationCodeError: If the code could not be stored
        """
        with logfire.span(
            "invitation_service.reissue_affiliate_code",
            affiliate_id=str(affiliate.id),
        ):
            claimed = affiliate.status != AffiliateStatus.PENDING
            if affiliate.user_id is not None and claimed:
                logfire.warn("Invite already claimed", affiliate_id=str(affiliate.id))
                raise InviteAlreadyClaimedError(str(affiliate.id))

            return await self.verification_service.issue(
                affiliate.email,
                VerificationPurpose.AFFILIATE_INVITE,
                affiliate_id=affiliate.id,
            )

    async def decline_affiliate_invite(self, affiliate_id: AffiliateId) -> Affiliate:
        """Delete an unapproved affiliate invite and its pending account.

        Both deletions happen in one transaction.

        Args:
            affiliate_id: Affiliate to decline

        Returns:
            The deleted affiliate

        Raises:
            NotFoundError: If the affiliate does not exist
            InviteAlreadyClaimedError: If the invite was already approved
        """
        with logfire.span(
            "invitation_service.decline_affiliate_invite",
            affiliate_id=str(affiliate_id),
        ):
            async with self.transaction_manager.transaction() as uow:
                affiliate = await uow.affiliates.find_by_id(affiliate_id)
                if affiliate is None:
                    logfire.warn("Invite not found", affiliate_id=str(affiliate_id))
                    raise NotFoundError("Invite", str(affiliate_id))
                if affiliate.is_approved:
                    logfire.warn(
                        "Cannot decline approved invite", affiliate_id=str(affiliate_id)
                    )
                    raise InviteAlreadyClaimedError(str(affiliate_id))

                await uow.affiliates.delete(affiliate.id)
                if affiliate.user_id is not None:
                    await uow.users.delete(affiliate.user_id)

            logfire.info(
                "Invite declined",
                affiliate_id=str(affiliate_id),
                email=affiliate.email.root,
            )
            return affiliate

    async def activate_invited_account(self, code: VerificationCode) -> User:
        """Activate the pending account a verified invite code belongs to.

        Args:
            code: Verification code that was just accepted

        Returns:
            The activated user

        Raises:
            NotFoundError: If the invited account no longer exists
        """
        with logfire.span(
            "invitation_service.activate_invited_account",
            email=code.email.root,
            purpose=code.purpose.value,
        ):
            async with self.transaction_manager.transaction() as uow:
                user = None
                if code.user_id is not None:
                    user = await uow.users.find_by_id(code.user_id)
                if user is None:
                    user = await uow.users.find_by_email(code.email)
                if user is None:
                    raise NotFoundError("User", code.email.root)

                if user.status != UserStatus.ACTIVE:
                    user = await uow.users.save(
                        user.model_copy(
                            update={"status": UserStatus.ACTIVE, "updated_at": utcnow()}
                        )
                    )

                if code.affiliate_id is not None:
                    affiliate = await uow.affiliates.find_by_id(code.affiliate_id)
                    if affiliate is not None:
                        await uow.affiliates.save(
                            affiliate.model_copy(
                                update={
                                    "status": AffiliateStatus.ACTIVE,
                                    "user_id": user.id,
                                }
                            )
                        )

            logfire.info(
                "Invited account activated",
                user_id=str(user.id),
                user_type=user.user_type.value,
            )
            return user
