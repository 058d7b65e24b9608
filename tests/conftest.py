"""Test configuration and helpers."""

from uuid import uuid4

from roster.domain.model import Affiliate, Club, OnboardingProgress, User
from roster.domain.value import (
    AffiliateId,
    AffiliateStatus,
    AffiliateType,
    ClubId,
    Email,
    RefCode,
    UserId,
    UserStatus,
    UserType,
)
from roster.persistence.repository.inmemory import InMemoryDatabase


def emails(*addresses: str) -> list[Email]:
    """Build a list of Email values."""
    return [Email(address) for address in addresses]


def make_user(
    email: str,
    user_type: UserType = UserType.PLAYER,
    status: UserStatus = UserStatus.ACTIVE,
    name: str | None = None,
) -> User:
    """Build a user with a fresh ID."""
    return User(
        id=UserId(uuid4()),
        email=Email(email),
        user_type=user_type,
        status=status,
        name=name,
    )


def seed_user(db: InMemoryDatabase, user: User) -> User:
    """Insert a user directly into the in-memory tables."""
    db.users[user.id] = user
    return user


def seed_club(
    db: InMemoryDatabase,
    email: str = "owner@club.test",
    name: str | None = "Riverside FC",
    ref_code: str = "RIVER001",
) -> Club:
    """Insert an active club account with its club profile."""
    owner = seed_user(
        db, make_user(email, UserType.CLUB, UserStatus.ACTIVE, name=name)
    )
    club = Club(id=ClubId(uuid4()), user_id=owner.id, ref_code=RefCode(ref_code))
    db.clubs[club.id] = club
    return club


def seed_affiliate(
    db: InMemoryDatabase,
    club: Club,
    email: str,
    affiliate_type: AffiliateType = AffiliateType.PLAYER,
    status: AffiliateStatus = AffiliateStatus.PENDING,
    is_approved: bool = False,
    with_user: bool = True,
) -> Affiliate:
    """Insert an affiliate invite, with its pending account by default."""
    user_id = None
    if with_user:
        user = seed_user(
            db,
            make_user(email, affiliate_type.user_type, UserStatus.PENDING),
        )
        user_id = user.id
        db.onboarding[user.id] = OnboardingProgress.initial(
            user.id, affiliate_type.user_type
        )
    affiliate = Affiliate(
        id=AffiliateId(uuid4()),
        club_id=club.id,
        email=Email(email),
        type=affiliate_type,
        user_id=user_id,
        status=status,
        is_approved=is_approved,
        ref_code=club.ref_code,
    )
    db.affiliates[affiliate.id] = affiliate
    return affiliate
