"""Mappers between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from roster.domain.model import (
    Affiliate,
    Club,
    OnboardingProgress,
    User,
    VerificationCode,
)
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
    VerificationCodeId,
    VerificationPurpose,
    VerificationStatus,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return None if value is None else _uuid(value)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        email=Email(row["email"]),
        user_type=UserType(row["user_type"]),
        status=UserStatus(row["status"]),
        name=row.get("name"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "email": user.email.root,
        "user_type": user.user_type.value,
        "status": user.status.value,
        "name": user.name,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_club(row: Dict[str, Any]) -> Club:
    """Convert database row to Club domain model."""
    return Club(
        id=ClubId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        ref_code=RefCode(row["ref_code"]),
        created_at=row["created_at"],
    )


def club_to_dict(club: Club) -> Dict[str, Any]:
    """Convert Club domain model to database dict."""
    return {
        "id": club.id,
        "user_id": club.user_id,
        "ref_code": club.ref_code.root,
        "created_at": club.created_at,
    }


def row_to_affiliate(row: Dict[str, Any]) -> Affiliate:
    """Convert database row to Affiliate domain model."""
    user_id = _optional_uuid(row.get("user_id"))
    return Affiliate(
        id=AffiliateId(_uuid(row["id"])),
        club_id=ClubId(_uuid(row["club_id"])),
        email=Email(row["email"]),
        type=AffiliateType(row["type"]),
        user_id=UserId(user_id) if user_id else None,
        status=AffiliateStatus(row["status"]),
        is_approved=row["is_approved"],
        by_admin=row["by_admin"],
        ref_code=RefCode(row["ref_code"]),
        created_at=row["created_at"],
    )


def affiliate_to_dict(affiliate: Affiliate) -> Dict[str, Any]:
    """Convert Affiliate domain model to database dict."""
    return {
        "id": affiliate.id,
        "club_id": affiliate.club_id,
        "email": affiliate.email.root,
        "type": affiliate.type.value,
        "user_id": affiliate.user_id,
        "status": affiliate.status.value,
        "is_approved": affiliate.is_approved,
        "by_admin": affiliate.by_admin,
        "ref_code": affiliate.ref_code.root,
        "created_at": affiliate.created_at,
    }


def row_to_onboarding(row: Dict[str, Any]) -> OnboardingProgress:
    """Convert database row to OnboardingProgress domain model."""
    return OnboardingProgress(
        user_id=UserId(_uuid(row["user_id"])),
        remaining_steps=frozenset(row["remaining_steps"] or []),
        updated_at=row["updated_at"],
    )


def onboarding_to_dict(progress: OnboardingProgress) -> Dict[str, Any]:
    """Convert OnboardingProgress domain model to database dict.

    Steps are stored sorted so rows are stable.
    """
    return {
        "user_id": progress.user_id,
        "remaining_steps": sorted(progress.remaining_steps),
        "updated_at": progress.updated_at,
    }


def row_to_verification_code(row: Dict[str, Any]) -> VerificationCode:
    """Convert database row to VerificationCode domain model."""
    user_id = _optional_uuid(row.get("user_id"))
    affiliate_id = _optional_uuid(row.get("affiliate_id"))
    return VerificationCode(
        id=VerificationCodeId(_uuid(row["id"])),
        email=Email(row["email"]),
        purpose=VerificationPurpose(row["purpose"]),
        hashed_code=row["hashed_code"],
        expires_at=row["expires_at"],
        user_id=UserId(user_id) if user_id else None,
        affiliate_id=AffiliateId(affiliate_id) if affiliate_id else None,
        status=VerificationStatus(row["status"]),
        attempts=row["attempts"],
        max_attempts=row["max_attempts"],
        last_attempt_at=row.get("last_attempt_at"),
        created_at=row["created_at"],
    )


def verification_code_to_dict(code: VerificationCode) -> Dict[str, Any]:
    """Convert VerificationCode domain model to database dict."""
    return {
        "id": code.id,
        "email": code.email.root,
        "purpose": code.purpose.value,
        "hashed_code": code.hashed_code,
        "status": code.status.value,
        "attempts": code.attempts,
        "max_attempts": code.max_attempts,
        "expires_at": code.expires_at,
        "last_attempt_at": code.last_attempt_at,
        "user_id": code.user_id,
        "affiliate_id": code.affiliate_id,
        "created_at": code.created_at,
    }
