"""SQLAlchemy table definitions for Roster.

They match the schema created by the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False),
    Column("user_type", String(20), nullable=False),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("name", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # Concurrent invites for the same email fail here at insert time
    UniqueConstraint("email", name="uq_users_email"),
    CheckConstraint(
        "user_type IN ('admin', 'club', 'company', 'player', 'supporter')",
        name="ck_users_user_type",
    ),
    CheckConstraint("status IN ('pending', 'active')", name="ck_users_status"),
)

# ============================================================================
# CLUBS TABLE
# ============================================================================
clubs_table = Table(
    "clubs",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "user_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    ),
    Column("ref_code", String(32), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("ref_code", name="uq_clubs_ref_code"),
)

# ============================================================================
# AFFILIATES TABLE
# ============================================================================
affiliates_table = Table(
    "affiliates",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("club_id", UUID, ForeignKey("clubs.id", ondelete="CASCADE"), nullable=False),
    Column("email", String(255), nullable=False),
    Column("type", String(20), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("is_approved", Boolean, nullable=False, server_default="false"),
    Column("by_admin", Boolean, nullable=False, server_default="false"),
    Column("ref_code", String(32), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "type IN ('player', 'supporter', 'company')", name="ck_affiliates_type"
    ),
)

Index("idx_affiliates_club_email", affiliates_table.c.club_id, affiliates_table.c.email)
Index("idx_affiliates_user_id", affiliates_table.c.user_id)

# ============================================================================
# ONBOARDING PROGRESS TABLE
# ============================================================================
onboarding_progress_table = Table(
    "onboarding_progress",
    metadata,
    Column(
        "user_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("remaining_steps", ARRAY(Integer), nullable=False, server_default="{}"),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# VERIFICATION CODES TABLE
# ============================================================================
verification_codes_table = Table(
    "verification_codes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False),
    Column("purpose", String(30), nullable=False),
    Column("hashed_code", String(255), nullable=False),
    Column("status", String(20), nullable=False, server_default="active"),
    Column("attempts", Integer, nullable=False, server_default="0"),
    Column("max_attempts", Integer, nullable=False, server_default="5"),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column("last_attempt_at", TIMESTAMP(timezone=True), nullable=True),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=True),
    Column(
        "affiliate_id",
        UUID,
        ForeignKey("affiliates.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "status IN ('active', 'used', 'revoked', 'expired')",
        name="ck_verification_codes_status",
    ),
)

Index(
    "idx_verification_codes_lookup",
    verification_codes_table.c.email,
    verification_codes_table.c.purpose,
    verification_codes_table.c.status,
)
