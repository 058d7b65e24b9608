"""initial_schema

Create the Roster schema:
- Users (admin, club, company, player and supporter accounts)
- Clubs (reference code per club account)
- Affiliates (players, supporters and companies invited to a club)
- Onboarding progress (remaining steps per account)
- Verification codes (hashed one-time codes sent with invitations)

Revision ID: 3c1f0a9d5e27
Revises:
Create Date: 2026-10-16 09:12:44.318220

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d5e27"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _created_at_column() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _id_column(),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("user_type", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("name", sa.String(255), nullable=True),
        _created_at_column(),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.CheckConstraint(
            "user_type IN ('admin', 'club', 'company', 'player', 'supporter')",
            name="ck_users_user_type",
        ),
        sa.CheckConstraint("status IN ('pending', 'active')", name="ck_users_status"),
    )

    # ========================================================================
    # CLUBS table
    # ========================================================================
    op.create_table(
        "clubs",
        _id_column(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("ref_code", sa.String(32), nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("user_id"),
        sa.UniqueConstraint("ref_code", name="uq_clubs_ref_code"),
    )

    # ========================================================================
    # AFFILIATES table
    # ========================================================================
    op.create_table(
        "affiliates",
        _id_column(),
        sa.Column("club_id", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("is_approved", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("by_admin", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("ref_code", sa.String(32), nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["club_id"], ["clubs.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
        sa.CheckConstraint(
            "type IN ('player', 'supporter', 'company')", name="ck_affiliates_type"
        ),
    )
    op.create_index(
        "idx_affiliates_club_email", "affiliates", ["club_id", "email"]
    )
    op.create_index("idx_affiliates_user_id", "affiliates", ["user_id"])

    # ========================================================================
    # ONBOARDING_PROGRESS table
    # ========================================================================
    op.create_table(
        "onboarding_progress",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "remaining_steps",
            postgresql.ARRAY(sa.Integer()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("user_id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
    )

    # ========================================================================
    # VERIFICATION_CODES table
    # ========================================================================
    op.create_table(
        "verification_codes",
        _id_column(),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("purpose", sa.String(30), nullable=False),
        sa.Column("hashed_code", sa.String(255), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        sa.Column("attempts", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("max_attempts", sa.Integer(), nullable=False, server_default="5"),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("last_attempt_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("user_id", sa.UUID(), nullable=True),
        sa.Column("affiliate_id", sa.UUID(), nullable=True),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["affiliate_id"], ["affiliates.id"], ondelete="CASCADE"
        ),
        sa.CheckConstraint(
            "status IN ('active', 'used', 'revoked', 'expired')",
            name="ck_verification_codes_status",
        ),
    )
    op.create_index(
        "idx_verification_codes_lookup",
        "verification_codes",
        ["email", "purpose", "status"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("verification_codes")
    op.drop_table("onboarding_progress")
    op.drop_table("affiliates")
    op.drop_table("clubs")
    op.drop_table("users")
