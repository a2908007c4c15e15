"""initial_schema

Create the schema for Agora comments:
- Users and user groups (mirrored from the host platform)
- Commentables (host entities registered with their comment features)
- Comments (threaded, optionally authored as a verified user group)
- Comment votes (one +1/-1 vote per user per comment)

Revision ID: 3f2c9a7d1b04
Revises:
Create Date: 2026-10-17 10:12:44.318210

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f2c9a7d1b04"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str, nullable: bool = False) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=nullable,
        server_default=None if nullable else sa.text("NOW()"),
    )


def _uuid_pk() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    # Enable required extensions
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE author_kind AS ENUM ('user', 'user_group');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE alignment AS ENUM ('favor', 'against', 'neutral');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _uuid_pk(),
        sa.Column("tenant_id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("nickname", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("tenant_id", "nickname", name="uq_users_tenant_nickname"),
    )
    op.create_index("idx_users_tenant_id", "users", ["tenant_id"])

    # ========================================================================
    # USER_GROUPS table
    # ========================================================================
    op.create_table(
        "user_groups",
        _uuid_pk(),
        sa.Column("tenant_id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        _timestamp("verified_at", nullable=True),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_user_groups_tenant_id", "user_groups", ["tenant_id"])

    # ========================================================================
    # USER_GROUP_MEMBERSHIPS table (junction)
    # ========================================================================
    op.create_table(
        "user_group_memberships",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("user_group_id", sa.UUID(), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["user_group_id"], ["user_groups.id"], ondelete="CASCADE"
        ),
        sa.UniqueConstraint(
            "user_id", "user_group_id", name="uq_user_group_membership"
        ),
    )
    op.create_index(
        "idx_user_group_memberships_user_id", "user_group_memberships", ["user_id"]
    )

    # ========================================================================
    # COMMENTABLES table
    # ========================================================================
    op.create_table(
        "commentables",
        _uuid_pk(),
        sa.Column("tenant_id", sa.UUID(), nullable=False),
        sa.Column("commentable_type", sa.String(50), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=True),
        sa.Column(
            "allows_alignment", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("allows_votes", sa.Boolean(), nullable=False, server_default="false"),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("commentable_type", "id", name="uq_commentables_type_id"),
    )
    op.create_index(
        "idx_commentables_tenant_ref",
        "commentables",
        ["tenant_id", "commentable_type", "id"],
    )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _uuid_pk(),
        sa.Column("tenant_id", sa.UUID(), nullable=False),
        sa.Column("commentable_type", sa.String(50), nullable=False),
        sa.Column("commentable_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column(
            "author_kind",
            postgresql.ENUM("user", "user_group", name="author_kind", create_type=False),
            nullable=False,
            server_default="user",
        ),
        sa.Column("author_user_id", sa.UUID(), nullable=False),
        sa.Column("author_user_group_id", sa.UUID(), nullable=True),
        sa.Column("author_name", sa.String(255), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("depth", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "alignment",
            postgresql.ENUM(
                "favor", "against", "neutral", name="alignment", create_type=False
            ),
            nullable=True,
        ),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(
            ["commentable_id"], ["commentables.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["author_user_group_id"], ["user_groups.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("depth >= 0", name="depth_non_negative"),
        sa.CheckConstraint(
            "(author_kind = 'user_group') = (author_user_group_id IS NOT NULL)",
            name="group_author_has_group",
        ),
    )
    op.create_index(
        "idx_comments_commentable",
        "comments",
        ["tenant_id", "commentable_type", "commentable_id"],
    )
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index("idx_comments_created_at", "comments", ["created_at"])

    # ========================================================================
    # COMMENT_VOTES table
    # ========================================================================
    op.create_table(
        "comment_votes",
        _uuid_pk(),
        sa.Column("tenant_id", sa.UUID(), nullable=False),
        sa.Column("comment_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("weight", sa.SmallInteger(), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("weight IN (1, -1)", name="weight_is_unit"),
        sa.UniqueConstraint(
            "comment_id", "author_id", name="uq_comment_votes_comment_author"
        ),
    )
    op.create_index("idx_comment_votes_author_id", "comment_votes", ["author_id"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("comment_votes")
    op.drop_table("comments")
    op.drop_table("commentables")
    op.drop_table("user_group_memberships")
    op.drop_table("user_groups")
    op.drop_table("users")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS alignment")
    op.execute("DROP TYPE IF EXISTS author_kind")

    # Extension left in place, it may be shared with other schemas
