"""SQLAlchemy table definitions for Agora.

These table definitions are used with SQLAlchemy Core; rows are mapped to
domain models by hand (see mappers.py). They match the schema defined in
Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (mirrored from the host platform)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("tenant_id", UUID, nullable=False),
    Column("name", String(255), nullable=False),
    Column("nickname", String(50), nullable=False),
    Column("email", String(255), nullable=True),  # Notification address
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("tenant_id", "nickname", name="uq_users_tenant_nickname"),
)

Index("idx_users_tenant_id", users_table.c.tenant_id)

# ============================================================================
# USER GROUPS TABLE
# ============================================================================
user_groups_table = Table(
    "user_groups",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("tenant_id", UUID, nullable=False),
    Column("name", String(255), nullable=False),
    Column("verified_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_user_groups_tenant_id", user_groups_table.c.tenant_id)

# ============================================================================
# USER GROUP MEMBERSHIPS TABLE (junction table)
# ============================================================================
user_group_memberships_table = Table(
    "user_group_memberships",
    metadata,
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "user_group_id",
        UUID,
        ForeignKey("user_groups.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "user_group_id", name="uq_user_group_membership"),
)

Index("idx_user_group_memberships_user_id", user_group_memberships_table.c.user_id)

# ============================================================================
# COMMENTABLES TABLE (host entities registered for comments)
# ============================================================================
commentables_table = Table(
    "commentables",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("tenant_id", UUID, nullable=False),
    Column("commentable_type", String(50), nullable=False),
    Column("title", String(300), nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column("allows_alignment", Boolean, nullable=False, server_default="false"),
    Column("allows_votes", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("commentable_type", "id", name="uq_commentables_type_id"),
)

Index(
    "idx_commentables_tenant_ref",
    commentables_table.c.tenant_id,
    commentables_table.c.commentable_type,
    commentables_table.c.id,
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("tenant_id", UUID, nullable=False),
    Column("commentable_type", String(50), nullable=False),
    Column(
        "commentable_id",
        UUID,
        ForeignKey("commentables.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "author_kind",
        Enum("user", "user_group", name="author_kind", create_type=False),
        nullable=False,
        server_default="user",
    ),
    Column(
        "author_user_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_user_group_id",
        UUID,
        ForeignKey("user_groups.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("author_name", String(255), nullable=False),  # Denormalized display name
    Column("body", Text, nullable=False),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column(
        "alignment",
        Enum("favor", "against", "neutral", name="alignment", create_type=False),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("depth >= 0", name="depth_non_negative"),
    CheckConstraint(
        "(author_kind = 'user_group') = (author_user_group_id IS NOT NULL)",
        name="group_author_has_group",
    ),
)

Index(
    "idx_comments_commentable",
    comments_table.c.tenant_id,
    comments_table.c.commentable_type,
    comments_table.c.commentable_id,
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_created_at", comments_table.c.created_at)

# ============================================================================
# COMMENT VOTES TABLE
# ============================================================================
comment_votes_table = Table(
    "comment_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("tenant_id", UUID, nullable=False),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("weight", SmallInteger, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("weight IN (1, -1)", name="weight_is_unit"),
    # One vote per author per comment; re-votes update this row
    UniqueConstraint("comment_id", "author_id", name="uq_comment_votes_comment_author"),
)

Index("idx_comment_votes_author_id", comment_votes_table.c.author_id)
