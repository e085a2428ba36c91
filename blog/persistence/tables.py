"""SQLAlchemy table definitions for the blog comment service.

These tables are used with SQLAlchemy Core; domain models are mapped by hand
(see ``mappers``). They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    ForeignKey,
    Index,
    MetaData,
    Sequence,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# Comment ids come from this sequence so they can be allocated before insert
comments_id_seq = Sequence("comments_id_seq", metadata=metadata)

REPORT_REASONS = (
    "spam",
    "harassment",
    "abuse",
    "inappropriate",
    "misinformation",
    "other",
)
REPORT_STATUSES = ("pending", "reviewed", "resolved", "dismissed")

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", BigInteger, primary_key=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=True, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", BigInteger, primary_key=True),
    Column(
        "user_id",
        BigInteger,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("title", String(255), nullable=False),
    Column("content", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_user_id", posts_table.c.user_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column(
        "id",
        BigInteger,
        comments_id_seq,
        primary_key=True,
        server_default=comments_id_seq.next_value(),
    ),
    Column(
        "post_id",
        BigInteger,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id",
        BigInteger,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "parent_id",
        BigInteger,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,  # NULL for top-level comments
    ),
    Column("content", Text, nullable=False),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column("edited_at", TIMESTAMP(timezone=True), nullable=True),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),  # Soft delete
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_post_created", comments_table.c.post_id, comments_table.c.created_at)
Index("idx_comments_post_parent", comments_table.c.post_id, comments_table.c.parent_id)
Index("idx_comments_user_id", comments_table.c.user_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# ============================================================================
# COMMENT LIKES / DISLIKES TABLES
# ============================================================================
comment_likes_table = Table(
    "comment_likes",
    metadata,
    Column(
        "comment_id",
        BigInteger,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id",
        BigInteger,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("comment_id", "user_id", name="uq_comment_likes"),
)

Index("idx_comment_likes_user_id", comment_likes_table.c.user_id)

comment_dislikes_table = Table(
    "comment_dislikes",
    metadata,
    Column(
        "comment_id",
        BigInteger,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id",
        BigInteger,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("comment_id", "user_id", name="uq_comment_dislikes"),
)

Index("idx_comment_dislikes_user_id", comment_dislikes_table.c.user_id)

# ============================================================================
# COMMENT REPORTS TABLE
# ============================================================================
comment_reports_table = Table(
    "comment_reports",
    metadata,
    Column(
        "comment_id",
        BigInteger,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id",
        BigInteger,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "reason",
        postgresql.ENUM(*REPORT_REASONS, name="report_reason", create_type=False),
        nullable=False,
    ),
    Column("description", String(500), nullable=True),
    Column(
        "status",
        postgresql.ENUM(*REPORT_STATUSES, name="report_status", create_type=False),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("comment_id", "user_id", name="uq_comment_reports"),
)

Index(
    "idx_comment_reports_comment_status",
    comment_reports_table.c.comment_id,
    comment_reports_table.c.status,
)

# Likes and dislikes share a shape; the reaction repositories pick by type
REACTION_TABLES = {
    "like": comment_likes_table,
    "dislike": comment_dislikes_table,
}
