"""initial_schema

Create the schema of the comment service:
- Users and posts (owned by the blog, mirrored here for joins)
- Comments (one level of replies, soft delete)
- Comment likes and dislikes (one row per user and comment)
- Comment reports (one per user and comment, with moderation status)

Revision ID: 3c1d9a7e42b0
Revises:
Create Date: 2026-10-19 10:12:41.508213

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1d9a7e42b0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str, nullable: bool = False) -> sa.Column:
    if nullable:
        return sa.Column(name, postgresql.TIMESTAMP(timezone=True), nullable=True)
    return sa.Column(
        name,
        postgresql.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _interaction_columns() -> list[sa.Column]:
    return [
        sa.Column(
            "comment_id",
            sa.BigInteger(),
            sa.ForeignKey("comments.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "user_id",
            sa.BigInteger(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE report_reason AS ENUM (
                'spam', 'harassment', 'abuse', 'inappropriate', 'misinformation', 'other'
            );
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE report_status AS ENUM (
                'pending', 'reviewed', 'resolved', 'dismissed'
            );
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.create_table(
        "users",
        sa.Column("id", sa.BigInteger(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True, unique=True),
        _timestamp("created_at"),
    )

    op.create_table(
        "posts",
        sa.Column("id", sa.BigInteger(), primary_key=True),
        sa.Column(
            "user_id",
            sa.BigInteger(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
    )
    op.create_index("idx_posts_user_id", "posts", ["user_id"])

    # Comment ids are allocated from the sequence before insert
    op.execute("CREATE SEQUENCE IF NOT EXISTS comments_id_seq")
    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.BigInteger(),
            primary_key=True,
            server_default=sa.text("nextval('comments_id_seq')"),
        ),
        sa.Column(
            "post_id",
            sa.BigInteger(),
            sa.ForeignKey("posts.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "user_id",
            sa.BigInteger(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "parent_id",
            sa.BigInteger(),
            sa.ForeignKey("comments.id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "is_edited", sa.Boolean(), nullable=False, server_default=sa.text("false")
        ),
        _timestamp("edited_at", nullable=True),
        _timestamp("deleted_at", nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
    )
    op.execute("ALTER SEQUENCE comments_id_seq OWNED BY comments.id")
    op.create_index(
        "idx_comments_post_created", "comments", ["post_id", "created_at"]
    )
    op.create_index("idx_comments_post_parent", "comments", ["post_id", "parent_id"])
    op.create_index("idx_comments_user_id", "comments", ["user_id"])
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])

    for table, constraint in (
        ("comment_likes", "uq_comment_likes"),
        ("comment_dislikes", "uq_comment_dislikes"),
    ):
        op.create_table(
            table,
            *_interaction_columns(),
            _timestamp("created_at"),
            sa.UniqueConstraint("comment_id", "user_id", name=constraint),
        )
        op.create_index(f"idx_{table}_user_id", table, ["user_id"])

    op.create_table(
        "comment_reports",
        *_interaction_columns(),
        sa.Column(
            "reason",
            postgresql.ENUM(name="report_reason", create_type=False),
            nullable=False,
        ),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column(
            "status",
            postgresql.ENUM(name="report_status", create_type=False),
            nullable=False,
            server_default="pending",
        ),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.UniqueConstraint("comment_id", "user_id", name="uq_comment_reports"),
    )
    op.create_index(
        "idx_comment_reports_comment_status",
        "comment_reports",
        ["comment_id", "status"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("comment_reports")
    op.drop_table("comment_dislikes")
    op.drop_table("comment_likes")
    op.drop_table("comments")
    op.execute("DROP SEQUENCE IF EXISTS comments_id_seq")
    op.drop_table("posts")
    op.drop_table("users")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS report_status")
    op.execute("DROP TYPE IF EXISTS report_reason")
