"""Unit tests for the SQL sort keys of comment listings."""

from datetime import datetime, timezone

import pytest
from sqlalchemy import select
from sqlalchemy.dialects import postgresql

from blog.domain.value import CommentSort, CommentSortField, SortDirection
from blog.persistence.sorting import resolve_sort_key
from blog.persistence.tables import comments_table


def compile_sql(stmt) -> str:
    return " ".join(
        str(
            stmt.compile(
                dialect=postgresql.dialect(), compile_kwargs={"literal_binds": True}
            )
        ).split()
    )


def listing(sort_by: CommentSortField, sort_order: SortDirection, threshold, tid):
    key = resolve_sort_key(CommentSort(sort_by=sort_by, sort_order=sort_order))
    return compile_sql(
        select(comments_table.c.id)
        .where(key.after(threshold, tid))
        .order_by(*key.order_by)
    )


class TestSortKey:
    """Tests for resolve_sort_key."""

    def test_created_at_desc(self):
        """Newest first continues strictly before the cursor pair."""
        # Arrange
        instant = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

        # Act
        sql = listing(CommentSortField.CREATED_AT, SortDirection.DESC, instant, 9)

        # Assert
        assert "comments.created_at <" in sql
        assert "2026-01-02 03:04:05" in sql
        assert "AND comments.id < 9" in sql
        assert sql.endswith("ORDER BY comments.created_at DESC, comments.id DESC")

    def test_created_at_asc(self):
        """Oldest first continues strictly after the cursor pair."""
        # Arrange
        instant = datetime(2026, 1, 2, tzinfo=timezone.utc)

        # Act
        sql = listing(CommentSortField.CREATED_AT, SortDirection.ASC, instant, 9)

        # Assert
        assert "comments.created_at >" in sql
        assert "AND comments.id > 9" in sql
        assert sql.endswith("ORDER BY comments.created_at ASC, comments.id ASC")

    def test_likes_count_uses_live_count(self):
        """Likes are counted from comment_likes rows, not a stored column."""
        # Act
        sql = listing(CommentSortField.LIKES_COUNT, SortDirection.DESC, 3, 4)

        # Assert
        assert "count(*)" in sql
        assert "FROM comment_likes" in sql
        assert "comment_likes.comment_id = comments.id" in sql
        assert ") < 3" in sql
        assert ") = 3 AND comments.id < 4" in sql
        assert sql.endswith("DESC, comments.id DESC")

    def test_replies_count_ignores_deleted_replies(self):
        """Reply counts only include live replies."""
        # Act
        sql = listing(CommentSortField.REPLIES_COUNT, SortDirection.ASC, 0, 1)

        # Assert
        assert "FROM comments AS replies" in sql
        assert "replies.parent_id = comments.id" in sql
        assert "replies.deleted_at IS NULL" in sql
        assert ") > 0" in sql
        assert sql.endswith("ASC, comments.id ASC")

    @pytest.mark.parametrize("sort_by", list(CommentSortField))
    @pytest.mark.parametrize("sort_order", list(SortDirection))
    def test_id_is_always_the_final_key(self, sort_by, sort_order):
        """Every ordering ends with comments.id in the same direction."""
        # Arrange
        key = resolve_sort_key(CommentSort(sort_by=sort_by, sort_order=sort_order))

        # Act
        sql = compile_sql(select(comments_table.c.id).order_by(*key.order_by))

        # Assert
        direction = sort_order.value.upper()
        assert sql.endswith(f"comments.id {direction}")
        assert sql.count(direction) == 2
