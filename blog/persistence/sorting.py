"""SQL ordering and continuation predicates for comment listings.

Every listing is ordered by the sort expression followed by ``comments.id``
in the same direction, which makes the order total. A cursor walk continues
strictly after the last seen ``(value, id)`` pair:

    desc: value < t OR (value = t AND id < tid)
    asc:  value > t OR (value = t AND id > tid)

Counts are correlated ``COUNT(*)`` subqueries evaluated against live rows.
The same expression is used to order rows, to filter past the cursor, to
resolve the cursor's own value and to report counts with each row, so all
four agree within a statement.
"""

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import ColumnElement, and_, func, or_, select
from sqlalchemy.sql.elements import UnaryExpression

from blog.domain.value import CommentCursor, CommentSort, CommentSortField
from blog.persistence.tables import (
    comment_dislikes_table,
    comment_likes_table,
    comment_reports_table,
    comments_table,
)

_replies = comments_table.alias("replies")


def _count_of(table) -> ColumnElement[int]:
    return (
        select(func.count())
        .select_from(table)
        .where(table.c.comment_id == comments_table.c.id)
        .correlate(comments_table)
        .scalar_subquery()
    )


likes_count = _count_of(comment_likes_table)
dislikes_count = _count_of(comment_dislikes_table)
reports_count = _count_of(comment_reports_table)

# Soft-deleted replies do not count
replies_count = (
    select(func.count())
    .select_from(_replies)
    .where(
        _replies.c.parent_id == comments_table.c.id,
        _replies.c.deleted_at.is_(None),
    )
    .correlate(comments_table)
    .scalar_subquery()
)

SORT_EXPRESSIONS: dict[CommentSortField, ColumnElement] = {
    CommentSortField.CREATED_AT: comments_table.c.created_at,
    CommentSortField.LIKES_COUNT: likes_count,
    CommentSortField.REPLIES_COUNT: replies_count,
}


@dataclass(frozen=True)
class SortKey:
    """Resolved ordering for one ``(sort_by, sort_order)`` pair."""

    value: ColumnElement
    descending: bool

    @property
    def order_by(self) -> tuple[UnaryExpression, UnaryExpression]:
        """ORDER BY clauses: the sort value, then id, both in one direction."""
        if self.descending:
            return self.value.desc(), comments_table.c.id.desc()
        return self.value.asc(), comments_table.c.id.asc()

    def after(self, threshold: datetime | int, threshold_id: int) -> ColumnElement[bool]:
        """Predicate selecting rows strictly after ``(threshold, threshold_id)``."""
        if self.descending:
            return or_(
                self.value < threshold,
                and_(self.value == threshold, comments_table.c.id < threshold_id),
            )
        return or_(
            self.value > threshold,
            and_(self.value == threshold, comments_table.c.id > threshold_id),
        )

    def after_cursor(self, cursor: CommentCursor) -> ColumnElement[bool]:
        return self.after(cursor.sort_value, cursor.comment_id)


def resolve_sort_key(sort: CommentSort) -> SortKey:
    """Resolve a requested ordering into SQL expressions.

    Args:
        sort: Requested sort field and direction

    Returns:
        Sort key with ORDER BY clauses and the continuation predicate
    """
    return SortKey(value=SORT_EXPRESSIONS[sort.sort_by], descending=sort.descending)
