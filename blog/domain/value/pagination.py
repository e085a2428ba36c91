"""Pagination value objects for comment listings.

Two retrieval modes share the same ordering:

- offset pagination (page number / page size, total count computed eagerly)
- cursor pagination ("load more"), where the cursor is the id of the last
  comment the client has seen

Every ordering is ``(sort value, id)`` with both keys in the same direction,
so the order over any candidate set is total even when sort values tie.
"""

from datetime import datetime

from blog.domain.value.common import ValueObject
from blog.domain.value.identifiers import CommentId
from blog.domain.value.types import CommentSortField, SortDirection


class CommentSort(ValueObject):
    """Requested ordering of a comment listing."""

    sort_by: CommentSortField = CommentSortField.CREATED_AT
    sort_order: SortDirection = SortDirection.DESC

    @property
    def descending(self) -> bool:
        return self.sort_order == SortDirection.DESC


class CommentCursor(ValueObject):
    """Resolved continuation point of a cursor walk.

    ``sort_value`` is the cursor comment's value for the active sort field,
    read at query time (its ``created_at`` or one of its live counts).
    """

    comment_id: CommentId
    sort_value: datetime | int


def clamp_page_size(requested: int | None, default: int, maximum: int) -> int:
    """Clamp a caller-supplied page size into ``[1, maximum]``.

    Args:
        requested: Page size asked for by the caller (None for default)
        default: Size used when nothing was requested
        maximum: Hard cap regardless of what was requested

    Returns:
        Effective page size
    """
    if requested is None:
        requested = default
    return max(1, min(requested, maximum))
