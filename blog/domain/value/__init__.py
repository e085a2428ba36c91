"""Domain value objects for the blog comment service."""

from blog.domain.value.identifiers import CommentId, PostId, UserId
from blog.domain.value.pagination import CommentCursor, CommentSort, clamp_page_size
from blog.domain.value.types import (
    CommentSortField,
    ReactionAction,
    ReactionType,
    ReportReason,
    ReportStatus,
    SearchTerm,
    SortDirection,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    # Types
    "CommentSortField",
    "SortDirection",
    "ReactionType",
    "ReactionAction",
    "ReportReason",
    "ReportStatus",
    "SearchTerm",
    # Pagination
    "CommentSort",
    "CommentCursor",
    "clamp_page_size",
]
