"""Domain model entities for the blog comment service."""

from blog.domain.model.comment import (
    Comment,
    CommentCounters,
    CommentStats,
    CommentView,
)
from blog.domain.model.interaction import (
    Reaction,
    ReactionResult,
    Report,
    ReportedComment,
)
from blog.domain.model.page import CursorPage, OffsetPage
from blog.domain.model.post import Post
from blog.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "CommentCounters",
    "CommentView",
    "CommentStats",
    "Reaction",
    "ReactionResult",
    "Report",
    "ReportedComment",
    "OffsetPage",
    "CursorPage",
]
