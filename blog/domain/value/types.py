"""Domain value types for blog comments.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from blog.domain.value.common import RootValueObject


class CommentSortField(str, Enum):
    """Sortable dimensions of a comment listing."""

    CREATED_AT = "created_at"
    LIKES_COUNT = "likes_count"  # Live count of comment_likes rows
    REPLIES_COUNT = "replies_count"  # Live count of non-deleted direct replies


class SortDirection(str, Enum):
    """Direction of a comment ordering."""

    ASC = "asc"
    DESC = "desc"


class ReactionType(str, Enum):
    """Mutually exclusive reactions a user can hold on a comment."""

    LIKE = "like"
    DISLIKE = "dislike"

    @property
    def opposite(self) -> "ReactionType":
        """The reaction that is cleared when this one is applied."""
        return ReactionType.DISLIKE if self is ReactionType.LIKE else ReactionType.LIKE


class ReactionAction(str, Enum):
    """Outcome of a reaction toggle."""

    LIKED = "liked"
    REMOVED_LIKE = "removed_like"
    DISLIKED = "disliked"
    REMOVED_DISLIKE = "removed_dislike"


class ReportReason(str, Enum):
    """Why a comment was reported."""

    SPAM = "spam"
    HARASSMENT = "harassment"
    ABUSE = "abuse"
    INAPPROPRIATE = "inappropriate"
    MISINFORMATION = "misinformation"
    OTHER = "other"


class ReportStatus(str, Enum):
    """Moderation status of a report."""

    PENDING = "pending"
    REVIEWED = "reviewed"
    RESOLVED = "resolved"
    DISMISSED = "dismissed"


class SearchTerm(RootValueObject[str]):
    """Free-text comment search term, 3-100 characters after trimming."""

    @field_validator("root")
    @classmethod
    def validate_search_term(cls, v: str) -> str:
        """Validate search term length."""
        v = v.strip()
        if len(v) < 3 or len(v) > 100:
            raise ValueError("Search term must be 3-100 characters")
        return v
