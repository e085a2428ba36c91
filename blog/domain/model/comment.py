"""Comment entity and read models.

Comments form a shallow tree on a post: a comment with no parent is a
top-level comment, any other comment is a reply. The tree is stored as a
plain ``parent_id`` reference; there is no in-memory object graph.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from blog.domain.model.common import DomainModel, ensure_utc, utcnow
from blog.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    Interaction counters are deliberately absent: they are derived from the
    like/dislike/report/reply rows at read time (see ``CommentView``).
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=2000)
    parent_id: Optional[CommentId] = None
    is_edited: bool = False
    edited_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    deleted_at: Optional[datetime] = None

    @field_validator("edited_at", "created_at", "updated_at", "deleted_at")
    @classmethod
    def normalize_timezone(cls, v: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(v)

    @property
    def is_top_level(self) -> bool:
        return self.parent_id is None

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def is_owned_by(self, user_id: UserId | None) -> bool:
        """Whether the given user authored this comment."""
        return user_id is not None and self.author_id == user_id


class CommentCounters(DomainModel):
    """Live interaction counts of a comment."""

    likes_count: int = Field(default=0, ge=0)
    dislikes_count: int = Field(default=0, ge=0)
    reports_count: int = Field(default=0, ge=0)
    replies_count: int = Field(default=0, ge=0)


class CommentView(DomainModel):
    """A comment as seen by a particular reader.

    ``user_*`` flags describe the reader's own interactions and are always
    False for anonymous readers.
    """

    comment: Comment
    author_name: Optional[str] = None
    counters: CommentCounters = CommentCounters()
    user_liked: bool = False
    user_disliked: bool = False
    user_reported: bool = False

    @property
    def id(self) -> CommentId:
        return self.comment.id


class CommentStats(DomainModel):
    """Aggregate comment counts for a post (soft-deleted comments excluded)."""

    total_comments: int = Field(default=0, ge=0)
    top_level_comments: int = Field(default=0, ge=0)
    replies: int = Field(default=0, ge=0)
