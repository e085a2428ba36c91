"""Comment interaction entities: reactions and reports.

A user holds at most one reaction on a comment (like OR dislike) and may
report a comment at most once. Both rules are backed by unique constraints
on ``(comment_id, user_id)``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from blog.domain.model.comment import CommentView
from blog.domain.model.common import DomainModel, ensure_utc, utcnow
from blog.domain.value import (
    CommentId,
    ReactionAction,
    ReactionType,
    ReportReason,
    ReportStatus,
    UserId,
)


class Reaction(DomainModel):
    """A like or dislike by a user on a comment."""

    comment_id: CommentId
    user_id: UserId
    type: ReactionType
    created_at: datetime = Field(default_factory=utcnow)


class Report(DomainModel):
    """A user's report of a comment, tracked through moderation."""

    comment_id: CommentId
    user_id: UserId
    reason: ReportReason
    description: Optional[str] = Field(default=None, max_length=500)
    status: ReportStatus = ReportStatus.PENDING
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("created_at", "updated_at")
    @classmethod
    def normalize_timezone(cls, v: datetime) -> datetime:
        return ensure_utc(v)


class ReactionResult(DomainModel):
    """State of a (comment, user) pair after a reaction toggle."""

    action: ReactionAction
    likes_count: int = Field(ge=0)
    dislikes_count: int = Field(ge=0)
    user_liked: bool
    user_disliked: bool


class ReportedComment(DomainModel):
    """A moderation queue entry: a comment and its pending reports."""

    comment: CommentView
    reports: list[Report]
