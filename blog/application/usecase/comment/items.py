"""Response items shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from blog.domain.model import CommentView


class AuthorItem(BaseModel):
    """Comment author summary."""

    id: int
    name: str | None


class CommentItem(BaseModel):
    """Comment item in responses."""

    id: int
    post_id: int
    parent_id: int | None
    content: str
    author: AuthorItem
    is_edited: bool
    edited_at: datetime | None
    created_at: datetime
    updated_at: datetime
    likes_count: int
    dislikes_count: int
    replies_count: int
    reports_count: int
    user_liked: bool
    user_disliked: bool
    user_reported: bool

    @classmethod
    def from_view(cls, view: CommentView) -> "CommentItem":
        """Build a response item from a comment view."""
        comment = view.comment
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            parent_id=comment.parent_id,
            content=comment.content,
            author=AuthorItem(id=comment.author_id, name=view.author_name),
            is_edited=comment.is_edited,
            edited_at=comment.edited_at,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            likes_count=view.counters.likes_count,
            dislikes_count=view.counters.dislikes_count,
            replies_count=view.counters.replies_count,
            reports_count=view.counters.reports_count,
            user_liked=view.user_liked,
            user_disliked=view.user_disliked,
            user_reported=view.user_reported,
        )


class PaginationItem(BaseModel):
    """Offset pagination metadata."""

    total: int
    current_page: int
    last_page: int
    per_page: int
