"""Post aggregate root.

Posts are managed by the posts service; the comment engine only needs to
know that a post exists and who wrote it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel, utcnow
from blog.domain.value import PostId, UserId


class Post(DomainModel):
    """Post aggregate root."""

    id: PostId
    author_id: UserId
    title: str = Field(min_length=1, max_length=255)
    content: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
