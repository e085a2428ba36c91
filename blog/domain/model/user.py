"""User entity.

Users are registered and authenticated elsewhere; comments reference them by
id and show their display name.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel, utcnow
from blog.domain.value import UserId


class User(DomainModel):
    """User entity."""

    id: UserId
    name: str = Field(min_length=1, max_length=255)
    email: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
