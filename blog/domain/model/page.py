"""Page containers returned by comment listings."""

from typing import Generic, Optional, TypeVar

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import CommentId

T = TypeVar("T")


class OffsetPage(DomainModel, Generic[T]):
    """A numbered page with an eagerly computed total."""

    items: list[T]
    total: int = Field(ge=0)
    current_page: int = Field(ge=1)
    last_page: int = Field(ge=1)
    per_page: int = Field(ge=1)


class CursorPage(DomainModel, Generic[T]):
    """A "load more" page.

    ``next_cursor`` is the id of the last item when more items follow, and
    None once the walk is complete.
    """

    items: list[T]
    has_more: bool
    next_cursor: Optional[CommentId] = None
    limit: int = Field(ge=1)
