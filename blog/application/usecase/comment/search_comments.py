"""Search comments use case."""

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, UserId

from .items import CommentItem


class SearchCommentsRequest(BaseModel):
    """Search comments request."""

    query: str  # Length is checked after trimming by the service
    limit: int | None = None
    last_comment_id: int | None = None
    actor_id: int | None = None


class SearchCommentsResponse(BaseModel):
    """Search comments response."""

    query: str
    comments: list[CommentItem]
    has_more: bool
    next_cursor: int | None


class SearchCommentsUseCase:
    """Use case for searching comment content, newest first."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize search comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: SearchCommentsRequest) -> SearchCommentsResponse:
        """Execute search flow.

        Raises:
            ValidationError: If the trimmed query is too short
        """
        page = await self.comment_service.search_comments(
            query=request.query,
            limit=request.limit,
            last_comment_id=(
                CommentId(request.last_comment_id)
                if request.last_comment_id is not None
                else None
            ),
            actor_id=UserId(request.actor_id) if request.actor_id is not None else None,
        )
        return SearchCommentsResponse(
            query=request.query,
            comments=[CommentItem.from_view(view) for view in page.items],
            has_more=page.has_more,
            next_cursor=page.next_cursor,
        )
