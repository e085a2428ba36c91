"""Load more comments use case (cursor pagination)."""

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, CommentSortField, PostId, SortDirection, UserId

from .items import CommentItem


class LoadMoreCommentsRequest(BaseModel):
    """Load more comments request."""

    post_id: int
    limit: int | None = None  # Clamped by the service
    last_comment_id: int | None = None  # Cursor: last comment the client has seen
    sort_by: CommentSortField = CommentSortField.CREATED_AT
    sort_order: SortDirection = SortDirection.DESC
    actor_id: int | None = None


class LoadMoreCommentsResponse(BaseModel):
    """Load more comments response."""

    post_id: int
    comments: list[CommentItem]
    has_more: bool
    next_cursor: int | None
    limit: int


class LoadMoreCommentsUseCase:
    """Use case for loading the next batch of top-level comments."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize load more comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self, request: LoadMoreCommentsRequest
    ) -> LoadMoreCommentsResponse:
        """Execute load more flow.

        Args:
            request: Load more request with optional cursor

        Returns:
            Next batch of comments and the cursor for the following one
        """
        page = await self.comment_service.get_comments_by_cursor(
            post_id=PostId(request.post_id),
            limit=request.limit,
            last_comment_id=(
                CommentId(request.last_comment_id)
                if request.last_comment_id is not None
                else None
            ),
            sort_by=request.sort_by,
            sort_order=request.sort_order,
            actor_id=UserId(request.actor_id) if request.actor_id is not None else None,
        )

        return LoadMoreCommentsResponse(
            post_id=request.post_id,
            comments=[CommentItem.from_view(view) for view in page.items],
            has_more=page.has_more,
            next_cursor=page.next_cursor,
            limit=page.limit,
        )
