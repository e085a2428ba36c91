"""Get user comments use case."""

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, CommentSortField, SortDirection, UserId

from .items import CommentItem


class GetUserCommentsRequest(BaseModel):
    """Get user comments request."""

    user_id: int  # Authenticated user listing their own comments
    limit: int | None = None
    last_comment_id: int | None = None
    sort_by: CommentSortField = CommentSortField.CREATED_AT
    sort_order: SortDirection = SortDirection.DESC


class GetUserCommentsResponse(BaseModel):
    """Get user comments response."""

    comments: list[CommentItem]
    has_more: bool
    next_cursor: int | None
    limit: int


class GetUserCommentsUseCase:
    """Use case for listing the comments a user wrote, across posts."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(
        self, request: GetUserCommentsRequest
    ) -> GetUserCommentsResponse:
        page = await self.comment_service.get_user_comments_by_cursor(
            author_id=UserId(request.user_id),
            limit=request.limit,
            last_comment_id=(
                CommentId(request.last_comment_id)
                if request.last_comment_id is not None
                else None
            ),
            sort_by=request.sort_by,
            sort_order=request.sort_order,
        )
        return GetUserCommentsResponse(
            comments=[CommentItem.from_view(view) for view in page.items],
            has_more=page.has_more,
            next_cursor=page.next_cursor,
            limit=page.limit,
        )
