"""List comments use case (offset pagination)."""

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentSortField, PostId, SortDirection, UserId

from .items import CommentItem, PaginationItem


class ListCommentsRequest(BaseModel):
    """List comments request."""

    post_id: int
    per_page: int | None = None  # Clamped by the service
    page: int = 1
    sort_by: CommentSortField = CommentSortField.CREATED_AT
    sort_order: SortDirection = SortDirection.DESC
    actor_id: int | None = None  # Authenticated reader (optional)


class ListCommentsResponse(BaseModel):
    """List comments response."""

    post_id: int
    comments: list[CommentItem]
    pagination: PaginationItem


class ListCommentsUseCase:
    """Use case for listing a numbered page of top-level comments."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Args:
            request: List comments request

        Returns:
            Page of comments with pagination metadata

        Raises:
            NotFoundError: If the post does not exist
        """
        page = await self.comment_service.get_comments_page(
            post_id=PostId(request.post_id),
            per_page=request.per_page,
            page=request.page,
            sort_by=request.sort_by,
            sort_order=request.sort_order,
            actor_id=UserId(request.actor_id) if request.actor_id is not None else None,
        )

        return ListCommentsResponse(
            post_id=request.post_id,
            comments=[CommentItem.from_view(view) for view in page.items],
            pagination=PaginationItem(
                total=page.total,
                current_page=page.current_page,
                last_page=page.last_page,
                per_page=page.per_page,
            ),
        )
