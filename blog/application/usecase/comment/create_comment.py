"""Create comment use case."""

from pydantic import BaseModel, Field

from blog.domain.service import CommentService
from blog.domain.value import CommentId, PostId, UserId

from .items import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: int
    author_id: int  # Authenticated user
    content: str = Field(min_length=1, max_length=2000)
    parent_id: int | None = None  # None for top-level comments


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase:
    """Use case for creating a comment or a reply."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            NotFoundError: If the post does not exist
            InvalidParentCommentError: If the parent comment is invalid
        """
        view = await self.comment_service.create_comment(
            post_id=PostId(request.post_id),
            author_id=UserId(request.author_id),
            content=request.content,
            parent_id=(
                CommentId(request.parent_id) if request.parent_id is not None else None
            ),
        )
        return CreateCommentResponse(comment=CommentItem.from_view(view))
