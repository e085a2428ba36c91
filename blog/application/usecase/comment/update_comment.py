"""Update comment use case."""

from pydantic import BaseModel, Field

from blog.domain.service import CommentService
from blog.domain.value import CommentId, UserId

from .items import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: int
    actor_id: int  # Must be the comment's author
    content: str = Field(min_length=1, max_length=2000)


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentItem


class UpdateCommentUseCase:
    """Use case for editing a comment within its edit window."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request

        Returns:
            The updated comment

        Raises:
            NotFoundError: If the comment does not exist or is deleted
            NotAuthorizedError: If the actor is not the author
            EditWindowExpiredError: If the edit window has closed
        """
        view = await self.comment_service.update_comment(
            comment_id=CommentId(request.comment_id),
            actor_id=UserId(request.actor_id),
            content=request.content,
        )
        return UpdateCommentResponse(comment=CommentItem.from_view(view))
