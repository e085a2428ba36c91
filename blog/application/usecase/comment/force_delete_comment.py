"""Force delete comment use case (permanent delete)."""

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, UserId


class ForceDeleteCommentRequest(BaseModel):
    """Force delete comment request."""

    comment_id: int
    actor_id: int


class ForceDeleteCommentResponse(BaseModel):
    """Force delete comment response."""

    success: bool
    message: str


class ForceDeleteCommentUseCase:
    """Use case for permanently deleting a comment and everything under it."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(
        self, request: ForceDeleteCommentRequest
    ) -> ForceDeleteCommentResponse:
        await self.comment_service.force_delete_comment(
            CommentId(request.comment_id), UserId(request.actor_id)
        )
        return ForceDeleteCommentResponse(
            success=True, message="Comment permanently deleted"
        )
