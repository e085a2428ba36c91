"""Delete comment use case (soft delete)."""

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: int
    actor_id: int


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    success: bool
    message: str


class DeleteCommentUseCase:
    """Use case for soft-deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        await self.comment_service.delete_comment(
            CommentId(request.comment_id), UserId(request.actor_id)
        )
        return DeleteCommentResponse(success=True, message="Comment deleted")
