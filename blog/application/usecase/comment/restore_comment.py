"""Restore comment use case."""

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, UserId

from .items import CommentItem


class RestoreCommentRequest(BaseModel):
    """Restore comment request."""

    comment_id: int
    actor_id: int


class RestoreCommentResponse(BaseModel):
    """Restore comment response."""

    comment: CommentItem


class RestoreCommentUseCase:
    """Use case for restoring a soft-deleted comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: RestoreCommentRequest) -> RestoreCommentResponse:
        view = await self.comment_service.restore_comment(
            CommentId(request.comment_id), UserId(request.actor_id)
        )
        return RestoreCommentResponse(comment=CommentItem.from_view(view))
