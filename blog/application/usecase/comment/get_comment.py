"""Get comment use case."""

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, UserId

from .items import CommentItem


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: int
    actor_id: int | None = None


class GetCommentResponse(BaseModel):
    """Get comment response: the comment and its direct replies."""

    comment: CommentItem
    replies: list[CommentItem]


class GetCommentUseCase:
    """Use case for showing a single comment with its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        """Execute get comment flow.

        Raises:
            NotFoundError: If the comment does not exist or is deleted
        """
        comment_id = CommentId(request.comment_id)
        actor_id = UserId(request.actor_id) if request.actor_id is not None else None

        view = await self.comment_service.get_comment(comment_id, actor_id)
        replies = await self.comment_service.get_replies(comment_id, actor_id)

        return GetCommentResponse(
            comment=CommentItem.from_view(view),
            replies=[CommentItem.from_view(reply) for reply in replies],
        )
