"""List replies use case."""

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, UserId

from .items import CommentItem


class ListRepliesRequest(BaseModel):
    """List replies request."""

    comment_id: int
    actor_id: int | None = None


class ListRepliesResponse(BaseModel):
    """List replies response."""

    comment_id: int
    replies: list[CommentItem]


class ListRepliesUseCase:
    """Use case for expanding the replies of a comment, oldest first."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ListRepliesRequest) -> ListRepliesResponse:
        replies = await self.comment_service.get_replies(
            CommentId(request.comment_id),
            UserId(request.actor_id) if request.actor_id is not None else None,
        )
        return ListRepliesResponse(
            comment_id=request.comment_id,
            replies=[CommentItem.from_view(reply) for reply in replies],
        )
