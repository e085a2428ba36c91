"""Get comment stats use case."""

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import PostId


class GetCommentStatsRequest(BaseModel):
    """Get comment stats request."""

    post_id: int


class GetCommentStatsResponse(BaseModel):
    """Get comment stats response."""

    post_id: int
    total_comments: int
    top_level_comments: int
    replies: int


class GetCommentStatsUseCase:
    """Use case for comment counts on a post."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentStatsRequest) -> GetCommentStatsResponse:
        stats = await self.comment_service.get_stats(PostId(request.post_id))
        return GetCommentStatsResponse(
            post_id=request.post_id,
            total_comments=stats.total_comments,
            top_level_comments=stats.top_level_comments,
            replies=stats.replies,
        )
