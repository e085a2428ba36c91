"""Report comment use case."""

from pydantic import BaseModel, Field

from blog.domain.service import ReportService
from blog.domain.value import CommentId, ReportReason, UserId


class ReportCommentRequest(BaseModel):
    """Report comment request."""

    comment_id: int
    user_id: int  # Authenticated reporter
    reason: ReportReason
    description: str | None = Field(default=None, max_length=500)


class ReportCommentResponse(BaseModel):
    """Report comment response."""

    reported: bool
    message: str


class ReportCommentUseCase:
    """Use case for reporting a comment to moderators."""

    def __init__(self, report_service: ReportService) -> None:
        """Initialize report comment use case.

        Args:
            report_service: Report domain service
        """
        self.report_service = report_service

    async def execute(self, request: ReportCommentRequest) -> ReportCommentResponse:
        """Execute report flow.

        A repeated report by the same user is not an error; it is answered
        with ``reported=False``.

        Raises:
            NotFoundError: If the comment does not exist or is deleted
        """
        reported = await self.report_service.report_comment(
            comment_id=CommentId(request.comment_id),
            user_id=UserId(request.user_id),
            reason=request.reason,
            description=request.description,
        )

        if reported:
            return ReportCommentResponse(
                reported=True, message="Comment reported successfully"
            )
        return ReportCommentResponse(
            reported=False, message="You have already reported this comment"
        )
