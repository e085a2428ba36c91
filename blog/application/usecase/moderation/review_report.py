"""Review report use case."""

from pydantic import BaseModel

from blog.domain.service import ReportService
from blog.domain.value import CommentId, ReportStatus, UserId


class ReviewReportRequest(BaseModel):
    """Review report request."""

    comment_id: int
    reporter_id: int
    status: ReportStatus


class ReviewReportResponse(BaseModel):
    """Review report response."""

    comment_id: int
    reporter_id: int
    status: ReportStatus


class ReviewReportUseCase:
    """Use case for recording a moderation decision on a report."""

    def __init__(self, report_service: ReportService) -> None:
        self.report_service = report_service

    async def execute(self, request: ReviewReportRequest) -> ReviewReportResponse:
        """Execute review flow.

        Raises:
            ValidationError: If the new status is pending
            NotFoundError: If the report does not exist
        """
        report = await self.report_service.review_report(
            CommentId(request.comment_id),
            UserId(request.reporter_id),
            request.status,
        )
        return ReviewReportResponse(
            comment_id=report.comment_id,
            reporter_id=report.user_id,
            status=report.status,
        )
