"""Get moderation queue use case."""

from datetime import datetime

from pydantic import BaseModel

from blog.application.usecase.comment.items import CommentItem, PaginationItem
from blog.domain.service import ReportService
from blog.domain.value import ReportReason, ReportStatus


class ReportItem(BaseModel):
    """Report item in responses."""

    user_id: int
    reason: ReportReason
    description: str | None
    status: ReportStatus
    created_at: datetime


class ModerationItem(BaseModel):
    """A reported comment with its pending reports."""

    comment: CommentItem
    reports: list[ReportItem]


class GetModerationQueueRequest(BaseModel):
    """Get moderation queue request."""

    page: int = 1
    per_page: int | None = None


class GetModerationQueueResponse(BaseModel):
    """Get moderation queue response."""

    items: list[ModerationItem]
    pagination: PaginationItem


class GetModerationQueueUseCase:
    """Use case for listing comments awaiting moderation."""

    def __init__(self, report_service: ReportService) -> None:
        self.report_service = report_service

    async def execute(
        self, request: GetModerationQueueRequest
    ) -> GetModerationQueueResponse:
        queue = await self.report_service.get_moderation_queue(
            page=request.page, per_page=request.per_page
        )

        return GetModerationQueueResponse(
            items=[
                ModerationItem(
                    comment=CommentItem.from_view(entry.comment),
                    reports=[
                        ReportItem(
                            user_id=report.user_id,
                            reason=report.reason,
                            description=report.description,
                            status=report.status,
                            created_at=report.created_at,
                        )
                        for report in entry.reports
                    ],
                )
                for entry in queue.items
            ],
            pagination=PaginationItem(
                total=queue.total,
                current_page=queue.current_page,
                last_page=queue.last_page,
                per_page=queue.per_page,
            ),
        )
