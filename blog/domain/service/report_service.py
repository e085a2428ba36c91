"""Report and moderation domain service."""

import logfire
from sqlalchemy.exc import IntegrityError

from blog.domain.error import NotFoundError, ValidationError
from blog.domain.model.common import utcnow
from blog.domain.model.interaction import Report, ReportedComment
from blog.domain.model.page import OffsetPage
from blog.domain.repository import ReportRepository
from blog.domain.value import CommentId, ReportReason, ReportStatus, UserId

from .base import Service
from .comment_service import CommentService


class ReportService(Service):
    """Domain service for reporting comments and working the moderation queue."""

    def __init__(
        self,
        report_repository: ReportRepository,
        comment_service: CommentService,
    ) -> None:
        """Initialize report service.

        Args:
            report_repository: Report repository
            comment_service: Comment domain service
        """
        self.report_repository = report_repository
        self.comment_service = comment_service

    async def report_comment(
        self,
        comment_id: CommentId,
        user_id: UserId,
        reason: ReportReason,
        description: str | None = None,
    ) -> bool:
        """Report a comment.

        Reporting is idempotent per user: a second report by the same user
        stores nothing.

        Args:
            comment_id: Comment ID
            user_id: Reporting user
            reason: Report reason
            description: Optional free-text details

        Returns:
            True if a new report was stored, False if the user already
            reported this comment

        Raises:
            NotFoundError: If the comment does not exist or is soft-deleted
        """
        with logfire.span(
            "report_service.report_comment",
            comment_id=comment_id,
            user_id=user_id,
            reason=reason.value,
        ):
            comment = await self.comment_service.get_comment_by_id(comment_id)
            if not comment:
                logfire.warn("Report on non-existent comment", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))

            if await self.report_repository.find(comment_id, user_id):
                logfire.info(
                    "Comment already reported by user",
                    comment_id=comment_id,
                    user_id=user_id,
                )
                return False

            now = utcnow()
            report = Report(
                comment_id=comment_id,
                user_id=user_id,
                reason=reason,
                description=description,
                created_at=now,
                updated_at=now,
            )

            try:
                await self.report_repository.save(report)
            except IntegrityError:
                logfire.warn(
                    "Duplicate report attempt", comment_id=comment_id, user_id=user_id
                )
                return False

            logfire.info(
                "Comment reported",
                comment_id=comment_id,
                user_id=user_id,
                reason=reason.value,
            )
            return True

    async def get_moderation_queue(
        self, page: int = 1, per_page: int | None = None
    ) -> OffsetPage[ReportedComment]:
        """Get comments awaiting moderation with their pending reports.

        Args:
            page: 1-based page number
            per_page: Requested page size (clamped to the offset cap)

        Returns:
            Offset page of reported comments, newest comment first
        """
        with logfire.span(
            "report_service.get_moderation_queue", page=page, per_page=per_page
        ):
            comments = await self.comment_service.get_reported_comments(
                page=page, per_page=per_page
            )
            reports = await self.report_repository.find_pending_by_comments(
                [view.id for view in comments.items]
            )

            return OffsetPage[ReportedComment](
                items=[
                    ReportedComment(comment=view, reports=reports.get(view.id, []))
                    for view in comments.items
                ],
                total=comments.total,
                current_page=comments.current_page,
                last_page=comments.last_page,
                per_page=comments.per_page,
            )

    async def review_report(
        self, comment_id: CommentId, reporter_id: UserId, status: ReportStatus
    ) -> Report:
        """Move a report to a moderation outcome.

        Args:
            comment_id: Reported comment ID
            reporter_id: User who filed the report
            status: New status (reviewed, resolved or dismissed)

        Returns:
            Updated report

        Raises:
            ValidationError: If the status is ``pending``
            NotFoundError: If the report does not exist
        """
        if status is ReportStatus.PENDING:
            raise ValidationError("A report cannot be moved back to pending")

        with logfire.span(
            "report_service.review_report",
            comment_id=comment_id,
            reporter_id=reporter_id,
            status=status.value,
        ):
            report = await self.report_repository.update_status(
                comment_id, reporter_id, status
            )
            if not report:
                raise NotFoundError("Report", f"{comment_id}/{reporter_id}")

            logfire.info(
                "Report reviewed",
                comment_id=comment_id,
                reporter_id=reporter_id,
                status=status.value,
            )
            return report
