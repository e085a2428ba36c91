"""In-memory report repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from blog.domain.model import Report
from blog.domain.model.common import utcnow
from blog.domain.repository import ReportRepository
from blog.domain.value import CommentId, ReportStatus, UserId

from .store import InMemoryStore


class InMemoryReportRepository(ReportRepository):
    """In-memory implementation of ReportRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find(self, comment_id: CommentId, user_id: UserId) -> Optional[Report]:
        """Find a user's report on a comment."""
        return self._store.reports.get((comment_id, user_id))

    async def save(self, report: Report) -> Report:
        """Store a new report.

        Raises:
            IntegrityError: If the user already reported this comment
        """
        key = (report.comment_id, report.user_id)
        if key in self._store.reports:
            raise IntegrityError("Duplicate report", None, Exception())

        self._store.reports[key] = report
        return report

    async def update_status(
        self, comment_id: CommentId, user_id: UserId, status: ReportStatus
    ) -> Optional[Report]:
        """Move a report to a new status."""
        report = self._store.reports.get((comment_id, user_id))
        if not report:
            return None

        updated = report.evolve(status=status, updated_at=utcnow())
        self._store.reports[(comment_id, user_id)] = updated
        return updated

    async def find_pending_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, list[Report]]:
        """Find pending reports for multiple comments."""
        wanted = set(comment_ids)
        reports: dict[CommentId, list[Report]] = {}
        for report in sorted(self._store.reports.values(), key=lambda r: r.created_at):
            if report.comment_id in wanted and report.status is ReportStatus.PENDING:
                reports.setdefault(report.comment_id, []).append(report)
        return reports

    async def find_reported_by_user(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> set[CommentId]:
        """Find which of the given comments a user has reported."""
        return {
            comment_id
            for comment_id in comment_ids
            if (comment_id, user_id) in self._store.reports
        }
