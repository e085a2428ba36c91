"""PostgreSQL implementation of Report repository."""

from collections import defaultdict
from typing import Optional, Sequence

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Report
from blog.domain.model.common import utcnow
from blog.domain.repository import ReportRepository
from blog.domain.value import CommentId, ReportStatus, UserId
from blog.persistence.mappers import report_to_dict, row_to_report
from blog.persistence.tables import comment_reports_table


class PostgresReportRepository(ReportRepository):
    """PostgreSQL implementation of ReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(self, comment_id: CommentId, user_id: UserId) -> Optional[Report]:
        """Find a user's report on a comment."""
        stmt = select(comment_reports_table).where(
            and_(
                comment_reports_table.c.comment_id == comment_id,
                comment_reports_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_report(row._asdict()) if row else None

    async def save(self, report: Report) -> Report:
        """Store a new report inside a savepoint."""
        stmt = insert(comment_reports_table).values(**report_to_dict(report))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return report

    async def update_status(
        self, comment_id: CommentId, user_id: UserId, status: ReportStatus
    ) -> Optional[Report]:
        """Move a report to a new status."""
        stmt = (
            update(comment_reports_table)
            .where(
                and_(
                    comment_reports_table.c.comment_id == comment_id,
                    comment_reports_table.c.user_id == user_id,
                )
            )
            .values(status=status.value, updated_at=utcnow())
            .returning(comment_reports_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_report(row._asdict())

    async def find_pending_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, list[Report]]:
        """Find pending reports for multiple comments (batch query)."""
        if not comment_ids:
            return {}

        stmt = (
            select(comment_reports_table)
            .where(comment_reports_table.c.comment_id.in_(comment_ids))
            .where(comment_reports_table.c.status == ReportStatus.PENDING.value)
            .order_by(comment_reports_table.c.created_at)
        )
        result = await self.session.execute(stmt)

        reports: dict[CommentId, list[Report]] = defaultdict(list)
        for row in result.fetchall():
            report = row_to_report(row._asdict())
            reports[report.comment_id].append(report)
        return dict(reports)

    async def find_reported_by_user(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> set[CommentId]:
        """Find which of the given comments a user has reported."""
        if not comment_ids:
            return set()

        stmt = select(comment_reports_table.c.comment_id).where(
            and_(
                comment_reports_table.c.user_id == user_id,
                comment_reports_table.c.comment_id.in_(comment_ids),
            )
        )
        result = await self.session.execute(stmt)
        return {CommentId(comment_id) for comment_id in result.scalars()}
