"""Unit tests for ReportService."""

import pytest

from blog.domain.error import NotFoundError, ValidationError
from blog.domain.service import CommentService, ReportService
from blog.domain.value import CommentId, ReportReason, ReportStatus, UserId
from tests.conftest import seed_comment, seed_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()

REPORTER = UserId(7)


class TestReportComment:
    """Tests for report_comment."""

    @pytest.mark.asyncio
    async def test_second_report_is_ignored(self, unit_env):
        """Reporting twice stores a single report."""
        # Arrange
        service = await unit_env.get(ReportService)
        comment_service = await unit_env.get(CommentService)
        await seed_post(unit_env)
        comment = await seed_comment(unit_env)

        # Act
        first = await service.report_comment(
            comment.id, REPORTER, ReportReason.SPAM, "Buy now"
        )
        second = await service.report_comment(
            comment.id, REPORTER, ReportReason.ABUSE
        )

        # Assert
        assert first is True
        assert second is False
        view = await comment_service.get_comment(comment.id, REPORTER)
        assert view.counters.reports_count == 1
        assert view.user_reported is True

    @pytest.mark.asyncio
    async def test_reports_from_different_users_are_kept(self, unit_env):
        """Each user may report the same comment once."""
        # Arrange
        service = await unit_env.get(ReportService)
        comment_service = await unit_env.get(CommentService)
        await seed_post(unit_env)
        comment = await seed_comment(unit_env)

        # Act
        await service.report_comment(comment.id, UserId(7), ReportReason.SPAM)
        await service.report_comment(comment.id, UserId(8), ReportReason.OTHER)

        # Assert
        view = await comment_service.get_comment(comment.id)
        assert view.counters.reports_count == 2

    @pytest.mark.asyncio
    async def test_report_missing_comment_raises_not_found(self, unit_env):
        """Reporting an unknown comment raises NotFoundError."""
        # Arrange
        service = await unit_env.get(ReportService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.report_comment(CommentId(3), REPORTER, ReportReason.SPAM)


class TestModeration:
    """Tests for the moderation queue and report review."""

    @pytest.mark.asyncio
    async def test_queue_lists_comments_with_pending_reports(self, unit_env):
        """Only comments with pending reports are queued, newest first."""
        # Arrange
        service = await unit_env.get(ReportService)
        await seed_post(unit_env)
        older = await seed_comment(unit_env)
        await seed_comment(unit_env)  # never reported
        newer = await seed_comment(unit_env)
        await service.report_comment(older.id, REPORTER, ReportReason.SPAM)
        await service.report_comment(newer.id, REPORTER, ReportReason.HARASSMENT)
        await service.report_comment(newer.id, UserId(8), ReportReason.ABUSE)

        # Act
        queue = await service.get_moderation_queue()

        # Assert
        assert queue.total == 2
        assert [entry.comment.id for entry in queue.items] == [newer.id, older.id]
        assert len(queue.items[0].reports) == 2
        assert {r.reason for r in queue.items[0].reports} == {
            ReportReason.HARASSMENT,
            ReportReason.ABUSE,
        }

    @pytest.mark.asyncio
    async def test_reviewed_report_leaves_queue(self, unit_env):
        """Resolving the only pending report removes the comment from the queue."""
        # Arrange
        service = await unit_env.get(ReportService)
        await seed_post(unit_env)
        comment = await seed_comment(unit_env)
        await service.report_comment(comment.id, REPORTER, ReportReason.SPAM)

        # Act
        report = await service.review_report(
            comment.id, REPORTER, ReportStatus.RESOLVED
        )

        # Assert
        assert report.status is ReportStatus.RESOLVED
        queue = await service.get_moderation_queue()
        assert queue.total == 0
        assert queue.items == []

    @pytest.mark.asyncio
    async def test_review_back_to_pending_raises_validation_error(self, unit_env):
        """A report cannot be reviewed into the pending state."""
        # Arrange
        service = await unit_env.get(ReportService)

        # Act & Assert
        with pytest.raises(ValidationError):
            await service.review_report(CommentId(1), REPORTER, ReportStatus.PENDING)

    @pytest.mark.asyncio
    async def test_review_missing_report_raises_not_found(self, unit_env):
        """Reviewing a report that was never filed raises NotFoundError."""
        # Arrange
        service = await unit_env.get(ReportService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.review_report(
                CommentId(1), REPORTER, ReportStatus.DISMISSED
            )
