"""Unit tests for the moderation use cases."""

import pytest

from blog.application.usecase.moderation import (
    GetModerationQueueRequest,
    GetModerationQueueUseCase,
    ReviewReportRequest,
    ReviewReportUseCase,
)
from blog.domain.service import ReportService
from blog.domain.value import ReportReason, ReportStatus, UserId
from tests.conftest import seed_comment, seed_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestModerationUseCases:
    """Tests for GetModerationQueueUseCase and ReviewReportUseCase."""

    @pytest.mark.asyncio
    async def test_queue_then_dismiss(self, unit_env):
        """A dismissed report drops its comment from the queue."""
        # Arrange
        queue_use_case = await unit_env.get(GetModerationQueueUseCase)
        review_use_case = await unit_env.get(ReviewReportUseCase)
        report_service = await unit_env.get(ReportService)
        await seed_post(unit_env)
        comment = await seed_comment(unit_env)
        await report_service.report_comment(
            comment.id, UserId(6), ReportReason.SPAM, "Link farm"
        )

        # Act
        before = await queue_use_case.execute(GetModerationQueueRequest())
        review = await review_use_case.execute(
            ReviewReportRequest(
                comment_id=comment.id, reporter_id=6, status=ReportStatus.DISMISSED
            )
        )
        after = await queue_use_case.execute(GetModerationQueueRequest())

        # Assert
        assert [item.comment.id for item in before.items] == [comment.id]
        assert before.items[0].reports[0].description == "Link farm"
        assert before.items[0].comment.reports_count == 1
        assert before.pagination.total == 1
        assert review.status is ReportStatus.DISMISSED
        assert after.items == []
