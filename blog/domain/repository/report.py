"""Report repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from blog.domain.model.interaction import Report
from blog.domain.value import CommentId, ReportStatus, UserId


class ReportRepository(ABC):
    """Repository for comment reports."""

    @abstractmethod
    async def find(self, comment_id: CommentId, user_id: UserId) -> Optional[Report]:
        """Find a user's report on a comment.

        Args:
            comment_id: The comment ID
            user_id: The reporting user's ID

        Returns:
            The report if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, report: Report) -> Report:
        """Store a new report.

        Args:
            report: The report to store

        Returns:
            The stored report

        Raises:
            IntegrityError: If the user already reported this comment
        """
        pass

    @abstractmethod
    async def update_status(
        self, comment_id: CommentId, user_id: UserId, status: ReportStatus
    ) -> Optional[Report]:
        """Move a report to a new moderation status.

        Args:
            comment_id: The comment ID
            user_id: The reporting user's ID
            status: New status

        Returns:
            The updated report, or None if no such report exists
        """
        pass

    @abstractmethod
    async def find_pending_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, list[Report]]:
        """Find pending reports for multiple comments (batch query).

        Args:
            comment_ids: Comments to fetch reports for

        Returns:
            Mapping of comment ID to its pending reports, oldest first
        """
        pass

    @abstractmethod
    async def find_reported_by_user(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> set[CommentId]:
        """Find which of the given comments a user has reported.

        Args:
            user_id: The user's ID
            comment_ids: Comments to check

        Returns:
            Ids of the comments the user reported
        """
        pass
