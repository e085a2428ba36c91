"""In-memory comment repository for testing."""

from typing import Optional

from blog.domain.model import Comment, CommentStats, CommentView
from blog.domain.repository import CommentRepository
from blog.domain.value import (
    CommentCursor,
    CommentId,
    CommentSort,
    CommentSortField,
    PostId,
    ReportStatus,
    SearchTerm,
    SortDirection,
    UserId,
)

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def next_id(self) -> CommentId:
        """Allocate the next comment id."""
        return self._store.next_comment_id()

    async def find_by_id(
        self, comment_id: CommentId, include_deleted: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        comment = self._store.comments.get(comment_id)
        if comment and comment.is_deleted and not include_deleted:
            return None
        return comment

    async def find_view(self, comment_id: CommentId) -> Optional[CommentView]:
        """Find a non-deleted comment with its counters."""
        comment = await self.find_by_id(comment_id)
        return self._store.view(comment) if comment else None

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._store.comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment with its replies and interactions."""
        if comment_id not in self._store.comments:
            return False
        self._store.delete_comment(comment_id)
        return True

    async def resolve_cursor(
        self,
        comment_id: CommentId,
        sort_by: CommentSortField,
        post_id: Optional[PostId] = None,
        top_level_only: bool = False,
    ) -> Optional[CommentCursor]:
        """Read the cursor comment's current sort value."""
        comment = await self.find_by_id(comment_id)
        if not comment or (post_id is not None and comment.post_id != post_id):
            return None
        if top_level_only and not comment.is_top_level:
            return None
        return CommentCursor(
            comment_id=comment.id,
            sort_value=self._store.sort_value(sort_by)(comment),
        )

    async def find_top_level(
        self,
        post_id: PostId,
        sort: CommentSort,
        limit: int,
        offset: int = 0,
        after: Optional[CommentCursor] = None,
    ) -> list[CommentView]:
        """Find top-level comments of a post in sort order."""
        comments = [
            c
            for c in self._store.live_comments()
            if c.post_id == post_id and c.is_top_level
        ]
        ordered = self._store.ordered(comments, sort, after)
        return [self._store.view(c) for c in ordered[offset : offset + limit]]

    async def count_top_level(self, post_id: PostId) -> int:
        """Count non-deleted top-level comments of a post."""
        return sum(
            1
            for c in self._store.live_comments()
            if c.post_id == post_id and c.is_top_level
        )

    async def find_replies(self, parent_id: CommentId) -> list[CommentView]:
        """Find direct replies, oldest first."""
        replies = [c for c in self._store.live_comments() if c.parent_id == parent_id]
        ordered = self._store.ordered(
            replies,
            CommentSort(sort_by=CommentSortField.CREATED_AT, sort_order=SortDirection.ASC),
        )
        return [self._store.view(c) for c in ordered]

    async def find_by_author(
        self,
        author_id: UserId,
        sort: CommentSort,
        limit: int,
        after: Optional[CommentCursor] = None,
    ) -> list[CommentView]:
        """Find a user's comments in sort order."""
        comments = [c for c in self._store.live_comments() if c.author_id == author_id]
        ordered = self._store.ordered(comments, sort, after)
        return [self._store.view(c) for c in ordered[:limit]]

    async def search(
        self,
        term: SearchTerm,
        limit: int,
        after: Optional[CommentCursor] = None,
    ) -> list[CommentView]:
        """Case-insensitive substring search, newest first."""
        needle = term.root.lower()
        matches = [
            c for c in self._store.live_comments() if needle in c.content.lower()
        ]
        ordered = self._store.ordered(matches, CommentSort(), after)
        return [self._store.view(c) for c in ordered[:limit]]

    def _reported(self) -> list[Comment]:
        pending = {
            report.comment_id
            for report in self._store.reports.values()
            if report.status is ReportStatus.PENDING
        }
        return [c for c in self._store.live_comments() if c.id in pending]

    async def find_reported(self, limit: int, offset: int = 0) -> list[CommentView]:
        """Find comments with pending reports, newest first."""
        ordered = self._store.ordered(self._reported(), CommentSort())
        return [self._store.view(c) for c in ordered[offset : offset + limit]]

    async def count_reported(self) -> int:
        """Count comments with pending reports."""
        return len(self._reported())

    async def get_stats(self, post_id: PostId) -> CommentStats:
        """Aggregate comment counts for a post."""
        comments = [c for c in self._store.live_comments() if c.post_id == post_id]
        top_level = sum(1 for c in comments if c.is_top_level)
        return CommentStats(
            total_comments=len(comments),
            top_level_comments=top_level,
            replies=len(comments) - top_level,
        )
