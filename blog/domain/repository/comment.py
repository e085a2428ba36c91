"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.comment import Comment, CommentStats, CommentView
from blog.domain.value import (
    CommentCursor,
    CommentId,
    CommentSort,
    CommentSortField,
    PostId,
    SearchTerm,
    UserId,
)


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence and the query side of the
    comment retrieval engine. Implementations live in the infrastructure
    layer.

    Listing methods return ``CommentView`` objects carrying live interaction
    counts. Soft-deleted comments never appear in listings, counts or stats.
    Every listing is ordered by ``(sort value, id)`` with both keys in the
    requested direction.
    """

    @abstractmethod
    async def next_id(self) -> CommentId:
        """Allocate the next comment id from the monotonically increasing sequence.

        Returns:
            A fresh comment id, greater than every id allocated before it
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, comment_id: CommentId, include_deleted: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier
            include_deleted: Whether a soft-deleted comment may be returned

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_view(self, comment_id: CommentId) -> Optional[CommentView]:
        """Find a non-deleted comment together with its live counters.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment view if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Permanently delete a comment.

        Cascades to the comment's likes, dislikes, reports and replies.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a row was deleted, False if it did not exist
        """
        pass

    @abstractmethod
    async def resolve_cursor(
        self,
        comment_id: CommentId,
        sort_by: CommentSortField,
        post_id: Optional[PostId] = None,
        top_level_only: bool = False,
    ) -> Optional[CommentCursor]:
        """Resolve a cursor token into the values needed to continue a walk.

        Args:
            comment_id: Id of the last comment the client has seen
            sort_by: Active sort field
            post_id: When given, the cursor comment must belong to this post
            top_level_only: When True, a reply is not a valid cursor

        Returns:
            The cursor, or None when the comment is missing, soft-deleted,
            belongs to another post or is a reply in a top-level walk
        """
        pass

    @abstractmethod
    async def find_top_level(
        self,
        post_id: PostId,
        sort: CommentSort,
        limit: int,
        offset: int = 0,
        after: Optional[CommentCursor] = None,
    ) -> List[CommentView]:
        """Find top-level comments of a post.

        Args:
            post_id: The post ID
            sort: Ordering to apply
            limit: Maximum number of comments to return
            offset: Number of comments to skip (offset pagination)
            after: Only return comments strictly after this cursor

        Returns:
            Ordered comment views
        """
        pass

    @abstractmethod
    async def count_top_level(self, post_id: PostId) -> int:
        """Count top-level comments of a post.

        Args:
            post_id: The post ID

        Returns:
            Number of top-level comments
        """
        pass

    @abstractmethod
    async def find_replies(self, parent_id: CommentId) -> List[CommentView]:
        """Find direct replies of a comment, oldest first.

        Args:
            parent_id: The parent comment ID

        Returns:
            Reply views ordered by ``(created_at, id)`` ascending
        """
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        sort: CommentSort,
        limit: int,
        after: Optional[CommentCursor] = None,
    ) -> List[CommentView]:
        """Find comments written by a user, across posts and depths.

        Args:
            author_id: The author's user ID
            sort: Ordering to apply
            limit: Maximum number of comments to return
            after: Only return comments strictly after this cursor

        Returns:
            Ordered comment views
        """
        pass

    @abstractmethod
    async def search(
        self,
        term: SearchTerm,
        limit: int,
        after: Optional[CommentCursor] = None,
    ) -> List[CommentView]:
        """Case-insensitive substring search over comment content.

        Results are ordered newest first.

        Args:
            term: Search term
            limit: Maximum number of comments to return
            after: Only return comments strictly after this cursor

        Returns:
            Matching comment views
        """
        pass

    @abstractmethod
    async def find_reported(self, limit: int, offset: int = 0) -> List[CommentView]:
        """Find comments with at least one pending report, newest first.

        Args:
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Comment views in the moderation queue
        """
        pass

    @abstractmethod
    async def count_reported(self) -> int:
        """Count comments with at least one pending report.

        Returns:
            Size of the moderation queue
        """
        pass

    @abstractmethod
    async def get_stats(self, post_id: PostId) -> CommentStats:
        """Aggregate comment counts for a post in a single read.

        Args:
            post_id: The post ID

        Returns:
            Total, top-level and reply counts
        """
        pass
