"""Comment domain service."""

import math
from datetime import timedelta
from typing import Awaitable, Callable, Optional

import logfire

from blog.config import CommentSettings
from blog.domain.error import (
    EditWindowExpiredError,
    InvalidParentCommentError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from blog.domain.model.comment import Comment, CommentStats, CommentView
from blog.domain.model.common import utcnow
from blog.domain.model.page import CursorPage, OffsetPage
from blog.domain.repository import (
    CommentRepository,
    PostRepository,
    ReactionRepository,
    ReportRepository,
)
from blog.domain.value import (
    CommentCursor,
    CommentId,
    CommentSort,
    CommentSortField,
    PostId,
    ReactionType,
    SearchTerm,
    SortDirection,
    UserId,
    clamp_page_size,
)

from .base import Service


class CommentService(Service):
    """Domain service for comment retrieval and lifecycle.

    Listings come in two shapes. Offset pages carry an eagerly computed
    total. Cursor pages ("load more") fetch one row past the requested limit
    to learn whether more rows follow; the id of the last returned comment is
    the cursor for the next call.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        reaction_repository: ReactionRepository,
        report_repository: ReportRepository,
        settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository
            reaction_repository: Reaction repository (reader flags)
            report_repository: Report repository (reader flags)
            settings: Comment engine settings
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.reaction_repository = reaction_repository
        self.report_repository = report_repository
        self.settings = settings

    # Retrieval

    async def get_comments_page(
        self,
        post_id: PostId,
        per_page: int | None = None,
        page: int = 1,
        sort_by: CommentSortField = CommentSortField.CREATED_AT,
        sort_order: SortDirection = SortDirection.DESC,
        actor_id: UserId | None = None,
    ) -> OffsetPage[CommentView]:
        """Get a numbered page of top-level comments on a post.

        Args:
            post_id: Post ID
            per_page: Requested page size (clamped to the offset cap)
            page: 1-based page number
            sort_by: Sort field
            sort_order: Sort direction
            actor_id: Reading user, if authenticated

        Returns:
            Offset page of comment views

        Raises:
            NotFoundError: If the post does not exist
        """
        per_page = clamp_page_size(
            per_page, self.settings.default_page_size, self.settings.max_page_size
        )
        page = max(1, page)
        sort = CommentSort(sort_by=sort_by, sort_order=sort_order)

        with logfire.span(
            "comment_service.get_comments_page",
            post_id=post_id,
            page=page,
            per_page=per_page,
            sort_by=sort_by.value,
            sort_order=sort_order.value,
        ):
            await self._require_post(post_id)

            total = await self.comment_repository.count_top_level(post_id)
            views = await self.comment_repository.find_top_level(
                post_id=post_id,
                sort=sort,
                limit=per_page,
                offset=(page - 1) * per_page,
            )
            views = await self._with_actor_flags(views, actor_id)

            logfire.info(
                "Comment page retrieved",
                post_id=post_id,
                page=page,
                count=len(views),
                total=total,
            )
            return OffsetPage[CommentView](
                items=views,
                total=total,
                current_page=page,
                last_page=max(1, math.ceil(total / per_page)),
                per_page=per_page,
            )

    async def get_comments_by_cursor(
        self,
        post_id: PostId,
        limit: int | None = None,
        last_comment_id: CommentId | None = None,
        sort_by: CommentSortField = CommentSortField.CREATED_AT,
        sort_order: SortDirection = SortDirection.DESC,
        actor_id: UserId | None = None,
    ) -> CursorPage[CommentView]:
        """Load the next batch of top-level comments on a post.

        An unknown, soft-deleted, foreign or reply ``last_comment_id`` is
        treated as absent and the first page is returned.

        Args:
            post_id: Post ID
            limit: Requested batch size (clamped to the load-more cap)
            last_comment_id: Id of the last comment the client has seen
            sort_by: Sort field
            sort_order: Sort direction
            actor_id: Reading user, if authenticated

        Returns:
            Cursor page of comment views

        Raises:
            NotFoundError: If the post does not exist
        """
        limit = clamp_page_size(
            limit, self.settings.default_page_size, self.settings.max_load_more_limit
        )
        sort = CommentSort(sort_by=sort_by, sort_order=sort_order)

        with logfire.span(
            "comment_service.get_comments_by_cursor",
            post_id=post_id,
            limit=limit,
            last_comment_id=last_comment_id,
            sort_by=sort_by.value,
            sort_order=sort_order.value,
        ):
            await self._require_post(post_id)
            cursor = await self._resolve_cursor(
                last_comment_id, sort_by, post_id, top_level_only=True
            )

            async def fetch(size: int) -> list[CommentView]:
                return await self.comment_repository.find_top_level(
                    post_id=post_id, sort=sort, limit=size, after=cursor
                )

            return await self._assemble_cursor_page(fetch, limit, actor_id)

    async def get_user_comments_by_cursor(
        self,
        author_id: UserId,
        limit: int | None = None,
        last_comment_id: CommentId | None = None,
        sort_by: CommentSortField = CommentSortField.CREATED_AT,
        sort_order: SortDirection = SortDirection.DESC,
    ) -> CursorPage[CommentView]:
        """Load a batch of the comments a user wrote, across posts.

        Args:
            author_id: Author whose comments to list (also the reader)
            limit: Requested batch size (clamped to the search cap)
            last_comment_id: Id of the last comment the client has seen
            sort_by: Sort field
            sort_order: Sort direction

        Returns:
            Cursor page of comment views
        """
        limit = clamp_page_size(
            limit, self.settings.default_page_size, self.settings.max_search_limit
        )
        sort = CommentSort(sort_by=sort_by, sort_order=sort_order)

        with logfire.span(
            "comment_service.get_user_comments_by_cursor",
            author_id=author_id,
            limit=limit,
            last_comment_id=last_comment_id,
        ):
            cursor = await self._resolve_cursor(last_comment_id, sort_by)

            async def fetch(size: int) -> list[CommentView]:
                return await self.comment_repository.find_by_author(
                    author_id=author_id, sort=sort, limit=size, after=cursor
                )

            return await self._assemble_cursor_page(fetch, limit, author_id)

    async def search_comments(
        self,
        query: str,
        limit: int | None = None,
        last_comment_id: CommentId | None = None,
        actor_id: UserId | None = None,
    ) -> CursorPage[CommentView]:
        """Search comment content, newest first.

        Args:
            query: Search text (3-100 characters after trimming)
            limit: Requested batch size (clamped to the search cap)
            last_comment_id: Id of the last comment the client has seen
            actor_id: Reading user, if authenticated

        Returns:
            Cursor page of matching comment views

        Raises:
            ValidationError: If the query is too short or too long
        """
        try:
            term = SearchTerm(query)
        except ValueError as e:
            raise ValidationError("Search query must be 3-100 characters") from e

        limit = clamp_page_size(
            limit, self.settings.default_page_size, self.settings.max_search_limit
        )

        with logfire.span(
            "comment_service.search_comments",
            query=term.root,
            limit=limit,
            last_comment_id=last_comment_id,
        ):
            cursor = await self._resolve_cursor(last_comment_id, CommentSort().sort_by)

            async def fetch(size: int) -> list[CommentView]:
                return await self.comment_repository.search(
                    term=term, limit=size, after=cursor
                )

            return await self._assemble_cursor_page(fetch, limit, actor_id)

    async def get_replies(
        self, parent_id: CommentId, actor_id: UserId | None = None
    ) -> list[CommentView]:
        """Get direct replies of a comment, oldest first.

        Args:
            parent_id: Parent comment ID
            actor_id: Reading user, if authenticated

        Returns:
            Reply views

        Raises:
            NotFoundError: If the parent comment does not exist
        """
        with logfire.span("comment_service.get_replies", parent_id=parent_id):
            await self._require_comment(parent_id)
            replies = await self.comment_repository.find_replies(parent_id)
            return await self._with_actor_flags(replies, actor_id)

    async def get_stats(self, post_id: PostId) -> CommentStats:
        """Get comment counts for a post.

        Args:
            post_id: Post ID

        Returns:
            Total, top-level and reply counts

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("comment_service.get_stats", post_id=post_id):
            await self._require_post(post_id)
            stats = await self.comment_repository.get_stats(post_id)
            logfire.info(
                "Comment stats computed",
                post_id=post_id,
                total_comments=stats.total_comments,
            )
            return stats

    async def get_comment(
        self, comment_id: CommentId, actor_id: UserId | None = None
    ) -> CommentView:
        """Get a single comment with its counters.

        Raises:
            NotFoundError: If the comment does not exist or is soft-deleted
        """
        view = await self.comment_repository.find_view(comment_id)
        if not view:
            raise NotFoundError("Comment", str(comment_id))
        [view] = await self._with_actor_flags([view], actor_id)
        return view

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a non-deleted comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        return await self.comment_repository.find_by_id(comment_id)

    async def get_reported_comments(
        self, page: int = 1, per_page: int | None = None
    ) -> OffsetPage[CommentView]:
        """Get a numbered page of comments with pending reports, newest first."""
        per_page = clamp_page_size(
            per_page, self.settings.default_page_size, self.settings.max_page_size
        )
        page = max(1, page)

        total = await self.comment_repository.count_reported()
        views = await self.comment_repository.find_reported(
            limit=per_page, offset=(page - 1) * per_page
        )
        return OffsetPage[CommentView](
            items=views,
            total=total,
            current_page=page,
            last_page=max(1, math.ceil(total / per_page)),
            per_page=per_page,
        )

    # Lifecycle

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> CommentView:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            author_id: Author user ID
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment view

        Raises:
            NotFoundError: If the post does not exist
            InvalidParentCommentError: If the parent is missing, deleted or on
                another post
            ValidationError: If the content is empty or too long
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=post_id,
            author_id=author_id,
            parent_id=parent_id,
        ):
            content = self._validate_content(content)
            await self._require_post(post_id)

            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=parent_id,
                        post_id=post_id,
                    )
                    raise InvalidParentCommentError(parent_id, "not found")
                if parent.post_id != post_id:
                    logfire.error(
                        "Parent comment does not belong to post",
                        parent_id=parent_id,
                        parent_post_id=parent.post_id,
                        target_post_id=post_id,
                    )
                    raise InvalidParentCommentError(
                        parent_id, "belongs to another post"
                    )

            now = utcnow()
            comment = Comment(
                id=await self.comment_repository.next_id(),
                post_id=post_id,
                author_id=author_id,
                content=content,
                parent_id=parent_id,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=saved.id,
                post_id=post_id,
                author_id=author_id,
                is_reply=saved.is_reply,
            )
            return await self.get_comment(saved.id, author_id)

    async def update_comment(
        self, comment_id: CommentId, actor_id: UserId, content: str
    ) -> CommentView:
        """Edit a comment's content.

        Only the author may edit, and only within the edit window. The comment
        is marked as edited only when its content actually changes.

        Args:
            comment_id: Comment ID
            actor_id: User performing the edit
            content: New comment text

        Returns:
            Updated comment view

        Raises:
            NotFoundError: If the comment does not exist or is soft-deleted
            NotAuthorizedError: If the actor is not the author
            EditWindowExpiredError: If the edit window has closed
            ValidationError: If the content is empty or too long
        """
        with logfire.span(
            "comment_service.update_comment", comment_id=comment_id, actor_id=actor_id
        ):
            content = self._validate_content(content)
            comment = await self._require_comment(comment_id)
            self._require_author(comment, actor_id)

            window = timedelta(minutes=self.settings.edit_window_minutes)
            if utcnow() - comment.created_at > window:
                logfire.warn(
                    "Edit attempted after window closed",
                    comment_id=comment_id,
                    created_at=comment.created_at.isoformat(),
                )
                raise EditWindowExpiredError(
                    str(comment_id), self.settings.edit_window_minutes
                )

            if content != comment.content:
                now = utcnow()
                comment = await self.comment_repository.save(
                    comment.evolve(
                        content=content, is_edited=True, edited_at=now, updated_at=now
                    )
                )
                logfire.info("Comment edited", comment_id=comment_id)

            return await self.get_comment(comment.id, actor_id)

    async def delete_comment(self, comment_id: CommentId, actor_id: UserId) -> None:
        """Soft-delete a comment (author only).

        Raises:
            NotFoundError: If the comment does not exist or is already deleted
            NotAuthorizedError: If the actor is not the author
        """
        with logfire.span(
            "comment_service.delete_comment", comment_id=comment_id, actor_id=actor_id
        ):
            comment = await self._require_comment(comment_id)
            self._require_author(comment, actor_id)

            now = utcnow()
            await self.comment_repository.save(
                comment.evolve(deleted_at=now, updated_at=now)
            )
            logfire.info("Comment soft-deleted", comment_id=comment_id)

    async def restore_comment(
        self, comment_id: CommentId, actor_id: UserId
    ) -> CommentView:
        """Restore a soft-deleted comment (author only).

        Restoring a comment that is not deleted is a no-op.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor is not the author
        """
        with logfire.span(
            "comment_service.restore_comment", comment_id=comment_id, actor_id=actor_id
        ):
            comment = await self._require_comment(comment_id, include_deleted=True)
            self._require_author(comment, actor_id)

            if comment.is_deleted:
                await self.comment_repository.save(
                    comment.evolve(deleted_at=None, updated_at=utcnow())
                )
                logfire.info("Comment restored", comment_id=comment_id)

            return await self.get_comment(comment_id, actor_id)

    async def force_delete_comment(
        self, comment_id: CommentId, actor_id: UserId
    ) -> None:
        """Permanently delete a comment with its interactions and replies.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor is not the author
        """
        with logfire.span(
            "comment_service.force_delete_comment",
            comment_id=comment_id,
            actor_id=actor_id,
        ):
            comment = await self._require_comment(comment_id, include_deleted=True)
            self._require_author(comment, actor_id)

            await self.comment_repository.delete(comment_id)
            logfire.info("Comment permanently deleted", comment_id=comment_id)

    # Helpers

    async def _assemble_cursor_page(
        self,
        fetch: Callable[[int], Awaitable[list[CommentView]]],
        limit: int,
        actor_id: UserId | None,
    ) -> CursorPage[CommentView]:
        # One extra row tells us whether another page exists
        rows = await fetch(limit + 1)
        has_more = len(rows) > limit
        items = await self._with_actor_flags(rows[:limit], actor_id)

        logfire.info("Comment batch retrieved", count=len(items), has_more=has_more)
        return CursorPage[CommentView](
            items=items,
            has_more=has_more,
            next_cursor=items[-1].id if has_more else None,
            limit=limit,
        )

    async def _resolve_cursor(
        self,
        last_comment_id: CommentId | None,
        sort_by: CommentSortField,
        post_id: PostId | None = None,
        top_level_only: bool = False,
    ) -> Optional[CommentCursor]:
        if last_comment_id is None:
            return None

        cursor = await self.comment_repository.resolve_cursor(
            last_comment_id, sort_by, post_id=post_id, top_level_only=top_level_only
        )
        if cursor is None:
            logfire.warn(
                "Stale comment cursor, returning first page",
                last_comment_id=last_comment_id,
                post_id=post_id,
            )
        return cursor

    async def _with_actor_flags(
        self, views: list[CommentView], actor_id: UserId | None
    ) -> list[CommentView]:
        if actor_id is None or not views:
            return views

        # Batch queries to avoid N+1
        comment_ids = [view.id for view in views]
        reactions = await self.reaction_repository.find_by_user_and_comments(
            actor_id, comment_ids
        )
        reported = await self.report_repository.find_reported_by_user(
            actor_id, comment_ids
        )

        return [
            view.evolve(
                user_liked=reactions.get(view.id) is ReactionType.LIKE,
                user_disliked=reactions.get(view.id) is ReactionType.DISLIKE,
                user_reported=view.id in reported,
            )
            for view in views
        ]

    async def _require_post(self, post_id: PostId) -> None:
        if not await self.post_repository.find_by_id(post_id):
            logfire.warn("Post not found", post_id=post_id)
            raise NotFoundError("Post", str(post_id))

    async def _require_comment(
        self, comment_id: CommentId, include_deleted: bool = False
    ) -> Comment:
        comment = await self.comment_repository.find_by_id(
            comment_id, include_deleted=include_deleted
        )
        if not comment:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    @staticmethod
    def _require_author(comment: Comment, actor_id: UserId) -> None:
        if not comment.is_owned_by(actor_id):
            logfire.warn(
                "Unauthorized comment modification attempt",
                comment_id=comment.id,
                author_id=comment.author_id,
                actor_id=actor_id,
            )
            raise NotAuthorizedError("comment", str(comment.id), str(actor_id))

    def _validate_content(self, content: str) -> str:
        content = content.strip()
        if not content:
            raise ValidationError("Comment content cannot be empty")
        if len(content) > self.settings.max_content_length:
            raise ValidationError(
                f"Comment content cannot exceed "
                f"{self.settings.max_content_length} characters"
            )
        return content
