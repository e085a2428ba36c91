"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

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
from blog.persistence.mappers import comment_to_dict, row_to_comment, row_to_comment_view
from blog.persistence.sorting import (
    SORT_EXPRESSIONS,
    dislikes_count,
    likes_count,
    replies_count,
    reports_count,
    resolve_sort_key,
)
from blog.persistence.tables import (
    comment_reports_table,
    comments_id_seq,
    comments_table,
    users_table,
)

_has_pending_report = (
    select(comment_reports_table.c.comment_id)
    .where(
        comment_reports_table.c.comment_id == comments_table.c.id,
        comment_reports_table.c.status == ReportStatus.PENDING.value,
    )
    .exists()
)


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _views() -> Select:
        """Select non-deleted comments with author name and live counts."""
        return (
            select(
                comments_table,
                users_table.c.name.label("author_name"),
                likes_count.label("likes_count"),
                dislikes_count.label("dislikes_count"),
                reports_count.label("reports_count"),
                replies_count.label("replies_count"),
            )
            .select_from(
                comments_table.outerjoin(
                    users_table, users_table.c.id == comments_table.c.user_id
                )
            )
            .where(comments_table.c.deleted_at.is_(None))
        )

    async def _fetch_views(self, stmt: Select) -> List[CommentView]:
        result = await self.session.execute(stmt)
        return [row_to_comment_view(row._asdict()) for row in result.fetchall()]

    async def next_id(self) -> CommentId:
        """Allocate the next id from the comments sequence."""
        return CommentId(await self.session.scalar(select(comments_id_seq.next_value())))

    async def find_by_id(
        self, comment_id: CommentId, include_deleted: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)

        if not include_deleted:
            stmt = stmt.where(comments_table.c.deleted_at.is_(None))

        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_view(self, comment_id: CommentId) -> Optional[CommentView]:
        """Find a non-deleted comment with its counters."""
        views = await self._fetch_views(
            self._views().where(comments_table.c.id == comment_id)
        )
        return views[0] if views else None

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id, include_deleted=True)
        comment_dict = comment_to_dict(comment)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete, cascades via foreign keys)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def resolve_cursor(
        self,
        comment_id: CommentId,
        sort_by: CommentSortField,
        post_id: Optional[PostId] = None,
        top_level_only: bool = False,
    ) -> Optional[CommentCursor]:
        """Read the cursor comment's current sort value."""
        stmt = select(
            comments_table.c.id,
            SORT_EXPRESSIONS[sort_by].label("sort_value"),
        ).where(
            comments_table.c.id == comment_id,
            comments_table.c.deleted_at.is_(None),
        )

        if post_id is not None:
            stmt = stmt.where(comments_table.c.post_id == post_id)
        if top_level_only:
            stmt = stmt.where(comments_table.c.parent_id.is_(None))

        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None
        return CommentCursor(comment_id=CommentId(row.id), sort_value=row.sort_value)

    async def find_top_level(
        self,
        post_id: PostId,
        sort: CommentSort,
        limit: int,
        offset: int = 0,
        after: Optional[CommentCursor] = None,
    ) -> List[CommentView]:
        """Find top-level comments of a post in sort order."""
        key = resolve_sort_key(sort)
        stmt = self._views().where(
            comments_table.c.post_id == post_id,
            comments_table.c.parent_id.is_(None),
        )

        if after is not None:
            stmt = stmt.where(key.after_cursor(after))

        stmt = stmt.order_by(*key.order_by).limit(limit).offset(offset)
        return await self._fetch_views(stmt)

    async def count_top_level(self, post_id: PostId) -> int:
        """Count non-deleted top-level comments of a post."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.parent_id.is_(None))
            .where(comments_table.c.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_replies(self, parent_id: CommentId) -> List[CommentView]:
        """Find direct replies, oldest first."""
        key = resolve_sort_key(
            CommentSort(
                sort_by=CommentSortField.CREATED_AT, sort_order=SortDirection.ASC
            )
        )
        stmt = (
            self._views()
            .where(comments_table.c.parent_id == parent_id)
            .order_by(*key.order_by)
        )
        return await self._fetch_views(stmt)

    async def find_by_author(
        self,
        author_id: UserId,
        sort: CommentSort,
        limit: int,
        after: Optional[CommentCursor] = None,
    ) -> List[CommentView]:
        """Find a user's comments in sort order."""
        key = resolve_sort_key(sort)
        stmt = self._views().where(comments_table.c.user_id == author_id)

        if after is not None:
            stmt = stmt.where(key.after_cursor(after))

        stmt = stmt.order_by(*key.order_by).limit(limit)
        return await self._fetch_views(stmt)

    async def search(
        self,
        term: SearchTerm,
        limit: int,
        after: Optional[CommentCursor] = None,
    ) -> List[CommentView]:
        """Case-insensitive substring search, newest first."""
        key = resolve_sort_key(CommentSort())
        stmt = self._views().where(
            comments_table.c.content.icontains(term.root, autoescape=True)
        )

        if after is not None:
            stmt = stmt.where(key.after_cursor(after))

        stmt = stmt.order_by(*key.order_by).limit(limit)
        return await self._fetch_views(stmt)

    async def find_reported(self, limit: int, offset: int = 0) -> List[CommentView]:
        """Find comments with pending reports, newest first."""
        key = resolve_sort_key(CommentSort())
        stmt = (
            self._views()
            .where(_has_pending_report)
            .order_by(*key.order_by)
            .limit(limit)
            .offset(offset)
        )
        return await self._fetch_views(stmt)

    async def count_reported(self) -> int:
        """Count comments with pending reports."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.deleted_at.is_(None))
            .where(_has_pending_report)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def get_stats(self, post_id: PostId) -> CommentStats:
        """Aggregate comment counts for a post in one query."""
        stmt = (
            select(
                func.count().label("total_comments"),
                func.count()
                .filter(comments_table.c.parent_id.is_(None))
                .label("top_level_comments"),
                func.count()
                .filter(comments_table.c.parent_id.is_not(None))
                .label("replies"),
            )
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        return CommentStats(**result.one()._asdict())
