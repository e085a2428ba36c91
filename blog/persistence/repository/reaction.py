"""PostgreSQL implementation of Reaction repository."""

from typing import Optional, Sequence

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Reaction
from blog.domain.repository import ReactionRepository
from blog.domain.value import CommentId, ReactionType, UserId
from blog.persistence.mappers import reaction_to_dict, row_to_reaction
from blog.persistence.tables import REACTION_TABLES


class PostgresReactionRepository(ReactionRepository):
    """PostgreSQL implementation of ReactionRepository.

    Likes and dislikes are stored in ``comment_likes`` and
    ``comment_dislikes`` respectively.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(self, comment_id: CommentId, user_id: UserId) -> Optional[Reaction]:
        """Find the user's like or dislike on a comment."""
        for reaction_type in ReactionType:
            table = REACTION_TABLES[reaction_type.value]
            stmt = select(table).where(
                and_(table.c.comment_id == comment_id, table.c.user_id == user_id)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            if row:
                return row_to_reaction(row._asdict(), reaction_type)
        return None

    async def save(self, reaction: Reaction) -> Reaction:
        """Store a reaction.

        The insert runs in a savepoint so a unique violation leaves the
        surrounding transaction usable.
        """
        table = REACTION_TABLES[reaction.type.value]
        stmt = insert(table).values(**reaction_to_dict(reaction))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return reaction

    async def delete(
        self, comment_id: CommentId, user_id: UserId, reaction_type: ReactionType
    ) -> bool:
        """Remove the user's reaction of the given type."""
        table = REACTION_TABLES[reaction_type.value]
        stmt = delete(table).where(
            and_(table.c.comment_id == comment_id, table.c.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count(self, comment_id: CommentId, reaction_type: ReactionType) -> int:
        """Count reactions of a type on a comment."""
        table = REACTION_TABLES[reaction_type.value]
        stmt = (
            select(func.count())
            .select_from(table)
            .where(table.c.comment_id == comment_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, ReactionType]:
        """Find a user's reactions on multiple comments (batch query)."""
        if not comment_ids:
            return {}

        reactions: dict[CommentId, ReactionType] = {}
        for reaction_type in ReactionType:
            table = REACTION_TABLES[reaction_type.value]
            stmt = select(table.c.comment_id).where(
                and_(
                    table.c.user_id == user_id,
                    table.c.comment_id.in_(comment_ids),
                )
            )
            result = await self.session.execute(stmt)
            for comment_id in result.scalars():
                reactions[CommentId(comment_id)] = reaction_type
        return reactions
