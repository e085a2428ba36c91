"""Reaction (like/dislike) domain service."""

import logfire
from sqlalchemy.exc import IntegrityError

from blog.domain.error import NotFoundError
from blog.domain.model.interaction import Reaction, ReactionResult
from blog.domain.model.common import utcnow
from blog.domain.repository import ReactionRepository
from blog.domain.value import CommentId, ReactionAction, ReactionType, UserId

from .base import Service
from .comment_service import CommentService

_APPLIED = {
    ReactionType.LIKE: ReactionAction.LIKED,
    ReactionType.DISLIKE: ReactionAction.DISLIKED,
}
_REMOVED = {
    ReactionType.LIKE: ReactionAction.REMOVED_LIKE,
    ReactionType.DISLIKE: ReactionAction.REMOVED_DISLIKE,
}


class ReactionService(Service):
    """Domain service for the like/dislike toggle.

    Each (comment, user) pair is in one of three states: none, liked or
    disliked. Liking a disliked comment swaps the dislike for a like;
    liking a liked comment clears it. Dislikes mirror this.
    """

    def __init__(
        self,
        reaction_repository: ReactionRepository,
        comment_service: CommentService,
    ) -> None:
        """Initialize reaction service.

        Args:
            reaction_repository: Reaction repository
            comment_service: Comment domain service
        """
        self.reaction_repository = reaction_repository
        self.comment_service = comment_service

    async def toggle_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> ReactionResult:
        """Toggle a like on a comment."""
        return await self.toggle(comment_id, user_id, ReactionType.LIKE)

    async def toggle_dislike(
        self, comment_id: CommentId, user_id: UserId
    ) -> ReactionResult:
        """Toggle a dislike on a comment."""
        return await self.toggle(comment_id, user_id, ReactionType.DISLIKE)

    async def toggle(
        self, comment_id: CommentId, user_id: UserId, reaction_type: ReactionType
    ) -> ReactionResult:
        """Apply a reaction toggle and report the resulting state.

        Both writes of a swap run in the caller's transaction, so the pair
        never ends up holding a like and a dislike at once.

        Args:
            comment_id: Comment ID
            user_id: Reacting user
            reaction_type: Reaction being toggled

        Returns:
            Action taken plus fresh counts and the user's flags

        Raises:
            NotFoundError: If the comment does not exist or is soft-deleted
        """
        with logfire.span(
            "reaction_service.toggle",
            comment_id=comment_id,
            user_id=user_id,
            reaction_type=reaction_type.value,
        ):
            comment = await self.comment_service.get_comment_by_id(comment_id)
            if not comment:
                logfire.warn("Reaction on non-existent comment", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))

            existing = await self.reaction_repository.find(comment_id, user_id)

            if existing and existing.type is reaction_type:
                await self.reaction_repository.delete(
                    comment_id, user_id, reaction_type
                )
                action = _REMOVED[reaction_type]
            else:
                if existing:
                    # Swap: clear the opposite reaction first
                    await self.reaction_repository.delete(
                        comment_id, user_id, existing.type
                    )

                try:
                    await self.reaction_repository.save(
                        Reaction(
                            comment_id=comment_id,
                            user_id=user_id,
                            type=reaction_type,
                            created_at=utcnow(),
                        )
                    )
                except IntegrityError:
                    # A concurrent request stored the same reaction
                    logfire.warn(
                        "Duplicate reaction attempt",
                        comment_id=comment_id,
                        user_id=user_id,
                        reaction_type=reaction_type.value,
                    )
                action = _APPLIED[reaction_type]

            result = await self._current_state(comment_id, user_id, action)
            logfire.info(
                "Reaction toggled",
                comment_id=comment_id,
                user_id=user_id,
                action=action.value,
                likes_count=result.likes_count,
                dislikes_count=result.dislikes_count,
            )
            return result

    async def _current_state(
        self, comment_id: CommentId, user_id: UserId, action: ReactionAction
    ) -> ReactionResult:
        current = await self.reaction_repository.find(comment_id, user_id)
        return ReactionResult(
            action=action,
            likes_count=await self.reaction_repository.count(
                comment_id, ReactionType.LIKE
            ),
            dislikes_count=await self.reaction_repository.count(
                comment_id, ReactionType.DISLIKE
            ),
            user_liked=current is not None and current.type is ReactionType.LIKE,
            user_disliked=current is not None and current.type is ReactionType.DISLIKE,
        )
