"""In-memory reaction repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from blog.domain.model import Reaction
from blog.domain.repository import ReactionRepository
from blog.domain.value import CommentId, ReactionType, UserId

from .store import InMemoryStore


class InMemoryReactionRepository(ReactionRepository):
    """In-memory implementation of ReactionRepository for testing.

    Keyed by ``(comment_id, user_id)``, so a user can never hold a like and a
    dislike on one comment at the same time.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find(self, comment_id: CommentId, user_id: UserId) -> Optional[Reaction]:
        """Find the user's reaction on a comment."""
        return self._store.reactions.get((comment_id, user_id))

    async def save(self, reaction: Reaction) -> Reaction:
        """Store a reaction.

        Raises:
            IntegrityError: If the user already holds this reaction
        """
        key = (reaction.comment_id, reaction.user_id)
        existing = self._store.reactions.get(key)
        if existing and existing.type is reaction.type:
            raise IntegrityError("Duplicate reaction", None, Exception())

        self._store.reactions[key] = reaction
        return reaction

    async def delete(
        self, comment_id: CommentId, user_id: UserId, reaction_type: ReactionType
    ) -> bool:
        """Remove the user's reaction of the given type."""
        existing = self._store.reactions.get((comment_id, user_id))
        if not existing or existing.type is not reaction_type:
            return False
        del self._store.reactions[(comment_id, user_id)]
        return True

    async def count(self, comment_id: CommentId, reaction_type: ReactionType) -> int:
        """Count reactions of a type on a comment."""
        return self._store.count_reactions(comment_id, reaction_type)

    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, ReactionType]:
        """Find a user's reactions on multiple comments (batch query)."""
        return {
            comment_id: reaction.type
            for comment_id in comment_ids
            if (reaction := self._store.reactions.get((comment_id, user_id)))
        }
