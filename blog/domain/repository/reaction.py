"""Reaction repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from blog.domain.model.interaction import Reaction
from blog.domain.value import CommentId, ReactionType, UserId


class ReactionRepository(ABC):
    """Repository for likes and dislikes on comments.

    Likes and dislikes live in separate tables, each unique on
    ``(comment_id, user_id)``.
    """

    @abstractmethod
    async def find(self, comment_id: CommentId, user_id: UserId) -> Optional[Reaction]:
        """Find the reaction a user holds on a comment.

        Args:
            comment_id: The comment ID
            user_id: The user's ID

        Returns:
            The like or dislike if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, reaction: Reaction) -> Reaction:
        """Store a reaction.

        Args:
            reaction: The reaction to store

        Returns:
            The stored reaction

        Raises:
            IntegrityError: If the user already holds this reaction
        """
        pass

    @abstractmethod
    async def delete(
        self, comment_id: CommentId, user_id: UserId, reaction_type: ReactionType
    ) -> bool:
        """Remove a user's reaction of the given type.

        Args:
            comment_id: The comment ID
            user_id: The user's ID
            reaction_type: Like or dislike

        Returns:
            True if a reaction was removed, False if none existed
        """
        pass

    @abstractmethod
    async def count(self, comment_id: CommentId, reaction_type: ReactionType) -> int:
        """Count reactions of a type on a comment.

        Args:
            comment_id: The comment ID
            reaction_type: Like or dislike

        Returns:
            Number of reactions
        """
        pass

    @abstractmethod
    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, ReactionType]:
        """Find a user's reactions on multiple comments (batch query).

        Args:
            user_id: The user's ID
            comment_ids: Comments to check

        Returns:
            Mapping of comment ID to the user's reaction, for reacted comments only
        """
        pass
