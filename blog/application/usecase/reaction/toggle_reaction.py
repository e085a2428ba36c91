"""Toggle reaction use case."""

from pydantic import BaseModel

from blog.domain.service import ReactionService
from blog.domain.value import CommentId, ReactionAction, ReactionType, UserId


class ToggleReactionRequest(BaseModel):
    """Toggle reaction request."""

    comment_id: int
    user_id: int  # Authenticated user
    reaction_type: ReactionType


class ToggleReactionResponse(BaseModel):
    """Toggle reaction response."""

    action: ReactionAction
    likes_count: int
    dislikes_count: int
    user_liked: bool
    user_disliked: bool


class ToggleReactionUseCase:
    """Use case for liking or disliking a comment."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize toggle reaction use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: ToggleReactionRequest) -> ToggleReactionResponse:
        """Execute toggle flow.

        Args:
            request: Toggle reaction request

        Returns:
            Action taken and the comment's fresh counts

        Raises:
            NotFoundError: If the comment does not exist or is deleted
        """
        result = await self.reaction_service.toggle(
            CommentId(request.comment_id),
            UserId(request.user_id),
            request.reaction_type,
        )
        return ToggleReactionResponse(**result.model_dump())
