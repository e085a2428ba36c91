"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, Field

from blog.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    ForceDeleteCommentRequest,
    ForceDeleteCommentResponse,
    ForceDeleteCommentUseCase,
    GetCommentRequest,
    GetCommentResponse,
    GetCommentUseCase,
    ListRepliesRequest,
    ListRepliesResponse,
    ListRepliesUseCase,
    RestoreCommentRequest,
    RestoreCommentResponse,
    RestoreCommentUseCase,
    SearchCommentsRequest,
    SearchCommentsResponse,
    SearchCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from blog.application.usecase.reaction import (
    ToggleReactionRequest,
    ToggleReactionResponse,
    ToggleReactionUseCase,
)
from blog.application.usecase.report import (
    ReportCommentRequest,
    ReportCommentResponse,
    ReportCommentUseCase,
)
from blog.domain.error import DomainError
from blog.domain.service import JWTService
from blog.domain.value import ReactionType, ReportReason
from blog.interface.api.errors import http_error, require_user

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


# Declared before /{comment_id} so "search" is not read as an id
@router.get("/search", response_model=SearchCommentsResponse)
async def search_comments(
    q: str,
    search_comments_use_case: FromDishka[SearchCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = None,
    last_comment_id: int | None = None,
    auth_token: str | None = Cookie(default=None),
) -> SearchCommentsResponse:
    """Search comments by content, newest first.

    Args:
        q: Search text (3-100 characters)
        search_comments_use_case: Search use case from DI
        jwt_service: JWT service for token verification (injected)
        limit: Batch size (capped at 100)
        last_comment_id: Cursor from the previous batch
        auth_token: JWT token from cookie

    Returns:
        Matching comments with the cursor for the next batch
    """
    try:
        return await search_comments_use_case.execute(
            SearchCommentsRequest(
                query=q,
                limit=limit,
                last_comment_id=last_comment_id,
                actor_id=jwt_service.get_user_id_from_token(auth_token),
            )
        )
    except DomainError as e:
        raise http_error(e)


@router.get("/{comment_id}", response_model=GetCommentResponse)
async def get_comment(
    comment_id: int,
    get_comment_use_case: FromDishka[GetCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetCommentResponse:
    """Get a comment with its direct replies."""
    try:
        return await get_comment_use_case.execute(
            GetCommentRequest(
                comment_id=comment_id,
                actor_id=jwt_service.get_user_id_from_token(auth_token),
            )
        )
    except DomainError as e:
        raise http_error(e)


@router.get("/{comment_id}/replies", response_model=ListRepliesResponse)
async def list_replies(
    comment_id: int,
    list_replies_use_case: FromDishka[ListRepliesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListRepliesResponse:
    """List the direct replies of a comment, oldest first."""
    try:
        return await list_replies_use_case.execute(
            ListRepliesRequest(
                comment_id=comment_id,
                actor_id=jwt_service.get_user_id_from_token(auth_token),
            )
        )
    except DomainError as e:
        raise http_error(e)


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str = Field(min_length=1, max_length=2000)


@router.put("/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: int,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateCommentResponse:
    """Update a comment's content.

    Only the author can edit, and only within 15 minutes of posting.

    Args:
        comment_id: Comment ID
        request: Update data (content)
        update_comment_use_case: Update comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Updated comment details

    Raises:
        HTTPException: 401 if not authenticated, 403 if not the author or the
            edit window has closed, 404 if the comment is missing
    """
    user_id = require_user(jwt_service, auth_token, "edit comments")

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=comment_id, actor_id=user_id, content=request.content
            )
        )
    except DomainError as e:
        raise http_error(e)


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: int,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Soft-delete a comment (author only)."""
    user_id = require_user(jwt_service, auth_token, "delete comments")

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, actor_id=user_id)
        )
    except DomainError as e:
        raise http_error(e)


@router.post("/{comment_id}/restore", response_model=RestoreCommentResponse)
async def restore_comment(
    comment_id: int,
    restore_comment_use_case: FromDishka[RestoreCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RestoreCommentResponse:
    """Restore a soft-deleted comment (author only)."""
    user_id = require_user(jwt_service, auth_token, "restore comments")

    try:
        return await restore_comment_use_case.execute(
            RestoreCommentRequest(comment_id=comment_id, actor_id=user_id)
        )
    except DomainError as e:
        raise http_error(e)


@router.delete("/{comment_id}/force", response_model=ForceDeleteCommentResponse)
async def force_delete_comment(
    comment_id: int,
    force_delete_comment_use_case: FromDishka[ForceDeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ForceDeleteCommentResponse:
    """Permanently delete a comment with its replies and interactions."""
    user_id = require_user(jwt_service, auth_token, "delete comments")

    try:
        return await force_delete_comment_use_case.execute(
            ForceDeleteCommentRequest(comment_id=comment_id, actor_id=user_id)
        )
    except DomainError as e:
        raise http_error(e)


async def _toggle(
    comment_id: int,
    reaction_type: ReactionType,
    toggle_reaction_use_case: ToggleReactionUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
) -> ToggleReactionResponse:
    user_id = require_user(jwt_service, auth_token, f"{reaction_type.value} comments")

    try:
        return await toggle_reaction_use_case.execute(
            ToggleReactionRequest(
                comment_id=comment_id, user_id=user_id, reaction_type=reaction_type
            )
        )
    except DomainError as e:
        raise http_error(e)


@router.post("/{comment_id}/like", response_model=ToggleReactionResponse)
async def like_comment(
    comment_id: int,
    toggle_reaction_use_case: FromDishka[ToggleReactionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleReactionResponse:
    """Toggle a like; liking a disliked comment replaces the dislike."""
    return await _toggle(
        comment_id, ReactionType.LIKE, toggle_reaction_use_case, jwt_service, auth_token
    )


@router.post("/{comment_id}/dislike", response_model=ToggleReactionResponse)
async def dislike_comment(
    comment_id: int,
    toggle_reaction_use_case: FromDishka[ToggleReactionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleReactionResponse:
    """Toggle a dislike; disliking a liked comment replaces the like."""
    return await _toggle(
        comment_id,
        ReactionType.DISLIKE,
        toggle_reaction_use_case,
        jwt_service,
        auth_token,
    )


class ReportCommentAPIRequest(BaseModel):
    """API request for reporting a comment."""

    reason: ReportReason
    description: str | None = Field(default=None, max_length=500)


@router.post("/{comment_id}/report", response_model=ReportCommentResponse)
async def report_comment(
    comment_id: int,
    request: ReportCommentAPIRequest,
    report_comment_use_case: FromDishka[ReportCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReportCommentResponse:
    """Report a comment to moderators.

    Reporting the same comment twice is answered with ``reported=false``.
    """
    user_id = require_user(jwt_service, auth_token, "report comments")

    try:
        return await report_comment_use_case.execute(
            ReportCommentRequest(
                comment_id=comment_id,
                user_id=user_id,
                reason=request.reason,
                description=request.description,
            )
        )
    except DomainError as e:
        raise http_error(e)
