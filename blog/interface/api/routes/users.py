"""Routes for the authenticated user's own comments."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from blog.application.usecase.comment import (
    GetUserCommentsRequest,
    GetUserCommentsResponse,
    GetUserCommentsUseCase,
)
from blog.domain.error import DomainError
from blog.domain.service import JWTService
from blog.domain.value import CommentSortField, SortDirection
from blog.interface.api.errors import http_error, require_user

router = APIRouter(prefix="/user", tags=["users"], route_class=DishkaRoute)


@router.get("/comments", response_model=GetUserCommentsResponse)
async def get_user_comments(
    get_user_comments_use_case: FromDishka[GetUserCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = None,
    last_comment_id: int | None = None,
    sort_by: CommentSortField = CommentSortField.CREATED_AT,
    sort_order: SortDirection = SortDirection.DESC,
    auth_token: str | None = Cookie(default=None),
) -> GetUserCommentsResponse:
    """List the comments the authenticated user wrote, across posts."""
    user_id = require_user(jwt_service, auth_token, "list your comments")

    try:
        return await get_user_comments_use_case.execute(
            GetUserCommentsRequest(
                user_id=user_id,
                limit=limit,
                last_comment_id=last_comment_id,
                sort_by=sort_by,
                sort_order=sort_order,
            )
        )
    except DomainError as e:
        raise http_error(e)
