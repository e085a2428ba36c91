"""Routes for the comments of a post."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from blog.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentStatsRequest,
    GetCommentStatsResponse,
    GetCommentStatsUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    LoadMoreCommentsRequest,
    LoadMoreCommentsResponse,
    LoadMoreCommentsUseCase,
)
from blog.domain.error import DomainError
from blog.domain.service import JWTService
from blog.domain.value import CommentSortField, SortDirection
from blog.interface.api.errors import http_error, require_user

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


@router.get(
    "/{post_id}/comments",
    response_model=ListCommentsResponse | LoadMoreCommentsResponse,
)
async def list_comments(
    post_id: int,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    load_more_use_case: FromDishka[LoadMoreCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    per_page: int | None = None,
    page: int = 1,
    sort_by: CommentSortField = CommentSortField.CREATED_AT,
    sort_order: SortDirection = SortDirection.DESC,
    load_more: bool = False,
    last_comment_id: int | None = None,
    auth_token: str | None = Cookie(default=None),
) -> ListCommentsResponse | LoadMoreCommentsResponse:
    """List top-level comments of a post.

    With ``load_more=true`` the response is a cursor batch continuing after
    ``last_comment_id``; otherwise it is a numbered page.

    Raises:
        HTTPException: 404 if the post does not exist, 422 on unknown sort values
    """
    actor_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        if load_more:
            return await load_more_use_case.execute(
                LoadMoreCommentsRequest(
                    post_id=post_id,
                    limit=per_page,
                    last_comment_id=last_comment_id,
                    sort_by=sort_by,
                    sort_order=sort_order,
                    actor_id=actor_id,
                )
            )
        return await list_comments_use_case.execute(
            ListCommentsRequest(
                post_id=post_id,
                per_page=per_page,
                page=page,
                sort_by=sort_by,
                sort_order=sort_order,
                actor_id=actor_id,
            )
        )
    except DomainError as e:
        raise http_error(e)


@router.get("/{post_id}/comments/load-more", response_model=LoadMoreCommentsResponse)
async def load_more_comments(
    post_id: int,
    load_more_use_case: FromDishka[LoadMoreCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = None,
    last_comment_id: int | None = None,
    sort_by: CommentSortField = CommentSortField.CREATED_AT,
    sort_order: SortDirection = SortDirection.DESC,
    auth_token: str | None = Cookie(default=None),
) -> LoadMoreCommentsResponse:
    """Load the next batch of top-level comments after ``last_comment_id``.

    A stale ``last_comment_id`` (deleted or unknown comment) yields the first
    batch.
    """
    try:
        return await load_more_use_case.execute(
            LoadMoreCommentsRequest(
                post_id=post_id,
                limit=limit,
                last_comment_id=last_comment_id,
                sort_by=sort_by,
                sort_order=sort_order,
                actor_id=jwt_service.get_user_id_from_token(auth_token),
            )
        )
    except DomainError as e:
        raise http_error(e)


@router.get("/{post_id}/comments/stats", response_model=GetCommentStatsResponse)
async def get_comment_stats(
    post_id: int,
    get_comment_stats_use_case: FromDishka[GetCommentStatsUseCase],
) -> GetCommentStatsResponse:
    """Get comment counts for a post."""
    try:
        return await get_comment_stats_use_case.execute(
            GetCommentStatsRequest(post_id=post_id)
        )
    except DomainError as e:
        raise http_error(e)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=2000)
    parent_id: int | None = None  # Parent comment ID for replies


@router.post(
    "/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: int,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Create a comment on a post or reply to another comment.

    Requires authentication.

    Args:
        post_id: Post ID
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment details

    Raises:
        HTTPException: If not authenticated, the post is missing or the
            parent comment is invalid
    """
    user_id = require_user(jwt_service, auth_token, "create comments")

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=post_id,
                author_id=user_id,
                content=request.content,
                parent_id=request.parent_id,
            )
        )
    except DomainError as e:
        raise http_error(e)
