"""Moderation routes.

Role checks belong to the auth service in front of this API; these routes
only require an authenticated user.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from blog.application.usecase.moderation import (
    GetModerationQueueRequest,
    GetModerationQueueResponse,
    GetModerationQueueUseCase,
    ReviewReportRequest,
    ReviewReportResponse,
    ReviewReportUseCase,
)
from blog.domain.error import DomainError
from blog.domain.service import JWTService
from blog.domain.value import ReportStatus
from blog.interface.api.errors import http_error, require_user

router = APIRouter(prefix="/moderation", tags=["moderation"], route_class=DishkaRoute)


@router.get("/comments", response_model=GetModerationQueueResponse)
async def get_moderation_queue(
    get_moderation_queue_use_case: FromDishka[GetModerationQueueUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = 1,
    per_page: int | None = None,
    auth_token: str | None = Cookie(default=None),
) -> GetModerationQueueResponse:
    """List comments with pending reports, newest first.

    Any authenticated user may read the queue; see ``review_report``.
    """
    require_user(jwt_service, auth_token, "moderate comments")

    try:
        return await get_moderation_queue_use_case.execute(
            GetModerationQueueRequest(page=page, per_page=per_page)
        )
    except DomainError as e:
        raise http_error(e)


class ReviewReportAPIRequest(BaseModel):
    """API request for reviewing a report."""

    status: ReportStatus


@router.patch(
    "/comments/{comment_id}/reports/{user_id}", response_model=ReviewReportResponse
)
async def review_report(
    comment_id: int,
    user_id: int,
    request: ReviewReportAPIRequest,
    review_report_use_case: FromDishka[ReviewReportUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReviewReportResponse:
    """Record a moderation decision on one user's report of a comment.

    Only authentication is checked here. Moderator roles are granted and
    enforced by the external auth service, not by this API.
    """
    require_user(jwt_service, auth_token, "moderate comments")

    try:
        return await review_report_use_case.execute(
            ReviewReportRequest(
                comment_id=comment_id, reporter_id=user_id, status=request.status
            )
        )
    except DomainError as e:
        raise http_error(e)
