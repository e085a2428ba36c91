"""Moderation use cases."""

from .get_moderation_queue import (
    GetModerationQueueRequest,
    GetModerationQueueResponse,
    GetModerationQueueUseCase,
    ModerationItem,
    ReportItem,
)
from .review_report import ReviewReportRequest, ReviewReportResponse, ReviewReportUseCase

__all__ = [
    "GetModerationQueueRequest",
    "GetModerationQueueResponse",
    "GetModerationQueueUseCase",
    "ModerationItem",
    "ReportItem",
    "ReviewReportRequest",
    "ReviewReportResponse",
    "ReviewReportUseCase",
]
