"""Report use cases."""

from .report_comment import (
    ReportCommentRequest,
    ReportCommentResponse,
    ReportCommentUseCase,
)

__all__ = [
    "ReportCommentRequest",
    "ReportCommentResponse",
    "ReportCommentUseCase",
]
