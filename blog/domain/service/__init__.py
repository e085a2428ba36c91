"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .reaction_service import ReactionService
from .report_service import ReportService

__all__ = [
    "CommentService",
    "JWTService",
    "ReactionService",
    "ReportService",
    "Service",
]
