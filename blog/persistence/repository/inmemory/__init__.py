"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .post import InMemoryPostRepository
from .reaction import InMemoryReactionRepository
from .report import InMemoryReportRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryPostRepository",
    "InMemoryReactionRepository",
    "InMemoryReportRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]
