"""PostgreSQL repository implementations."""

from blog.persistence.repository.comment import PostgresCommentRepository
from blog.persistence.repository.post import PostgresPostRepository
from blog.persistence.repository.reaction import PostgresReactionRepository
from blog.persistence.repository.report import PostgresReportRepository
from blog.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresReactionRepository",
    "PostgresReportRepository",
]
