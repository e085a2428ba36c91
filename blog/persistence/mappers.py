"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from blog.domain.model import (
    Comment,
    CommentCounters,
    CommentView,
    Post,
    Reaction,
    Report,
    User,
)
from blog.domain.value import (
    CommentId,
    PostId,
    ReactionType,
    ReportReason,
    ReportStatus,
    UserId,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(row["id"]),
        name=row["name"],
        email=row.get("email"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(row["id"]),
        author_id=UserId(row["user_id"]),
        title=row["title"],
        content=row.get("content"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    The author is stored in the ``user_id`` column.
    """
    post_dict = post.model_dump()
    post_dict["user_id"] = post_dict.pop("author_id")
    return post_dict


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        post_id=PostId(row["post_id"]),
        author_id=UserId(row["user_id"]),
        content=row["content"],
        parent_id=CommentId(row["parent_id"]) if row.get("parent_id") else None,
        is_edited=row["is_edited"],
        edited_at=row.get("edited_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    comment_dict = comment.model_dump()
    comment_dict["user_id"] = comment_dict.pop("author_id")
    return comment_dict


def row_to_comment_view(row: Dict[str, Any]) -> CommentView:
    """Convert a comment row joined with its author and counts to a view.

    Args:
        row: Database row as dict, with ``author_name`` and the four
            ``*_count`` columns alongside the comment columns

    Returns:
        Comment view without reader flags
    """
    return CommentView(
        comment=row_to_comment(row),
        author_name=row.get("author_name"),
        counters=CommentCounters(
            likes_count=row["likes_count"],
            dislikes_count=row["dislikes_count"],
            reports_count=row["reports_count"],
            replies_count=row["replies_count"],
        ),
    )


def row_to_reaction(row: Dict[str, Any], reaction_type: ReactionType) -> Reaction:
    """Convert a comment_likes or comment_dislikes row to a Reaction."""
    return Reaction(
        comment_id=CommentId(row["comment_id"]),
        user_id=UserId(row["user_id"]),
        type=reaction_type,
        created_at=row["created_at"],
    )


def reaction_to_dict(reaction: Reaction) -> Dict[str, Any]:
    """Convert Reaction to database dict (the type selects the table)."""
    return reaction.model_dump(exclude={"type"})


def row_to_report(row: Dict[str, Any]) -> Report:
    """Convert database row to Report domain model."""
    return Report(
        comment_id=CommentId(row["comment_id"]),
        user_id=UserId(row["user_id"]),
        reason=ReportReason(row["reason"]),
        description=row.get("description"),
        status=ReportStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def report_to_dict(report: Report) -> Dict[str, Any]:
    """Convert Report domain model to database dict.

    Enums are dumped as their string values.
    """
    report_dict = report.model_dump()
    report_dict["reason"] = report.reason.value
    report_dict["status"] = report.status.value
    return report_dict
