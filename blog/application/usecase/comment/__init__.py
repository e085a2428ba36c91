"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .force_delete_comment import (
    ForceDeleteCommentRequest,
    ForceDeleteCommentResponse,
    ForceDeleteCommentUseCase,
)
from .get_comment import GetCommentRequest, GetCommentResponse, GetCommentUseCase
from .get_comment_stats import (
    GetCommentStatsRequest,
    GetCommentStatsResponse,
    GetCommentStatsUseCase,
)
from .get_user_comments import (
    GetUserCommentsRequest,
    GetUserCommentsResponse,
    GetUserCommentsUseCase,
)
from .items import AuthorItem, CommentItem, PaginationItem
from .list_comments import (
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from .list_replies import ListRepliesRequest, ListRepliesResponse, ListRepliesUseCase
from .load_more_comments import (
    LoadMoreCommentsRequest,
    LoadMoreCommentsResponse,
    LoadMoreCommentsUseCase,
)
from .restore_comment import (
    RestoreCommentRequest,
    RestoreCommentResponse,
    RestoreCommentUseCase,
)
from .search_comments import (
    SearchCommentsRequest,
    SearchCommentsResponse,
    SearchCommentsUseCase,
)
from .update_comment import (
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)

__all__ = [
    "AuthorItem",
    "CommentItem",
    "PaginationItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "ForceDeleteCommentRequest",
    "ForceDeleteCommentResponse",
    "ForceDeleteCommentUseCase",
    "GetCommentRequest",
    "GetCommentResponse",
    "GetCommentUseCase",
    "GetCommentStatsRequest",
    "GetCommentStatsResponse",
    "GetCommentStatsUseCase",
    "GetUserCommentsRequest",
    "GetUserCommentsResponse",
    "GetUserCommentsUseCase",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
    "ListRepliesRequest",
    "ListRepliesResponse",
    "ListRepliesUseCase",
    "LoadMoreCommentsRequest",
    "LoadMoreCommentsResponse",
    "LoadMoreCommentsUseCase",
    "RestoreCommentRequest",
    "RestoreCommentResponse",
    "RestoreCommentUseCase",
    "SearchCommentsRequest",
    "SearchCommentsResponse",
    "SearchCommentsUseCase",
    "UpdateCommentRequest",
    "UpdateCommentResponse",
    "UpdateCommentUseCase",
]
