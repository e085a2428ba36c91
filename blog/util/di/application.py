"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ForceDeleteCommentUseCase,
    GetCommentStatsUseCase,
    GetCommentUseCase,
    GetUserCommentsUseCase,
    ListCommentsUseCase,
    ListRepliesUseCase,
    LoadMoreCommentsUseCase,
    RestoreCommentUseCase,
    SearchCommentsUseCase,
    UpdateCommentUseCase,
)
from blog.application.usecase.moderation import (
    GetModerationQueueUseCase,
    ReviewReportUseCase,
)
from blog.application.usecase.reaction import ToggleReactionUseCase
from blog.application.usecase.report import ReportCommentUseCase
from blog.domain.service import CommentService, ReactionService, ReportService
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment retrieval use cases
    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_load_more_comments_use_case(
        self, comment_service: CommentService
    ) -> LoadMoreCommentsUseCase:
        """Provide load more comments use case."""
        return LoadMoreCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comment_stats_use_case(
        self, comment_service: CommentService
    ) -> GetCommentStatsUseCase:
        """Provide get comment stats use case."""
        return GetCommentStatsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_service: CommentService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_replies_use_case(
        self, comment_service: CommentService
    ) -> ListRepliesUseCase:
        """Provide list replies use case."""
        return ListRepliesUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_search_comments_use_case(
        self, comment_service: CommentService
    ) -> SearchCommentsUseCase:
        """Provide search comments use case."""
        return SearchCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_comments_use_case(
        self, comment_service: CommentService
    ) -> GetUserCommentsUseCase:
        """Provide get user comments use case."""
        return GetUserCommentsUseCase(comment_service=comment_service)

    # Comment lifecycle use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_restore_comment_use_case(
        self, comment_service: CommentService
    ) -> RestoreCommentUseCase:
        """Provide restore comment use case."""
        return RestoreCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_force_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> ForceDeleteCommentUseCase:
        """Provide force delete comment use case."""
        return ForceDeleteCommentUseCase(comment_service=comment_service)

    # Interaction use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_reaction_use_case(
        self, reaction_service: ReactionService
    ) -> ToggleReactionUseCase:
        """Provide toggle reaction use case."""
        return ToggleReactionUseCase(reaction_service=reaction_service)

    @provide(scope=Scope.REQUEST)
    def get_report_comment_use_case(
        self, report_service: ReportService
    ) -> ReportCommentUseCase:
        """Provide report comment use case."""
        return ReportCommentUseCase(report_service=report_service)

    # Moderation use cases
    @provide(scope=Scope.REQUEST)
    def get_get_moderation_queue_use_case(
        self, report_service: ReportService
    ) -> GetModerationQueueUseCase:
        """Provide get moderation queue use case."""
        return GetModerationQueueUseCase(report_service=report_service)

    @provide(scope=Scope.REQUEST)
    def get_review_report_use_case(
        self, report_service: ReportService
    ) -> ReviewReportUseCase:
        """Provide review report use case."""
        return ReviewReportUseCase(report_service=report_service)
