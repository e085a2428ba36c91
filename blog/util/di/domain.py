"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.config import AuthSettings, CommentSettings
from blog.domain.repository import (
    CommentRepository,
    PostRepository,
    ReactionRepository,
    ReportRepository,
)
from blog.domain.service import (
    CommentService,
    JWTService,
    ReactionService,
    ReportService,
)
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        reaction_repository: ReactionRepository,
        report_repository: ReportRepository,
        settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_repository=post_repository,
            reaction_repository=reaction_repository,
            report_repository=report_repository,
            settings=settings,
        )

    @provide
    def get_reaction_service(
        self,
        reaction_repository: ReactionRepository,
        comment_service: CommentService,
    ) -> ReactionService:
        """Provide reaction domain service."""
        return ReactionService(
            reaction_repository=reaction_repository,
            comment_service=comment_service,
        )

    @provide
    def get_report_service(
        self,
        report_repository: ReportRepository,
        comment_service: CommentService,
    ) -> ReportService:
        """Provide report domain service."""
        return ReportService(
            report_repository=report_repository,
            comment_service=comment_service,
        )
