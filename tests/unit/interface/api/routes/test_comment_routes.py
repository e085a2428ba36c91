"""Unit tests for the comment route handlers."""

import pytest
from fastapi import HTTPException

from blog.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentUseCase,
    SearchCommentsUseCase,
    UpdateCommentUseCase,
)
from blog.application.usecase.moderation import ReviewReportUseCase
from blog.application.usecase.reaction import ToggleReactionUseCase
from blog.application.usecase.report import ReportCommentUseCase
from blog.domain.service import JWTService
from blog.domain.value import ReportReason, ReportStatus, UserId
from blog.interface.api.routes import comments, moderation, post_comments
from tests.conftest import seed_comment, seed_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def token_for(env, user_id: int) -> str:
    jwt_service = await env.get(JWTService)
    return jwt_service.create_token(UserId(user_id), f"user-{user_id}")


class TestCreateCommentRoute:
    """Tests for POST /posts/{post_id}/comments."""

    @pytest.mark.asyncio
    async def test_requires_authentication(self, unit_env):
        """Anonymous callers get 401."""
        # Arrange
        await seed_post(unit_env)

        # Act & Assert
        with pytest.raises(HTTPException) as exc_info:
            await post_comments.create_comment(
                post_id=1,
                request=post_comments.CreateCommentAPIRequest(content="Hi"),
                create_comment_use_case=await unit_env.get(CreateCommentUseCase),
                jwt_service=await unit_env.get(JWTService),
                auth_token=None,
            )

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_creates_comment_for_token_user(self, unit_env):
        """The author is taken from the auth token."""
        # Arrange
        await seed_post(unit_env)
        token = await token_for(unit_env, 1)

        # Act
        response = await post_comments.create_comment(
            post_id=1,
            request=post_comments.CreateCommentAPIRequest(content="Hi"),
            create_comment_use_case=await unit_env.get(CreateCommentUseCase),
            jwt_service=await unit_env.get(JWTService),
            auth_token=token,
        )

        # Assert
        assert response.comment.author.id == 1
        assert response.comment.content == "Hi"

    @pytest.mark.asyncio
    async def test_missing_post_maps_to_404(self, unit_env):
        """A missing post is reported as 404."""
        # Arrange
        token = await token_for(unit_env, 1)

        # Act & Assert
        with pytest.raises(HTTPException) as exc_info:
            await post_comments.create_comment(
                post_id=5,
                request=post_comments.CreateCommentAPIRequest(content="Hi"),
                create_comment_use_case=await unit_env.get(CreateCommentUseCase),
                jwt_service=await unit_env.get(JWTService),
                auth_token=token,
            )

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_invalid_parent_maps_to_400(self, unit_env):
        """A reply to a missing parent is reported as 400."""
        # Arrange
        await seed_post(unit_env)
        token = await token_for(unit_env, 1)

        # Act & Assert
        with pytest.raises(HTTPException) as exc_info:
            await post_comments.create_comment(
                post_id=1,
                request=post_comments.CreateCommentAPIRequest(
                    content="Hi", parent_id=40
                ),
                create_comment_use_case=await unit_env.get(CreateCommentUseCase),
                jwt_service=await unit_env.get(JWTService),
                auth_token=token,
            )

        assert exc_info.value.status_code == 400


class TestCommentRoutes:
    """Tests for the /comments routes."""

    @pytest.mark.asyncio
    async def test_get_missing_comment_is_404(self, unit_env):
        """Reading an unknown comment returns 404."""
        # Act & Assert
        with pytest.raises(HTTPException) as exc_info:
            await comments.get_comment(
                comment_id=3,
                get_comment_use_case=await unit_env.get(GetCommentUseCase),
                jwt_service=await unit_env.get(JWTService),
                auth_token=None,
            )

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_edit_by_other_user_is_403(self, unit_env):
        """Editing someone else's comment returns 403."""
        # Arrange
        await seed_post(unit_env)
        comment = await seed_comment(unit_env, author_id=1)
        token = await token_for(unit_env, 2)

        # Act & Assert
        with pytest.raises(HTTPException) as exc_info:
            await comments.update_comment(
                comment_id=comment.id,
                request=comments.UpdateCommentAPIRequest(content="Mine now"),
                update_comment_use_case=await unit_env.get(UpdateCommentUseCase),
                jwt_service=await unit_env.get(JWTService),
                auth_token=token,
            )

        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_short_search_is_422(self, unit_env):
        """A two-character search query returns 422."""
        # Act & Assert
        with pytest.raises(HTTPException) as exc_info:
            await comments.search_comments(
                q="ab",
                search_comments_use_case=await unit_env.get(SearchCommentsUseCase),
                jwt_service=await unit_env.get(JWTService),
                auth_token=None,
            )

        assert exc_info.value.status_code == 422

    @pytest.mark.asyncio
    async def test_like_and_dislike_routes_toggle(self, unit_env):
        """The like and dislike routes share one toggle state."""
        # Arrange
        await seed_post(unit_env)
        comment = await seed_comment(unit_env)
        token = await token_for(unit_env, 3)
        use_case = await unit_env.get(ToggleReactionUseCase)
        jwt_service = await unit_env.get(JWTService)

        # Act
        liked = await comments.like_comment(
            comment_id=comment.id,
            toggle_reaction_use_case=use_case,
            jwt_service=jwt_service,
            auth_token=token,
        )
        disliked = await comments.dislike_comment(
            comment_id=comment.id,
            toggle_reaction_use_case=use_case,
            jwt_service=jwt_service,
            auth_token=token,
        )

        # Assert
        assert liked.user_liked is True
        assert disliked.user_liked is False
        assert disliked.user_disliked is True
        assert (disliked.likes_count, disliked.dislikes_count) == (0, 1)

    @pytest.mark.asyncio
    async def test_like_requires_authentication(self, unit_env):
        """Anonymous likes get 401."""
        # Act & Assert
        with pytest.raises(HTTPException) as exc_info:
            await comments.like_comment(
                comment_id=1,
                toggle_reaction_use_case=await unit_env.get(ToggleReactionUseCase),
                jwt_service=await unit_env.get(JWTService),
                auth_token="not-a-jwt",
            )

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_duplicate_report_is_not_an_error(self, unit_env):
        """Reporting twice answers reported=False instead of failing."""
        # Arrange
        await seed_post(unit_env)
        comment = await seed_comment(unit_env)
        token = await token_for(unit_env, 3)
        use_case = await unit_env.get(ReportCommentUseCase)
        jwt_service = await unit_env.get(JWTService)
        request = comments.ReportCommentAPIRequest(reason=ReportReason.SPAM)

        # Act
        first = await comments.report_comment(
            comment_id=comment.id,
            request=request,
            report_comment_use_case=use_case,
            jwt_service=jwt_service,
            auth_token=token,
        )
        second = await comments.report_comment(
            comment_id=comment.id,
            request=request,
            report_comment_use_case=use_case,
            jwt_service=jwt_service,
            auth_token=token,
        )

        # Assert
        assert first.reported is True
        assert second.reported is False


class TestModerationRoutes:
    """Tests for the /moderation routes."""

    @pytest.mark.asyncio
    async def test_review_to_pending_is_422(self, unit_env):
        """Moving a report back to pending returns 422."""
        # Arrange
        token = await token_for(unit_env, 9)

        # Act & Assert
        with pytest.raises(HTTPException) as exc_info:
            await moderation.review_report(
                comment_id=1,
                user_id=2,
                request=moderation.ReviewReportAPIRequest(
                    status=ReportStatus.PENDING
                ),
                review_report_use_case=await unit_env.get(ReviewReportUseCase),
                jwt_service=await unit_env.get(JWTService),
                auth_token=token,
            )

        assert exc_info.value.status_code == 422

    @pytest.mark.asyncio
    async def test_any_signed_in_user_can_review(self, unit_env):
        """Review only needs a valid token; roles live in the auth service."""
        # Arrange
        await seed_post(unit_env)
        comment = await seed_comment(unit_env)
        reporter_token = await token_for(unit_env, 3)
        reviewer_token = await token_for(unit_env, 8)
        jwt_service = await unit_env.get(JWTService)
        await comments.report_comment(
            comment_id=comment.id,
            request=comments.ReportCommentAPIRequest(reason=ReportReason.SPAM),
            report_comment_use_case=await unit_env.get(ReportCommentUseCase),
            jwt_service=jwt_service,
            auth_token=reporter_token,
        )
        use_case = await unit_env.get(ReviewReportUseCase)
        request = moderation.ReviewReportAPIRequest(status=ReportStatus.DISMISSED)

        # Act
        response = await moderation.review_report(
            comment_id=comment.id,
            user_id=3,
            request=request,
            review_report_use_case=use_case,
            jwt_service=jwt_service,
            auth_token=reviewer_token,
        )
        with pytest.raises(HTTPException) as exc_info:
            await moderation.review_report(
                comment_id=comment.id,
                user_id=3,
                request=request,
                review_report_use_case=use_case,
                jwt_service=jwt_service,
                auth_token=None,
            )

        # Assert
        assert response.status == ReportStatus.DISMISSED
        assert exc_info.value.status_code == 401
