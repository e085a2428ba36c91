"""Unit tests for the comment mutation use cases."""

from datetime import timedelta

import pytest

from blog.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ForceDeleteCommentRequest,
    ForceDeleteCommentUseCase,
    GetUserCommentsRequest,
    GetUserCommentsUseCase,
    RestoreCommentRequest,
    RestoreCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from blog.domain.error import EditWindowExpiredError, NotAuthorizedError
from blog.domain.model.common import utcnow
from blog.domain.repository import CommentRepository
from tests.conftest import seed_comment, seed_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_update_comment_text_success(self, unit_env):
        """Updating comment text by the author within the window succeeds."""
        # Arrange
        use_case = await unit_env.get(UpdateCommentUseCase)
        await seed_post(unit_env)
        comment = await seed_comment(unit_env, content="Original")

        # Act
        response = await use_case.execute(
            UpdateCommentRequest(comment_id=comment.id, actor_id=1, content="Updated")
        )

        # Assert
        assert response.comment.content == "Updated"
        assert response.comment.is_edited is True

    @pytest.mark.asyncio
    async def test_update_comment_not_author_fails(self, unit_env):
        """Updating someone else's comment fails."""
        # Arrange
        use_case = await unit_env.get(UpdateCommentUseCase)
        await seed_post(unit_env)
        comment = await seed_comment(unit_env)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateCommentRequest(comment_id=comment.id, actor_id=9, content="No")
            )

    @pytest.mark.asyncio
    async def test_update_comment_after_window_fails(self, unit_env):
        """Updating a comment older than the edit window fails."""
        # Arrange
        use_case = await unit_env.get(UpdateCommentUseCase)
        await seed_post(unit_env)
        comment = await seed_comment(
            unit_env, created_at=utcnow() - timedelta(hours=1)
        )

        # Act & Assert
        with pytest.raises(EditWindowExpiredError):
            await use_case.execute(
                UpdateCommentRequest(comment_id=comment.id, actor_id=1, content="Late")
            )


class TestDeleteRestoreUseCases:
    """Tests for the delete, restore and force delete use cases."""

    @pytest.mark.asyncio
    async def test_delete_then_restore(self, unit_env):
        """A soft-deleted comment can be restored by its author."""
        # Arrange
        delete = await unit_env.get(DeleteCommentUseCase)
        restore = await unit_env.get(RestoreCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        await seed_post(unit_env)
        comment = await seed_comment(unit_env)

        # Act
        deleted = await delete.execute(
            DeleteCommentRequest(comment_id=comment.id, actor_id=1)
        )
        hidden = await comment_repo.find_by_id(comment.id)
        restored = await restore.execute(
            RestoreCommentRequest(comment_id=comment.id, actor_id=1)
        )

        # Assert
        assert deleted.success is True
        assert hidden is None
        assert restored.comment.id == comment.id
        assert await comment_repo.find_by_id(comment.id) is not None

    @pytest.mark.asyncio
    async def test_force_delete_removes_comment(self, unit_env):
        """Force delete removes the row entirely."""
        # Arrange
        use_case = await unit_env.get(ForceDeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        await seed_post(unit_env)
        comment = await seed_comment(unit_env)

        # Act
        response = await use_case.execute(
            ForceDeleteCommentRequest(comment_id=comment.id, actor_id=1)
        )

        # Assert
        assert response.success is True
        assert await comment_repo.find_by_id(comment.id, include_deleted=True) is None


class TestGetUserCommentsUseCase:
    """Tests for GetUserCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_own_comments_with_cursor(self, unit_env):
        """The author's comments are returned in batches."""
        # Arrange
        use_case = await unit_env.get(GetUserCommentsUseCase)
        await seed_post(unit_env)
        for _ in range(3):
            await seed_comment(unit_env)
        await seed_comment(unit_env, author_id=2)

        # Act
        first = await use_case.execute(GetUserCommentsRequest(user_id=1, limit=2))
        second = await use_case.execute(
            GetUserCommentsRequest(
                user_id=1, limit=2, last_comment_id=first.next_cursor
            )
        )

        # Assert
        assert [c.id for c in first.comments] == [3, 2]
        assert first.has_more is True
        assert [c.id for c in second.comments] == [1]
        assert second.has_more is False
