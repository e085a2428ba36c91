"""Unit tests for CreateCommentUseCase."""

import pytest

from blog.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from blog.domain.error import InvalidParentCommentError, NotFoundError
from blog.domain.repository import CommentRepository
from tests.conftest import seed_comment, seed_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """Creating a comment returns the stored item with zero counters."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        await seed_post(unit_env)

        # Act
        response = await use_case.execute(
            CreateCommentRequest(post_id=1, author_id=1, content="Nice post")
        )

        # Assert
        item = response.comment
        assert item.content == "Nice post"
        assert item.parent_id is None
        assert item.author.id == 1
        assert item.is_edited is False
        assert (item.likes_count, item.dislikes_count, item.replies_count) == (0, 0, 0)
        assert await comment_repo.find_by_id(item.id) is not None

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env):
        """A reply is created under its parent."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        await seed_post(unit_env)
        parent = await seed_comment(unit_env)

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                post_id=1, author_id=2, content="Agreed", parent_id=parent.id
            )
        )

        # Assert
        assert response.comment.parent_id == parent.id

    @pytest.mark.asyncio
    async def test_create_on_missing_post_raises_not_found(self, unit_env):
        """Creating a comment on an unknown post fails."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(post_id=3, author_id=1, content="Hello")
            )

    @pytest.mark.asyncio
    async def test_create_with_invalid_parent_raises_error(self, unit_env):
        """A reply to a comment that does not exist fails."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        await seed_post(unit_env)

        # Act & Assert
        with pytest.raises(InvalidParentCommentError):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=1, author_id=1, content="Hello", parent_id=77
                )
            )
