"""Unit tests for CommentService lifecycle operations."""

from datetime import timedelta

import pytest

from blog.domain.error import (
    EditWindowExpiredError,
    InvalidParentCommentError,
    NotAuthorizedError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from blog.domain.model.common import utcnow
from blog.domain.repository import CommentRepository, ReactionRepository
from blog.domain.service import CommentService, ReactionService, ReportService
from blog.domain.value import CommentId, PostId, ReactionType, ReportReason, UserId
from tests.conftest import seed_comment, seed_likes, seed_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()

POST = PostId(1)
AUTHOR = UserId(1)
STRANGER = UserId(2)


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """A comment without parent is stored as top-level."""
        # Arrange
        service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await seed_post(unit_env)

        # Act
        view = await service.create_comment(POST, AUTHOR, "  First!  ")

        # Assert
        assert view.comment.content == "First!"
        assert view.comment.is_top_level
        assert view.author_name == "user-1"
        assert view.counters.likes_count == 0

        saved = await comment_repo.find_by_id(view.id)
        assert saved is not None
        assert saved.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env):
        """A reply references its parent and bumps the parent's reply count."""
        # Arrange
        service = await unit_env.get(CommentService)
        await seed_post(unit_env)
        parent = await seed_comment(unit_env)

        # Act
        reply = await service.create_comment(POST, STRANGER, "Reply", parent.id)

        # Assert
        assert reply.comment.parent_id == parent.id
        parent_view = await service.get_comment(parent.id)
        assert parent_view.counters.replies_count == 1

    @pytest.mark.asyncio
    async def test_create_on_missing_post_raises_not_found(self, unit_env):
        """Commenting on an unknown post raises NotFoundError."""
        # Arrange
        service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Post not found"):
            await service.create_comment(PostId(9), AUTHOR, "Hello")

    @pytest.mark.asyncio
    async def test_create_with_missing_parent_raises_error(self, unit_env):
        """Replying to an unknown comment raises InvalidParentCommentError."""
        # Arrange
        service = await unit_env.get(CommentService)
        await seed_post(unit_env)

        # Act & Assert
        with pytest.raises(InvalidParentCommentError, match="not found"):
            await service.create_comment(POST, AUTHOR, "Hello", CommentId(99))

    @pytest.mark.asyncio
    async def test_create_with_deleted_parent_raises_error(self, unit_env):
        """Replying to a soft-deleted comment is rejected."""
        # Arrange
        service = await unit_env.get(CommentService)
        await seed_post(unit_env)
        parent = await seed_comment(unit_env)
        await service.delete_comment(parent.id, AUTHOR)

        # Act & Assert
        with pytest.raises(InvalidParentCommentError):
            await service.create_comment(POST, AUTHOR, "Hello", parent.id)

    @pytest.mark.asyncio
    async def test_create_with_parent_on_other_post_raises_error(self, unit_env):
        """A reply must live on its parent's post."""
        # Arrange
        service = await unit_env.get(CommentService)
        await seed_post(unit_env, post_id=1)
        await seed_post(unit_env, post_id=2)
        parent = await seed_comment(unit_env, post_id=2)

        # Act & Assert
        with pytest.raises(InvalidParentCommentError, match="another post"):
            await service.create_comment(POST, AUTHOR, "Hello", parent.id)

    @pytest.mark.asyncio
    async def test_create_blank_content_raises_validation_error(self, unit_env):
        """Whitespace-only content is rejected."""
        # Arrange
        service = await unit_env.get(CommentService)
        await seed_post(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError):
            await service.create_comment(POST, AUTHOR, "   ")


class TestUpdateComment:
    """Tests for update_comment and the edit window."""

    @pytest.mark.asyncio
    async def test_edit_within_window_succeeds(self, unit_env):
        """The author can edit 14 minutes after posting."""
        # Arrange
        service = await unit_env.get(CommentService)
        await seed_post(unit_env)
        comment = await seed_comment(
            unit_env, created_at=utcnow() - timedelta(minutes=14)
        )

        # Act
        view = await service.update_comment(comment.id, AUTHOR, "Edited")

        # Assert
        assert view.comment.content == "Edited"
        assert view.comment.is_edited is True
        assert view.comment.edited_at is not None

    @pytest.mark.asyncio
    async def test_edit_after_window_raises_error(self, unit_env):
        """Editing 16 minutes after posting is refused."""
        # Arrange
        service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await seed_post(unit_env)
        comment = await seed_comment(
            unit_env, created_at=utcnow() - timedelta(minutes=16)
        )

        # Act & Assert
        with pytest.raises(EditWindowExpiredError) as exc_info:
            await service.update_comment(comment.id, AUTHOR, "Too late")

        assert isinstance(exc_info.value, PermissionDeniedError)
        assert exc_info.value.window_minutes == 15
        saved = await comment_repo.find_by_id(comment.id)
        assert saved.content == "A comment"
        assert saved.is_edited is False

    @pytest.mark.asyncio
    async def test_edit_by_other_user_raises_not_authorized(self, unit_env):
        """Only the author may edit, even within the window."""
        # Arrange
        service = await unit_env.get(CommentService)
        await seed_post(unit_env)
        comment = await seed_comment(unit_env)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.update_comment(comment.id, STRANGER, "Hijacked")

    @pytest.mark.asyncio
    async def test_edit_with_same_content_is_not_marked_edited(self, unit_env):
        """Submitting unchanged content leaves the comment untouched."""
        # Arrange
        service = await unit_env.get(CommentService)
        await seed_post(unit_env)
        comment = await seed_comment(unit_env, content="Same")

        # Act
        view = await service.update_comment(comment.id, AUTHOR, "Same")

        # Assert
        assert view.comment.is_edited is False
        assert view.comment.edited_at is None

    @pytest.mark.asyncio
    async def test_edit_deleted_comment_raises_not_found(self, unit_env):
        """Soft-deleted comments cannot be edited."""
        # Arrange
        service = await unit_env.get(CommentService)
        await seed_post(unit_env)
        comment = await seed_comment(unit_env)
        await service.delete_comment(comment.id, AUTHOR)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.update_comment(comment.id, AUTHOR, "Edited")


class TestDeleteAndRestore:
    """Tests for soft delete, restore and hard delete."""

    @pytest.mark.asyncio
    async def test_soft_delete_hides_comment(self, unit_env):
        """A soft-deleted comment is no longer readable."""
        # Arrange
        service = await unit_env.get(CommentService)
        await seed_post(unit_env)
        comment = await seed_comment(unit_env)

        # Act
        await service.delete_comment(comment.id, AUTHOR)

        # Assert
        with pytest.raises(NotFoundError):
            await service.get_comment(comment.id)

    @pytest.mark.asyncio
    async def test_delete_by_other_user_raises_not_authorized(self, unit_env):
        """Only the author may delete a comment."""
        # Arrange
        service = await unit_env.get(CommentService)
        await seed_post(unit_env)
        comment = await seed_comment(unit_env)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.delete_comment(comment.id, STRANGER)

    @pytest.mark.asyncio
    async def test_restore_brings_comment_back(self, unit_env):
        """Restoring clears the soft-delete marker."""
        # Arrange
        service = await unit_env.get(CommentService)
        await seed_post(unit_env)
        comment = await seed_comment(unit_env)
        await service.delete_comment(comment.id, AUTHOR)

        # Act
        view = await service.restore_comment(comment.id, AUTHOR)

        # Assert
        assert view.comment.deleted_at is None
        page = await service.get_comments_by_cursor(POST)
        assert [v.id for v in page.items] == [comment.id]

    @pytest.mark.asyncio
    async def test_restore_live_comment_is_noop(self, unit_env):
        """Restoring a comment that is not deleted succeeds unchanged."""
        # Arrange
        service = await unit_env.get(CommentService)
        await seed_post(unit_env)
        comment = await seed_comment(unit_env)

        # Act
        view = await service.restore_comment(comment.id, AUTHOR)

        # Assert
        assert view.comment == comment

    @pytest.mark.asyncio
    async def test_restore_by_other_user_raises_not_authorized(self, unit_env):
        """Only the author may restore a comment."""
        # Arrange
        service = await unit_env.get(CommentService)
        await seed_post(unit_env)
        comment = await seed_comment(unit_env)
        await service.delete_comment(comment.id, AUTHOR)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.restore_comment(comment.id, STRANGER)

    @pytest.mark.asyncio
    async def test_restore_missing_comment_raises_not_found(self, unit_env):
        """Restoring an unknown comment raises NotFoundError."""
        # Arrange
        service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.restore_comment(CommentId(5), AUTHOR)

    @pytest.mark.asyncio
    async def test_force_delete_cascades(self, unit_env):
        """Hard delete removes the comment, its replies and its reactions."""
        # Arrange
        service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        reaction_repo = await unit_env.get(ReactionRepository)
        await seed_post(unit_env)
        comment = await seed_comment(unit_env)
        reply = await seed_comment(unit_env, parent_id=comment.id)
        await seed_likes(unit_env, comment.id, 3)

        # Act
        await service.force_delete_comment(comment.id, AUTHOR)

        # Assert
        assert await comment_repo.find_by_id(comment.id, include_deleted=True) is None
        assert await comment_repo.find_by_id(reply.id, include_deleted=True) is None
        assert await reaction_repo.count(comment.id, ReactionType.LIKE) == 0

    @pytest.mark.asyncio
    async def test_force_delete_soft_deleted_comment(self, unit_env):
        """A soft-deleted comment can still be removed for good."""
        # Arrange
        service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await seed_post(unit_env)
        comment = await seed_comment(unit_env)
        await service.delete_comment(comment.id, AUTHOR)

        # Act
        await service.force_delete_comment(comment.id, AUTHOR)

        # Assert
        assert await comment_repo.find_by_id(comment.id, include_deleted=True) is None

    @pytest.mark.asyncio
    async def test_force_delete_by_other_user_raises_not_authorized(self, unit_env):
        """Only the author may hard-delete a comment."""
        # Arrange
        service = await unit_env.get(CommentService)
        await seed_post(unit_env)
        comment = await seed_comment(unit_env)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.force_delete_comment(comment.id, STRANGER)


class TestReaderViews:
    """Tests for reader flags, replies, search and per-user listings."""

    @pytest.mark.asyncio
    async def test_actor_flags_reflect_own_interactions(self, unit_env):
        """Readers see their own likes and reports; anonymous readers see none."""
        # Arrange
        service = await unit_env.get(CommentService)
        reaction_service = await unit_env.get(ReactionService)
        report_service = await unit_env.get(ReportService)
        await seed_post(unit_env)
        liked = await seed_comment(unit_env)
        reported = await seed_comment(unit_env)
        await reaction_service.toggle_like(liked.id, STRANGER)
        await report_service.report_comment(reported.id, STRANGER, ReportReason.SPAM)

        # Act
        as_stranger = await service.get_comments_by_cursor(POST, actor_id=STRANGER)
        anonymous = await service.get_comments_by_cursor(POST)

        # Assert
        flags = {
            v.id: (v.user_liked, v.user_disliked, v.user_reported)
            for v in as_stranger.items
        }
        assert flags == {
            liked.id: (True, False, False),
            reported.id: (False, False, True),
        }
        assert not any(v.user_liked or v.user_reported for v in anonymous.items)

    @pytest.mark.asyncio
    async def test_get_replies_oldest_first(self, unit_env):
        """Replies are returned in posting order without deleted ones."""
        # Arrange
        service = await unit_env.get(CommentService)
        await seed_post(unit_env)
        parent = await seed_comment(unit_env)
        first = await seed_comment(unit_env, parent_id=parent.id)
        gone = await seed_comment(unit_env, parent_id=parent.id)
        last = await seed_comment(unit_env, parent_id=parent.id)
        await service.delete_comment(gone.id, AUTHOR)

        # Act
        replies = await service.get_replies(parent.id)

        # Assert
        assert [v.id for v in replies] == [first.id, last.id]

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive(self, unit_env):
        """Search matches substrings regardless of case, newest first."""
        # Arrange
        service = await unit_env.get(CommentService)
        await seed_post(unit_env)
        older = await seed_comment(unit_env, content="Python rocks")
        await seed_comment(unit_env, content="Something else")
        newer = await seed_comment(unit_env, content="I like PYTHON too")

        # Act
        page = await service.search_comments("python")

        # Assert
        assert [v.id for v in page.items] == [newer.id, older.id]
        assert page.has_more is False

    @pytest.mark.asyncio
    async def test_search_continues_from_cursor(self, unit_env):
        """Search batches continue newest first from the last seen match."""
        # Arrange
        service = await unit_env.get(CommentService)
        await seed_post(unit_env)
        matches = [
            await seed_comment(unit_env, content=f"python {n}") for n in range(3)
        ]

        # Act
        first = await service.search_comments("python", limit=2)
        second = await service.search_comments(
            "python", limit=2, last_comment_id=first.next_cursor
        )

        # Assert
        assert [v.id for v in first.items] == [matches[2].id, matches[1].id]
        assert first.has_more is True
        assert [v.id for v in second.items] == [matches[0].id]
        assert second.has_more is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", ["ab", "  ab  ", "x" * 101])
    async def test_search_term_length_is_validated(self, unit_env, query):
        """Search terms must be 3-100 characters after trimming."""
        # Arrange
        service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(ValidationError):
            await service.search_comments(query)

    @pytest.mark.asyncio
    async def test_user_comments_span_posts(self, unit_env):
        """An author's listing includes comments and replies on every post."""
        # Arrange
        service = await unit_env.get(CommentService)
        await seed_post(unit_env, post_id=1)
        await seed_post(unit_env, post_id=2)
        top = await seed_comment(unit_env, post_id=1)
        reply = await seed_comment(unit_env, post_id=1, parent_id=top.id)
        other_post = await seed_comment(unit_env, post_id=2)
        await seed_comment(unit_env, post_id=2, author_id=STRANGER)

        # Act
        page = await service.get_user_comments_by_cursor(AUTHOR, limit=2)
        rest = await service.get_user_comments_by_cursor(
            AUTHOR, limit=2, last_comment_id=page.next_cursor
        )

        # Assert
        assert [v.id for v in page.items] == [other_post.id, reply.id]
        assert [v.id for v in rest.items] == [top.id]
        assert rest.has_more is False
