"""Test configuration and seeding helpers."""

from datetime import datetime

from dishka import AsyncContainer

from blog.domain.model import Comment, Post, Reaction, User
from blog.domain.model.common import utcnow
from blog.domain.repository import (
    CommentRepository,
    PostRepository,
    ReactionRepository,
    UserRepository,
)
from blog.domain.value import CommentId, PostId, ReactionType, UserId


async def seed_post(
    env: AsyncContainer, post_id: int = 1, author_id: int = 1
) -> Post:
    """Store a post together with its author."""
    user_repo = await env.get(UserRepository)
    post_repo = await env.get(PostRepository)

    await user_repo.save(User(id=UserId(author_id), name=f"user-{author_id}"))
    return await post_repo.save(
        Post(id=PostId(post_id), author_id=UserId(author_id), title="A post")
    )


async def seed_comment(
    env: AsyncContainer,
    post_id: int = 1,
    author_id: int = 1,
    content: str = "A comment",
    parent_id: int | None = None,
    created_at: datetime | None = None,
) -> Comment:
    """Store a comment directly, bypassing service validation."""
    comment_repo = await env.get(CommentRepository)
    created_at = created_at or utcnow()

    return await comment_repo.save(
        Comment(
            id=await comment_repo.next_id(),
            post_id=PostId(post_id),
            author_id=UserId(author_id),
            content=content,
            parent_id=CommentId(parent_id) if parent_id is not None else None,
            created_at=created_at,
            updated_at=created_at,
        )
    )


async def seed_likes(env: AsyncContainer, comment_id: int, count: int) -> None:
    """Give a comment ``count`` likes from distinct users."""
    reaction_repo = await env.get(ReactionRepository)
    for user_id in range(1000, 1000 + count):
        await reaction_repo.save(
            Reaction(
                comment_id=CommentId(comment_id),
                user_id=UserId(user_id),
                type=ReactionType.LIKE,
            )
        )
