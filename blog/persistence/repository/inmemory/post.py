"""In-memory post repository for testing."""

from typing import Optional

from blog.domain.model import Post
from blog.domain.repository import PostRepository
from blog.domain.value import PostId

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._store.posts.get(post_id)

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._store.posts[post.id] = post
        return post
