"""Shared in-memory state for the in-memory repositories.

Comment listings need live counts drawn from several tables, so the
in-memory repositories share one store instead of keeping private lists.
"""

import itertools
from typing import Callable, Iterable, Optional

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
    CommentCursor,
    CommentId,
    CommentSort,
    CommentSortField,
    PostId,
    ReactionType,
    UserId,
)

SortValue = Callable[[Comment], object]


class InMemoryStore:
    """Tables of the comment service held in dictionaries."""

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.posts: dict[PostId, Post] = {}
        self.comments: dict[CommentId, Comment] = {}
        self.reactions: dict[tuple[CommentId, UserId], Reaction] = {}
        self.reports: dict[tuple[CommentId, UserId], Report] = {}
        self._comment_ids = itertools.count(1)

    def next_comment_id(self) -> CommentId:
        return CommentId(next(self._comment_ids))

    # Live counts

    def count_reactions(self, comment_id: CommentId, reaction_type: ReactionType) -> int:
        return sum(
            1
            for reaction in self.reactions.values()
            if reaction.comment_id == comment_id and reaction.type is reaction_type
        )

    def count_replies(self, comment_id: CommentId) -> int:
        return sum(
            1
            for comment in self.comments.values()
            if comment.parent_id == comment_id and not comment.is_deleted
        )

    def count_reports(self, comment_id: CommentId) -> int:
        return sum(1 for report in self.reports.values() if report.comment_id == comment_id)

    def sort_value(self, sort_by: CommentSortField) -> SortValue:
        """Python counterpart of the SQL sort expressions."""
        if sort_by is CommentSortField.LIKES_COUNT:
            return lambda c: self.count_reactions(c.id, ReactionType.LIKE)
        if sort_by is CommentSortField.REPLIES_COUNT:
            return lambda c: self.count_replies(c.id)
        return lambda c: c.created_at

    # Listings

    def live_comments(self) -> Iterable[Comment]:
        return (c for c in self.comments.values() if not c.is_deleted)

    def ordered(
        self,
        comments: Iterable[Comment],
        sort: CommentSort,
        after: Optional[CommentCursor] = None,
    ) -> list[Comment]:
        """Order comments by ``(value, id)`` and drop those up to the cursor."""
        value = self.sort_value(sort.sort_by)
        keyed = [((value(c), c.id), c) for c in comments]

        if after is not None:
            threshold = (after.sort_value, after.comment_id)
            if sort.descending:
                keyed = [(k, c) for k, c in keyed if k < threshold]
            else:
                keyed = [(k, c) for k, c in keyed if k > threshold]

        keyed.sort(key=lambda item: item[0], reverse=sort.descending)
        return [c for _, c in keyed]

    def view(self, comment: Comment) -> CommentView:
        author = self.users.get(comment.author_id)
        return CommentView(
            comment=comment,
            author_name=author.name if author else None,
            counters=CommentCounters(
                likes_count=self.count_reactions(comment.id, ReactionType.LIKE),
                dislikes_count=self.count_reactions(comment.id, ReactionType.DISLIKE),
                reports_count=self.count_reports(comment.id),
                replies_count=self.count_replies(comment.id),
            ),
        )

    # Cascades

    def delete_comment(self, comment_id: CommentId) -> None:
        """Remove a comment with its interactions and its replies."""
        for reply_id in [
            c.id for c in self.comments.values() if c.parent_id == comment_id
        ]:
            self.delete_comment(reply_id)

        self.comments.pop(comment_id, None)
        for key in [k for k in self.reactions if k[0] == comment_id]:
            del self.reactions[key]
        for key in [k for k in self.reports if k[0] == comment_id]:
            del self.reports[key]
