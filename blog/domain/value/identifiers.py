"""Strongly typed identifiers for blog domain entities.

All entities use integer surrogate keys. Comment ids are allocated from a
monotonically increasing sequence, which makes them usable as the final
tie-break of every comment ordering.
"""

from typing import NewType

UserId = NewType("UserId", int)
PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
