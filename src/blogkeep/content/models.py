"""Content domain models -- pure Pydantic v2 data types.

A Post owns an ordered list of Comments. Timestamps are kept as the
exact strings that were written to disk so that a load/save cycle never
rewrites them.  Every field is required when validating stored data;
use ``create`` to build a fresh record stamped with the current time.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, StrictInt, StrictStr

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def timestamp_now() -> str:
    """Return the current local time as ``YYYY-MM-DD HH:MM:SS``."""
    return datetime.now().strftime(TIMESTAMP_FORMAT)


class Comment(BaseModel):
    """A reply attached to exactly one post.

    The id is only unique within the parent post.
    """

    id: StrictInt
    author: StrictStr
    content: StrictStr
    created_at: StrictStr

    @classmethod
    def create(cls, comment_id: int, author: str, content: str) -> Comment:
        return cls(id=comment_id, author=author, content=content, created_at=timestamp_now())


class Post(BaseModel):
    """A top-level blog entry."""

    id: StrictInt
    title: StrictStr
    content: StrictStr
    author: StrictStr
    created_at: StrictStr
    comments: list[Comment]

    @classmethod
    def create(cls, post_id: int, title: str, content: str, author: str) -> Post:
        return cls(
            id=post_id,
            title=title,
            content=content,
            author=author,
            created_at=timestamp_now(),
            comments=[],
        )

    def add_comment(self, comment: Comment) -> None:
        """Append a comment, keeping insertion order."""
        self.comments.append(comment)

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match against title or content."""
        needle = query.lower()
        return needle in self.title.lower() or needle in self.content.lower()
