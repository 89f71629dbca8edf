"""Content domain -- post and comment models plus the JSON store.

Everything the blog holds lives in a single backing file that is read
once at startup and rewritten after every mutation.
"""

from blogkeep.content.models import TIMESTAMP_FORMAT, Comment, Post, timestamp_now
from blogkeep.content.store import STORE_FILENAME, PostStore

__all__ = [
    "Comment",
    "Post",
    "PostStore",
    "STORE_FILENAME",
    "TIMESTAMP_FORMAT",
    "timestamp_now",
]
