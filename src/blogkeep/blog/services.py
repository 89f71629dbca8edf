"""Blog service -- the in-memory post collection and its operations.

The collection is loaded once from the store at construction.  Every
mutation (create, delete, comment) rewrites the whole store before
returning.

Post and comment ids are assigned as "current count + 1".  After a
deletion this can hand out an id that is already held by a surviving
post; lookups then return the first match in creation order.
"""

from __future__ import annotations

import logging
from pathlib import Path

from blogkeep.blog.publishers import ExportFormat, create_publisher
from blogkeep.blog.publishers.base import DEFAULT_TITLE
from blogkeep.content.models import Comment, Post
from blogkeep.content.store import PostStore

logger = logging.getLogger(__name__)


class BlogService:
    """Create, read, search and delete posts and their comments."""

    def __init__(
        self,
        store: PostStore,
        *,
        title: str = DEFAULT_TITLE,
        export_paths: dict[ExportFormat, Path] | None = None,
    ) -> None:
        self._store = store
        self._title = title
        self._export_paths = export_paths or {}
        self._posts: list[Post] = store.load()

    def __len__(self) -> int:
        return len(self._posts)

    def _persist(self) -> None:
        self._store.save(self._posts)

    # ── Write operations ─────────────────────────────────────────

    def create_post(self, title: str, content: str, author: str) -> Post:
        """Append a new post stamped with the current time."""
        post = Post.create(len(self._posts) + 1, title, content, author)
        self._posts.append(post)
        self._persist()
        logger.info("Created post %d", post.id)
        return post

    def delete_post(self, post_id: int) -> None:
        """Remove every post with this id.  Missing ids are a no-op."""
        before = len(self._posts)
        self._posts = [p for p in self._posts if p.id != post_id]
        self._persist()
        logger.info("Deleted %d post(s) with id %d", before - len(self._posts), post_id)

    def add_comment(self, post_id: int, author: str, content: str) -> Comment | None:
        """Append a comment to a post, or return None if the post is missing."""
        post = self.get_post(post_id)
        if post is None:
            return None
        comment = Comment.create(len(post.comments) + 1, author, content)
        post.add_comment(comment)
        self._persist()
        logger.info("Added comment %d to post %d", comment.id, post.id)
        return comment

    # ── Read operations ──────────────────────────────────────────

    def get_post(self, post_id: int) -> Post | None:
        """Return the first post with this id, or None if not found."""
        for post in self._posts:
            if post.id == post_id:
                return post
        logger.debug("No post with id %d", post_id)
        return None

    def get_all_posts(self) -> list[Post]:
        """Return all posts, most recently created first."""
        return list(reversed(self._posts))

    def search_posts(self, query: str) -> list[Post]:
        """Return posts whose title or content contains the query, any case.

        Results keep creation order.  An empty query matches every post.
        """
        return [p for p in self._posts if p.matches(query)]

    # ── Export ───────────────────────────────────────────────────

    def export_path(self, fmt: ExportFormat | str = ExportFormat.HTML) -> Path:
        """Return the configured output path for a format."""
        fmt = ExportFormat(fmt)
        if fmt in self._export_paths:
            return self._export_paths[fmt]
        return create_publisher(fmt).index_path(Path("."))

    def export(self, path: Path | str | None = None, fmt: ExportFormat | str = ExportFormat.HTML) -> Path:
        """Render all posts, newest first, and overwrite the target file.

        Returns:
            The path that was written.
        """
        publisher = create_publisher(fmt, title=self._title)
        target = Path(path) if path is not None else self.export_path(fmt)
        target.write_text(publisher.format_index(self.get_all_posts()), encoding="utf-8")
        logger.info("Exported %d posts to %s", len(self._posts), target)
        return target

    def export_html(self, path: Path | str | None = None) -> Path:
        """Export the blog as a static HTML page."""
        return self.export(path, ExportFormat.HTML)
