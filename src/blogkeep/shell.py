"""Interactive menu loop over a BlogService."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from rich.console import Console

from blogkeep.blog.services import BlogService

logger = logging.getLogger(__name__)

MENU = """
=== Simple Blog ===
1. Create Post
2. View All Posts
3. View Post Details
4. Add Comment
5. Delete Post
6. Search Posts
7. Export to HTML
8. Exit"""

EXIT_CHOICE = "8"

_LEADING_INT = re.compile(r"[+-]?[0-9]+")


def parse_id(text: str) -> int:
    """Parse an id leniently: leading digits are used, anything else is 0.

    No post or comment ever has id 0, so unparseable input simply finds
    nothing.
    """
    match = _LEADING_INT.match(text.strip())
    if match is None:
        return 0
    try:
        return int(match.group())
    except ValueError:
        # past the int string-conversion digit limit
        return 0


class BlogShell:
    """Reads menu choices and dispatches them to the blog service."""

    def __init__(self, service: BlogService, console: Console | None = None) -> None:
        self._service = service
        self._console = console or Console()
        self._commands: dict[str, Callable[[], None]] = {
            "1": self.create_post,
            "2": self.list_posts,
            "3": self.show_post,
            "4": self.add_comment,
            "5": self.delete_post,
            "6": self.search_posts,
            "7": self.export,
        }

    def _say(self, text: str = "") -> None:
        self._console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)

    def _ask(self, prompt: str) -> str:
        return self._console.input(prompt).strip()

    def run(self) -> None:
        """Loop until the user picks Exit or input ends."""
        while True:
            self._say(MENU)
            try:
                choice = self._ask("\nEnter choice: ")
                if choice == EXIT_CHOICE:
                    return
                command = self._commands.get(choice)
                if command is None:
                    self._say("Invalid choice")
                    continue
                command()
            except EOFError:
                logger.debug("Input closed, leaving shell")
                self._say()
                return

    # ── Commands ─────────────────────────────────────────────────

    def create_post(self) -> None:
        title = self._ask("Post title: ")
        content = self._ask("Post content: ")
        author = self._ask("Author name: ")
        post = self._service.create_post(title, content, author)
        self._say(f"Post created with ID: {post.id}")

    def list_posts(self) -> None:
        posts = self._service.get_all_posts()
        if not posts:
            self._say("No posts yet")
            return
        for post in posts:
            self._say(f"\nID: {post.id}")
            self._say(f"Title: {post.title}")
            self._say(f"Author: {post.author}")
            self._say(f"Date: {post.created_at}")
            self._say(f"Comments: {len(post.comments)}")
            self._say("-" * 50)

    def show_post(self) -> None:
        post = self._service.get_post(parse_id(self._ask("Post ID: ")))
        if post is None:
            self._say("Post not found")
            return
        self._say(f"\nTitle: {post.title}")
        self._say(f"Author: {post.author}")
        self._say(f"Date: {post.created_at}")
        self._say(f"\nContent:\n{post.content}")
        self._say(f"\nComments ({len(post.comments)}):")
        for comment in post.comments:
            self._say(f"  - {comment.author}: {comment.content}")
            self._say(f"    {comment.created_at}")

    def add_comment(self) -> None:
        post_id = parse_id(self._ask("Post ID: "))
        author = self._ask("Your name: ")
        content = self._ask("Comment: ")
        if self._service.add_comment(post_id, author, content) is None:
            self._say("Post not found")
        else:
            self._say("Comment added")

    def delete_post(self) -> None:
        self._service.delete_post(parse_id(self._ask("Post ID to delete: ")))
        self._say("Post deleted")

    def search_posts(self) -> None:
        results = self._service.search_posts(self._ask("Search query: "))
        if not results:
            self._say("No posts found")
            return
        for post in results:
            self._say(f"ID: {post.id} - {post.title}")

    def export(self) -> None:
        path = self._service.export_html()
        self._say(f"Blog exported to {path}")
