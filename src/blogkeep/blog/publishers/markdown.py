"""Plain markdown publisher for repositories and static site generators."""

from __future__ import annotations

from blogkeep.blog.publishers.base import BlogPublisher
from blogkeep.content.models import Post


class MarkdownPublisher(BlogPublisher):
    """Formats the blog as a single markdown document."""

    extension = ".md"

    def format_index(self, posts: list[Post]) -> str:
        lines: list[str] = [f"# {self.title}", ""]
        for post in posts:
            lines.extend(self._post_body(post))
        return "\n".join(lines)

    def _post_body(self, post: Post) -> list[str]:
        lines: list[str] = [
            f"## {post.title}",
            "",
            f"*By {post.author} on {post.created_at}*",
            "",
            post.content,
            "",
        ]
        if post.comments:
            lines.append(f"### Comments ({len(post.comments)})")
            lines.append("")
            for comment in post.comments:
                lines.append(f"- **{comment.author}** ({comment.created_at}): {comment.content}")
            lines.append("")
        lines.append("---")
        lines.append("")
        return lines
