"""Static HTML publisher."""

from __future__ import annotations

import html
import re

from blogkeep.blog.publishers.base import BlogPublisher
from blogkeep.content.models import Comment, Post

_LINE_BREAK = re.compile(r"(\r\n|\n\r|\n|\r)")

_STYLE = """\
    <style>
        body { font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px; }
        .post { border: 1px solid #ddd; padding: 20px; margin-bottom: 20px; }
        .post-title { font-size: 24px; font-weight: bold; margin-bottom: 10px; }
        .post-meta { color: #666; font-size: 14px; margin-bottom: 15px; }
        .comment { background: #f5f5f5; padding: 10px; margin-top: 10px; }
        .comment-author { font-weight: bold; }
        .comment-date { font-size: 12px; color: #999; }
    </style>"""


def nl2br(text: str) -> str:
    """Insert ``<br />`` before every line break, keeping the break itself."""
    return _LINE_BREAK.sub(r"<br />\1", text)


class HtmlPublisher(BlogPublisher):
    """Formats the blog as one HTML page with an embedded style block.

    User-supplied text is escaped; timestamps are system generated and
    emitted verbatim.
    """

    extension = ".html"

    def format_index(self, posts: list[Post]) -> str:
        title = html.escape(self.title)
        lines: list[str] = [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '    <meta charset="utf-8">',
            f"    <title>{title}</title>",
            _STYLE,
            "</head>",
            "<body>",
            f"    <h1>{title}</h1>",
        ]
        for post in posts:
            lines.extend(self._post_block(post))
        lines.append("</body>")
        lines.append("</html>")
        lines.append("")
        return "\n".join(lines)

    def _post_block(self, post: Post) -> list[str]:
        lines: list[str] = [
            '<div class="post">',
            f'<div class="post-title">{html.escape(post.title)}</div>',
            f'<div class="post-meta">By {html.escape(post.author)} on {post.created_at}</div>',
            f'<div class="post-content">{nl2br(html.escape(post.content))}</div>',
        ]
        if post.comments:
            lines.append(f"<h3>Comments ({len(post.comments)})</h3>")
            for comment in post.comments:
                lines.extend(self._comment_block(comment))
        lines.append("</div>")
        return lines

    def _comment_block(self, comment: Comment) -> list[str]:
        return [
            '<div class="comment">',
            f'<div class="comment-author">{html.escape(comment.author)}</div>',
            f"<div>{html.escape(comment.content)}</div>",
            f'<div class="comment-date">{comment.created_at}</div>',
            "</div>",
        ]
