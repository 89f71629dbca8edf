"""Tests for the export publishers."""

from pathlib import Path

import pytest

from blogkeep.blog.publishers import BlogPublisher, ExportFormat, create_publisher
from blogkeep.blog.publishers.html import HtmlPublisher, nl2br
from blogkeep.blog.publishers.markdown import MarkdownPublisher
from blogkeep.content.models import Comment, Post


def _post(post_id: int = 1, title: str = "Title", content: str = "Body", author: str = "alice") -> Post:
    return Post(
        id=post_id,
        title=title,
        content=content,
        author=author,
        created_at="2024-03-04 05:06:07",
        comments=[],
    )


def _comment(author: str = "bob", content: str = "nice") -> Comment:
    return Comment(id=1, author=author, content=content, created_at="2024-03-05 00:00:00")


class TestFactory:
    def test_html(self):
        assert isinstance(create_publisher("html"), HtmlPublisher)

    def test_markdown(self):
        assert isinstance(create_publisher(ExportFormat.MARKDOWN), MarkdownPublisher)

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown export format"):
            create_publisher("pdf")

    def test_title_passed(self):
        assert create_publisher("html", title="Notes").title == "Notes"

    def test_index_path(self):
        publisher: BlogPublisher = create_publisher("html")
        assert publisher.index_path(Path("out")) == Path("out") / "blog.html"


class TestNl2br:
    def test_unix_newlines(self):
        assert nl2br("a\nb") == "a<br />\nb"

    def test_windows_newlines(self):
        assert nl2br("a\r\nb") == "a<br />\r\nb"

    def test_no_newlines(self):
        assert nl2br("abc") == "abc"


class TestHtmlPublisher:
    def test_page_shell(self):
        html = HtmlPublisher().format_index([])
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>My Blog</title>" in html
        assert "<style>" in html
        assert "<h1>My Blog</h1>" in html
        assert '<div class="post">' not in html

    def test_post_fields(self):
        html = HtmlPublisher().format_index([_post()])
        assert '<div class="post-title">Title</div>' in html
        assert "By alice on 2024-03-04 05:06:07" in html
        assert '<div class="post-content">Body</div>' in html

    def test_escapes_user_text(self):
        post = _post(title="<b>Bold</b>", content="a & b", author='"quoted"')
        post.add_comment(_comment(author="<i>x</i>", content="<script>alert(1)</script>"))
        html = HtmlPublisher().format_index([post])

        assert "&lt;b&gt;Bold&lt;/b&gt;" in html
        assert "a &amp; b" in html
        assert "&quot;quoted&quot;" in html
        assert "&lt;i&gt;x&lt;/i&gt;" in html
        assert "<script>" not in html

    def test_content_line_breaks(self):
        html = HtmlPublisher().format_index([_post(content="line one\nline <two>")])
        assert "line one<br />\nline &lt;two&gt;" in html

    def test_no_comment_section_without_comments(self):
        html = HtmlPublisher().format_index([_post()])
        assert "Comments (" not in html

    def test_comment_section(self):
        post = _post()
        post.add_comment(_comment("bob", "first"))
        post.add_comment(Comment(id=2, author="carol", content="second", created_at="2024-03-06 00:00:00"))
        html = HtmlPublisher().format_index([post])

        assert "<h3>Comments (2)</h3>" in html
        assert html.index("first") < html.index("second")
        assert '<div class="comment-author">bob</div>' in html
        assert "2024-03-06 00:00:00" in html

    def test_posts_in_given_order(self):
        html = HtmlPublisher().format_index([_post(2, "Newer"), _post(1, "Older")])
        assert html.index("Newer") < html.index("Older")

    def test_escapes_title(self):
        html = HtmlPublisher(title="Tom & Jerry").format_index([])
        assert "<title>Tom &amp; Jerry</title>" in html


class TestMarkdownPublisher:
    def test_document(self):
        post = _post(title="Hello", content="Some text")
        post.add_comment(_comment())
        md = MarkdownPublisher().format_index([post])

        assert md.startswith("# My Blog\n")
        assert "## Hello" in md
        assert "*By alice on 2024-03-04 05:06:07*" in md
        assert "Some text" in md
        assert "### Comments (1)" in md
        assert "- **bob** (2024-03-05 00:00:00): nice" in md

    def test_no_comments_heading(self):
        md = MarkdownPublisher().format_index([_post()])
        assert "### Comments" not in md
