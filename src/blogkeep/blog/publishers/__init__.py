"""Export publisher factory and registry."""

from __future__ import annotations

from blogkeep.blog.publishers.base import DEFAULT_TITLE, BlogPublisher, ExportFormat


def create_publisher(fmt: ExportFormat | str, *, title: str = DEFAULT_TITLE) -> BlogPublisher:
    """Create a publisher for the given export format.

    Args:
        fmt: The target format.
        title: Page title rendered at the top of the document.

    Returns:
        A BlogPublisher instance for the format.

    Raises:
        ValueError: If the format is unknown.
    """
    from blogkeep.blog.publishers.html import HtmlPublisher
    from blogkeep.blog.publishers.markdown import MarkdownPublisher

    publishers: dict[ExportFormat, type[BlogPublisher]] = {
        ExportFormat.HTML: HtmlPublisher,
        ExportFormat.MARKDOWN: MarkdownPublisher,
    }

    if fmt in publishers:
        return publishers[fmt](title=title)

    raise ValueError(f"Unknown export format: {fmt!r}")


__all__ = ["BlogPublisher", "ExportFormat", "create_publisher"]
