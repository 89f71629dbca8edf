"""Base class for export formats."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
from pathlib import Path

from blogkeep.content.models import Post

DEFAULT_TITLE = "My Blog"


class ExportFormat(StrEnum):
    """Available export formats."""

    HTML = "html"
    MARKDOWN = "markdown"


class BlogPublisher(ABC):
    """Renders the post list into a single self-contained document."""

    extension: str = ""

    def __init__(self, title: str = DEFAULT_TITLE) -> None:
        self.title = title

    @abstractmethod
    def format_index(self, posts: list[Post]) -> str:
        """Render every post, in the order given, as one document."""

    def index_path(self, output_dir: Path) -> Path:
        """Compute the default output file path inside a directory."""
        return output_dir / f"blog{self.extension}"
