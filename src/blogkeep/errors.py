"""Exception types shared across blogkeep."""

from __future__ import annotations

from pathlib import Path


class BlogkeepError(Exception):
    """Base class for blogkeep errors."""


class StoreParseError(BlogkeepError):
    """Raised when the backing file exists but is not a valid post list."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot parse blog store at {path}: {reason}")
