"""JSON-backed post store.

Persists every Post in a single JSON array.  The whole file is read on
load and rewritten on save; there is no incremental update and no
protection against a crash mid-write.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from blogkeep.content.models import Post
from blogkeep.errors import StoreParseError

logger = logging.getLogger(__name__)

STORE_FILENAME = "blog.json"

_POSTS = TypeAdapter(list[Post])


class PostStore:
    """Loads and saves the full post collection."""

    def __init__(self, path: Path | str = STORE_FILENAME) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        """Check whether the backing file is present."""
        return self._path.exists()

    def load(self) -> list[Post]:
        """Return every stored post in creation order.

        A missing file is an empty blog.  A file that is not a JSON array
        of well-formed posts raises StoreParseError.
        """
        if not self._path.exists():
            logger.info("No blog store at %s, starting empty", self._path)
            return []
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            posts = _POSTS.validate_python(raw)
        except UnicodeDecodeError as exc:
            raise StoreParseError(self._path, f"not UTF-8 ({exc.reason})") from exc
        except json.JSONDecodeError as exc:
            raise StoreParseError(self._path, f"invalid JSON ({exc})") from exc
        except ValidationError as exc:
            raise StoreParseError(
                self._path, f"unexpected shape ({exc.error_count()} errors)"
            ) from exc
        logger.info("Loaded %d posts from %s", len(posts), self._path)
        return posts

    def save(self, posts: list[Post]) -> None:
        """Overwrite the backing file with the full collection."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(_POSTS.dump_python(posts, mode="json"), indent=4, ensure_ascii=False),
            encoding="utf-8",
        )
        logger.info("Saved %d posts to %s", len(posts), self._path)
