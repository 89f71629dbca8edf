"""Unified configuration loaded from .blogkeep.toml, env vars, and CLI flags.

Loading order: defaults → TOML file → env vars → CLI flags.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".blogkeep.toml"
CONFIG_SEARCH_PATHS = [
    Path("."),
]
GLOBAL_CONFIG = Path.home() / ".config" / "blogkeep" / "config.toml"


class StorageConfig(BaseModel):
    """[storage] section."""

    path: str = "blog.json"


class ExportConfig(BaseModel):
    """[export] section."""

    html_path: str = "blog.html"
    markdown_path: str = "blog.md"
    title: str = "My Blog"


class BlogkeepConfig(BaseModel):
    """Top-level configuration model."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)

    @property
    def store_path(self) -> Path:
        return Path(self.storage.path)


def load_config(path: str | Path | None = None) -> BlogkeepConfig:
    """Load configuration from a TOML file.

    Search order:
    1. Explicit path (if provided)
    2. .blogkeep.toml in CWD
    3. ~/.config/blogkeep/config.toml

    Then overlay environment variables.

    Args:
        path: Explicit path to a TOML file.

    Returns:
        Merged BlogkeepConfig.
    """
    data: dict[str, object] = {}

    if path is not None:
        toml_path = Path(path)
        if toml_path.exists():
            data = _load_toml(toml_path)
            logger.info("Loaded config from %s", toml_path)
        else:
            logger.warning("Config file not found: %s", toml_path)
    else:
        for search_dir in CONFIG_SEARCH_PATHS:
            candidate = search_dir / CONFIG_FILENAME
            if candidate.exists():
                data = _load_toml(candidate)
                logger.info("Loaded config from %s", candidate)
                break
        if not data and GLOBAL_CONFIG.exists():
            data = _load_toml(GLOBAL_CONFIG)
            logger.info("Loaded config from %s", GLOBAL_CONFIG)

    try:
        config = BlogkeepConfig.model_validate(data) if data else BlogkeepConfig()
    except ValueError as exc:
        logger.warning("Invalid configuration, using defaults: %s", exc)
        config = BlogkeepConfig()

    return _apply_env_vars(config)


def merge_cli_overrides(config: BlogkeepConfig, **cli_kwargs: object) -> BlogkeepConfig:
    """Overlay explicitly-set CLI flags onto the config.

    Only overrides values where the CLI flag was explicitly provided
    (i.e., not None).
    """
    data = config.model_dump()

    mapping: dict[str, tuple[str, str]] = {
        "store_path": ("storage", "path"),
        "html_path": ("export", "html_path"),
        "markdown_path": ("export", "markdown_path"),
        "title": ("export", "title"),
    }

    for key, value in cli_kwargs.items():
        if value is None or key not in mapping:
            continue
        section, field = mapping[key]
        data[section][field] = str(value)

    return BlogkeepConfig.model_validate(data)


def _load_toml(path: Path) -> dict[str, object]:
    """Load a TOML file and return the data dict."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as exc:
        logger.warning("Failed to parse %s: %s", path, exc)
        return {}


def _apply_env_vars(config: BlogkeepConfig) -> BlogkeepConfig:
    """Apply environment variable overrides to config."""
    data = config.model_dump()

    env_mapping: dict[str, tuple[str, str]] = {
        "BLOGKEEP_STORE_PATH": ("storage", "path"),
        "BLOGKEEP_EXPORT_HTML": ("export", "html_path"),
        "BLOGKEEP_EXPORT_MARKDOWN": ("export", "markdown_path"),
        "BLOGKEEP_TITLE": ("export", "title"),
    }

    for env_var, (section, field) in env_mapping.items():
        value = os.environ.get(env_var)
        if value is not None:
            data[section][field] = value

    return BlogkeepConfig.model_validate(data)
