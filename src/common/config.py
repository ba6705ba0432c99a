"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Literal, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"
DEFAULT_CONTENT_DIR = PROJECT_ROOT / "content"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")


class TemplateMode(str, Enum):
    """How templates are compiled."""
    RELOAD = "reload"  # re-read and re-compile on every call (development)
    COMPILE_ONCE = "compile_once"  # compile on first use, then reuse (production)


class ListFailurePolicy(str, Enum):
    """What a listing does when one post fails to parse."""
    FAIL_FAST = "fail_fast"
    SKIP = "skip"


class CacheSettings(BaseModel):
    """Post cache settings."""
    backend: Literal["none", "lru"] = "none"
    max_entries: int = Field(default=128, ge=1)


class ServerSettings(BaseModel):
    """HTTP shell settings."""
    host: str = "127.0.0.1"
    port: int = 8080
    debug: bool = False


# Environment variable -> dotted settings key
ENV_OVERRIDES: dict[str, str] = {
    "BLOG_CONTENT_DIR": "content_dir",
    "BLOG_TEMPLATE_MODE": "template_mode",
    "BLOG_LIST_FAILURE_POLICY": "list_failure_policy",
    "BLOG_EXPOSE_ERRORS": "expose_errors",
    "BLOG_LOG_LEVEL": "log_level",
    "BLOG_CACHE_BACKEND": "cache.backend",
    "BLOG_HOST": "server.host",
    "BLOG_PORT": "server.port",
}


class Settings(BaseModel):
    """Top-level application settings."""
    content_dir: Path = DEFAULT_CONTENT_DIR
    post_extension: str = ".post"
    index_last_n: int = Field(default=5, ge=0)
    post_url_prefix: str = "/blog/"
    site_title: str = "Blog"

    template_mode: TemplateMode = TemplateMode.RELOAD
    list_failure_policy: ListFailurePolicy = ListFailurePolicy.FAIL_FAST
    cache: CacheSettings = Field(default_factory=CacheSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)

    # Include exception text in 500 responses
    expose_errors: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @property
    def content_root(self) -> Path:
        """Resolve the content directory relative to the project root."""
        if self.content_dir.is_absolute():
            return self.content_dir
        return PROJECT_ROOT / self.content_dir

    @property
    def posts_dir(self) -> Path:
        return self.content_root / "blog"

    @property
    def templates_dir(self) -> Path:
        return self.content_root / "templates"

    @property
    def stylesheet_path(self) -> Path:
        return self.content_root / "style.css"

    @property
    def about_path(self) -> Path:
        return self.content_root / "about.html"

    @property
    def index_path(self) -> Path:
        return self.content_root / "index.html"

    @classmethod
    def load(cls, settings_path: Optional[Path] = None) -> Settings:
        """Load settings from config/settings.yaml, then apply BLOG_* env overrides.

        Args:
            settings_path: YAML file to read instead of config/settings.yaml.

        Returns:
            Validated settings.
        """
        settings_path = settings_path or CONFIG_DIR / "settings.yaml"
        data: dict = {}
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        _apply_env_overrides(data)
        return cls(**data)


def _apply_env_overrides(data: dict) -> None:
    """Write BLOG_* environment variables into the raw settings dict."""
    for env_name, key in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value is None or value == "":
            continue
        *parents, leaf = key.split(".")
        target = data
        for parent in parents:
            target = target.setdefault(parent, {})
        target[leaf] = value
