# Common utilities and shared modules
"""
Shared components used by every blog package:
- Project configuration (settings.yaml + BLOG_* environment overrides)
- Logging configuration
- Error taxonomy
"""

from .config import (
    PROJECT_ROOT,
    CacheSettings,
    ListFailurePolicy,
    ServerSettings,
    Settings,
    TemplateMode,
)
from .errors import (
    BlogError,
    ContentNotFoundError,
    MalformedPostError,
    PostNotFoundError,
    StorageUnavailableError,
    TemplateError,
)
from .logging import set_log_level, setup_logging

__all__ = [
    "PROJECT_ROOT",
    "CacheSettings",
    "ListFailurePolicy",
    "ServerSettings",
    "Settings",
    "TemplateMode",
    "BlogError",
    "ContentNotFoundError",
    "MalformedPostError",
    "PostNotFoundError",
    "StorageUnavailableError",
    "TemplateError",
    "set_log_level",
    "setup_logging",
]
