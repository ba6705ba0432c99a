"""Error taxonomy for the content pipeline.

Callers pick a response from the exception type:
- ContentNotFoundError (and PostNotFoundError): the requested content has no backing file
- MalformedPostError: the file exists but its header or date does not parse
- TemplateError: a template is missing, fails to compile, or fails to render
- StorageUnavailableError: the backing store cannot be read for another reason
"""

from __future__ import annotations

from typing import Optional


class BlogError(Exception):
    """Base class for every content pipeline failure."""


class ContentNotFoundError(BlogError, LookupError):
    """Requested content has no backing file."""

    def __init__(self, name: str, message: str = ""):
        self.name = name
        super().__init__(message or f"{name} not found")


class PostNotFoundError(ContentNotFoundError):
    """No post file exists for the requested identifier."""

    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__(post_id, f"post {post_id!r} not found")


class MalformedPostError(BlogError, ValueError):
    """Post file exists but cannot be parsed."""

    def __init__(self, post_id: str, reason: str):
        self.post_id = post_id
        self.reason = reason
        super().__init__(f"post {post_id!r} is malformed: {reason}")


class TemplateError(BlogError):
    """Template is missing, invalid, or failed to render."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"template {name!r}: {reason}")


class StorageUnavailableError(BlogError):
    """Backing directory or file is unreadable for a reason other than absence."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason or "unreadable"
        super().__init__(f"storage unavailable at {path}: {self.reason}")
