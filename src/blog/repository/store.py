"""Content Repository: post lookup and ordering over the content directory.

Answers "which posts exist" and "give me post X" against the flat files
under the configured content directory, plus the static pieces the pages
need (stylesheet, about fragment, index page source).

Usage:
    repo = ContentRepository(Settings.load())
    post = repo.get("hello-world")
    newest = repo.last_n(5)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from src.common.config import ListFailurePolicy, Settings
from src.common.errors import (
    ContentNotFoundError,
    MalformedPostError,
    PostNotFoundError,
    StorageUnavailableError,
)
from src.common.logging import setup_logging

from ..post_parser import Post, load_post
from .cache import NullPostCache, PostCache

logger = setup_logging(module_name="blog.repository")


def sort_newest_first(posts: list[Post]) -> list[Post]:
    """Order posts by date, newest first; equal dates keep their input order."""
    return sorted(posts, key=lambda p: p.date, reverse=True)


def is_valid_post_id(post_id: str) -> bool:
    """Reject ids that are empty or could escape the posts directory."""
    if not post_id or post_id.startswith("."):
        return False
    return "/" not in post_id and "\\" not in post_id and "\0" not in post_id


class ContentRepository:
    """Read-only view of the posts and static content on disk."""

    def __init__(self, settings: Settings, cache: Optional[PostCache] = None):
        """
        Args:
            settings: Application settings (paths, extension, failure policy).
            cache: Post cache. Defaults to NullPostCache (always reads files).
        """
        self.settings = settings
        self.cache = cache or NullPostCache()

    def _post_path(self, post_id: str) -> Path:
        return self.settings.posts_dir / f"{post_id}{self.settings.post_extension}"

    # --- Posts ---

    def get(self, post_id: str) -> Post:
        """Load one post by identifier.

        Raises:
            PostNotFoundError: No file exists for the id.
            MalformedPostError: The file does not parse.
            StorageUnavailableError: The file cannot be read.
        """
        if not is_valid_post_id(post_id):
            raise PostNotFoundError(post_id)

        cached = self.cache.get(post_id)
        if cached is not None:
            return cached

        post = load_post(self._post_path(post_id), post_id)
        self.cache.put(post_id, post)
        return post

    def list_ids(self) -> list[str]:
        """Identifiers of every post file, in file name order.

        Directories and files without the post extension are skipped.
        """
        posts_dir = self.settings.posts_dir
        extension = self.settings.post_extension
        try:
            entries = sorted(posts_dir.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise StorageUnavailableError(str(posts_dir), str(e)) from e

        ids = []
        for entry in entries:
            if entry.is_dir() or not entry.name.endswith(extension):
                continue
            post_id = entry.name[: -len(extension)]
            if is_valid_post_id(post_id):
                ids.append(post_id)
        return ids

    def list_posts(self) -> list[Post]:
        """Every parsable post, in file name order.

        Under the fail_fast policy one malformed post fails the whole listing;
        under skip it is logged and left out. A listed entry that cannot be
        opened (dangling symlink, deleted after listing) is treated the same
        way, as StorageUnavailableError rather than a not-found.
        """
        skip = self.settings.list_failure_policy is ListFailurePolicy.SKIP
        posts = []
        for post_id in self.list_ids():
            try:
                posts.append(self.get(post_id))
            except MalformedPostError as e:
                if not skip:
                    raise
                logger.warning("Skipping malformed post %s: %s", post_id, e.reason)
            except PostNotFoundError as e:
                if not skip:
                    raise StorageUnavailableError(
                        str(self._post_path(post_id)), "listed but could not be opened"
                    ) from e
                logger.warning("Skipping post %s: listed but could not be opened", post_id)
        return posts

    def all_sorted(self) -> list[Post]:
        """Every post, newest first."""
        return sort_newest_first(self.list_posts())

    def last_n(self, n: int) -> list[Post]:
        """The n most recent posts; n beyond the collection size is clamped."""
        if n <= 0:
            return []
        return self.all_sorted()[:n]

    # --- Static content ---

    def _read_text(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise
        except (OSError, UnicodeDecodeError) as e:
            raise StorageUnavailableError(str(path), str(e)) from e

    def get_stylesheet(self) -> str:
        """Stylesheet text; a missing file gives an empty stylesheet."""
        try:
            return self._read_text(self.settings.stylesheet_path)
        except FileNotFoundError:
            return ""

    def get_about(self) -> str:
        """About page HTML fragment, unmodified.

        Raises:
            ContentNotFoundError: If there is no about page.
        """
        try:
            return self._read_text(self.settings.about_path)
        except FileNotFoundError as e:
            raise ContentNotFoundError("about") from e

    def get_index_source(self) -> str:
        """Raw index page source (template text with directives).

        Raises:
            ContentNotFoundError: If there is no index page.
        """
        try:
            return self._read_text(self.settings.index_path)
        except FileNotFoundError as e:
            raise ContentNotFoundError("index") from e
