"""Post caches for the content repository.

The repository always talks to a PostCache. NullPostCache (the default)
never stores anything, so every read goes to the backing files.
LRUPostCache keeps a bounded number of parsed posts in memory.
"""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Optional, Protocol

from src.common.config import CacheSettings
from src.common.logging import setup_logging

from ..post_parser.models import Post

logger = setup_logging(module_name="blog.cache")


class PostCache(Protocol):
    """Capability set every post cache provides, keyed by post id."""

    def contains(self, post_id: str) -> bool: ...

    def get(self, post_id: str) -> Optional[Post]: ...

    def put(self, post_id: str, post: Post) -> None: ...

    def clear(self) -> None: ...


class NullPostCache:
    """Cache that always misses."""

    def contains(self, post_id: str) -> bool:
        return False

    def get(self, post_id: str) -> Optional[Post]:
        return None

    def put(self, post_id: str, post: Post) -> None:
        return None

    def clear(self) -> None:
        return None


class LRUPostCache:
    """Bounded in-memory post cache with least-recently-used eviction.

    Safe to share between request threads.
    """

    def __init__(self, max_entries: int = 128):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.max_entries = max_entries
        self._entries: OrderedDict[str, Post] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def contains(self, post_id: str) -> bool:
        with self._lock:
            return post_id in self._entries

    def get(self, post_id: str) -> Optional[Post]:
        with self._lock:
            post = self._entries.get(post_id)
            if post is not None:
                self._entries.move_to_end(post_id)
                logger.debug("Cache hit: %s", post_id)
            return post

    def put(self, post_id: str, post: Post) -> None:
        with self._lock:
            self._entries[post_id] = post
            self._entries.move_to_end(post_id)
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Cache evict: %s", evicted)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


def build_cache(cache_settings: CacheSettings) -> PostCache:
    """Create the cache selected in settings."""
    if cache_settings.backend == "lru":
        return LRUPostCache(max_entries=cache_settings.max_entries)
    return NullPostCache()
