# Content Repository Module
# Post listing, lookup, ordering and the optional post cache

from .cache import LRUPostCache, NullPostCache, PostCache, build_cache
from .store import ContentRepository, is_valid_post_id, sort_newest_first

__all__ = [
    "ContentRepository",
    "LRUPostCache",
    "NullPostCache",
    "PostCache",
    "build_cache",
    "is_valid_post_id",
    "sort_newest_first",
]
