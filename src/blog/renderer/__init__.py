# Page Renderer Module
# Inner content template + base template composition, index directives

from .directives import (
    LAST_POSTS_DIRECTIVE,
    expand_directives,
    last_posts_handler,
    parse_count,
    render_post_links,
    restore_directives,
    stash_directives,
)
from .renderer import PageRenderer

__all__ = [
    "LAST_POSTS_DIRECTIVE",
    "PageRenderer",
    "expand_directives",
    "last_posts_handler",
    "parse_count",
    "render_post_links",
    "restore_directives",
    "stash_directives",
]
