"""Inline directives in static page content.

A directive looks like ``[[name args]]``. Known names are replaced by
generated HTML; unknown names and arguments a handler rejects are left in
the text as written.
"""

from __future__ import annotations

import re
import uuid
from typing import Callable, Optional

from markupsafe import escape

from ..post_parser.models import PostSummary

DIRECTIVE_RE = re.compile(r"\[\[(?P<name>[A-Za-z_]+)(?P<args>[^\[\]]*)\]\]")
COUNT_RE = re.compile(r"\d+")

LAST_POSTS_DIRECTIVE = "blog_last_x"

# Handler gets the stripped argument text and returns the replacement,
# or None to keep the directive literally.
DirectiveHandler = Callable[[str], Optional[str]]


def expand_directives(text: str, handlers: dict[str, DirectiveHandler]) -> str:
    """Replace every recognised directive in text."""

    def repl(match: re.Match) -> str:
        handler = handlers.get(match.group("name"))
        args = match.group("args")
        # name must be followed by whitespace or end: "[[blog_last_x3]]" is not a directive
        if handler is None or (args and not args[0].isspace()):
            return match.group(0)
        replacement = handler(args.strip())
        return match.group(0) if replacement is None else replacement

    return DIRECTIVE_RE.sub(repl, text)


def parse_count(args: str) -> Optional[int]:
    """Non-negative integer argument, or None when malformed."""
    if COUNT_RE.fullmatch(args) is None:
        return None
    return int(args)


def render_post_links(posts: list[PostSummary]) -> str:
    """One ``<a>`` line per post, each followed by a line break."""
    return "".join(
        f'<a href="{escape(p.link)}">{escape(p.title)}</a> {escape(p.date_display)}<br>\n'
        for p in posts
    )


def last_posts_handler(load_last_n: Callable[[int], list[PostSummary]]) -> DirectiveHandler:
    """Build the ``[[blog_last_x N]]`` handler over a "last N posts" loader."""

    def handle(args: str) -> Optional[str]:
        count = parse_count(args)
        if count is None:
            return None
        return render_post_links(load_last_n(count))

    return handle


def stash_directives(
    text: str, handlers: dict[str, DirectiveHandler]
) -> tuple[str, dict[str, str]]:
    """Expand directives in template source, leaving placeholders in their place.

    Only directives written in the source are expanded: text the template
    produces later (a post title, say) is left alone, and the generated HTML
    is never parsed as Jinja.

    Returns:
        (text with placeholders, placeholder -> replacement HTML)
    """
    nonce = uuid.uuid4().hex
    stashed: dict[str, str] = {}

    def stash(handler: DirectiveHandler) -> DirectiveHandler:
        def wrapped(args: str) -> Optional[str]:
            replacement = handler(args)
            if replacement is None:
                return None
            key = f"\x00directive-{nonce}-{len(stashed)}\x00"
            stashed[key] = replacement
            return key

        return wrapped

    text = expand_directives(text, {name: stash(h) for name, h in handlers.items()})
    return text, stashed


def restore_directives(text: str, stashed: dict[str, str]) -> str:
    """Swap placeholders from stash_directives() for their HTML."""
    for key, replacement in stashed.items():
        text = text.replace(key, replacement)
    return text
