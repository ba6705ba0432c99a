"""Post Parser: decode one raw post file into a Post.

File layout (line oriented):

    Title line
    3/4/2023
    [[tags: first second]]
    <blank separator>
    body line 1
    body line 2

The tag line is always consumed, whatever its shape; only the exact
``[[tags: ...]]`` form yields tags. Body lines are joined with a ``<br>``
marker between consecutive lines and never after the last one.

Usage:
    from src.blog.post_parser import parse_post, load_post

    post = parse_post(text, "hello-world")
    post = load_post(Path("content/blog/hello-world.post"), "hello-world")
"""

from __future__ import annotations

import re
from datetime import date, datetime
from pathlib import Path

from src.common.errors import MalformedPostError, PostNotFoundError, StorageUnavailableError

from .models import DATE_FORMAT, LINE_BREAK, Post

TAG_LINE_RE = re.compile(r"\[\[tags:(?P<tags>[^\]]*)\]\]")

# Title, date, tags, blank separator
HEADER_LINES = 4


def parse_date(value: str, post_id: str = "") -> date:
    """Parse a M/D/YYYY date line.

    Raises:
        MalformedPostError: If the line is not a valid M/D/YYYY date.
    """
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError as e:
        raise MalformedPostError(post_id, f"invalid date {value!r}: {e}") from e


def parse_tags(line: str) -> tuple[str, ...]:
    """Split a ``[[tags: a b c]]`` line into tags; any other shape gives none."""
    match = TAG_LINE_RE.fullmatch(line.strip())
    if match is None:
        return ()
    return tuple(match.group("tags").split())


def join_body(lines: list[str]) -> str:
    """Join body lines with the line-break marker, dropping trailing empty lines."""
    end = len(lines)
    while end > 0 and lines[end - 1] == "":
        end -= 1
    return LINE_BREAK.join(lines[:end])


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` only, dropping one trailing ``\\r`` per line.

    Other Unicode line separators (form feed, U+2028, ...) stay inside
    their line. A final newline does not start an extra empty line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_post(text: str, post_id: str) -> Post:
    """Parse the raw text of a post file.

    Args:
        text: Whole file contents.
        post_id: Identifier the post was requested by (its file stem).

    Returns:
        Parsed Post.

    Raises:
        MalformedPostError: If the title or date line is missing, or the
            date does not parse.
    """
    lines = split_lines(text)
    if len(lines) < 2:
        raise MalformedPostError(post_id, "missing title or date line")

    title = lines[0]
    post_date = parse_date(lines[1], post_id)
    tags = parse_tags(lines[2]) if len(lines) > 2 else ()
    content = join_body(lines[HEADER_LINES:])

    return Post(
        title=title,
        filename=post_id,
        date=post_date,
        content=content,
        tags=tags,
    )


def load_post(path: Path, post_id: str) -> Post:
    """Read and parse a post file.

    Raises:
        PostNotFoundError: If the file does not exist.
        StorageUnavailableError: If the file exists but cannot be read.
        MalformedPostError: If the contents are not UTF-8 or do not parse.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (FileNotFoundError, IsADirectoryError) as e:
        raise PostNotFoundError(post_id) from e
    except UnicodeDecodeError as e:
        raise MalformedPostError(post_id, f"not valid UTF-8: {e}") from e
    except OSError as e:
        raise StorageUnavailableError(str(path), str(e)) from e
    return parse_post(text, post_id)
