"""Data models for parsed posts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

# strptime format for the date header line, e.g. "1/2/2006" (leading zeros optional)
DATE_FORMAT = "%m/%d/%Y"

LINE_BREAK = "\n<br>\n"


def format_date(value: date) -> str:
    """Display form of a post date: month/day/year without zero padding."""
    return f"{value.month}/{value.day}/{value.year}"


@dataclass(frozen=True)
class Post:
    """One blog entry, built fresh from its file on every read."""
    title: str
    filename: str  # identifier the post was fetched by; also its URL slug
    date: date
    content: str  # HTML body, lines joined with LINE_BREAK
    tags: tuple[str, ...] = field(default_factory=tuple)

    @property
    def date_display(self) -> str:
        return format_date(self.date)


@dataclass(frozen=True)
class PostSummary:
    """Link/title/date triple used by list views and the index directive."""
    link: str
    title: str
    date_display: str

    @classmethod
    def from_post(cls, post: Post, url_prefix: str = "/blog/") -> PostSummary:
        return cls(
            link=f"{url_prefix}{post.filename}",
            title=post.title,
            date_display=post.date_display,
        )

    def to_dict(self) -> dict:
        return {
            "link": self.link,
            "title": self.title,
            "date_display": self.date_display,
        }
