"""
Data models for template contexts.
Each page model converts itself into the variables its template reads.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markupsafe import Markup

from ..post_parser.models import Post, PostSummary


@dataclass
class BasePage:
    """Outer page shell around already-rendered content."""
    title: str
    page_content: str  # pre-rendered HTML, inserted without escaping
    stylesheet: str = ""  # raw CSS, inserted without escaping

    def to_template_context(self) -> dict:
        return {
            "title": self.title,
            "page_content": Markup(self.page_content),
            "stylesheet": Markup(self.stylesheet),
        }


@dataclass
class PostPage:
    """Single post view."""
    title: str
    date_display: str
    content: str  # post body HTML, inserted without escaping
    tags: list[str] = field(default_factory=list)

    @classmethod
    def from_post(cls, post: Post) -> PostPage:
        return cls(
            title=post.title,
            date_display=post.date_display,
            content=post.content,
            tags=list(post.tags),
        )

    def to_template_context(self) -> dict:
        return {
            "title": self.title,
            "date_display": self.date_display,
            "content": Markup(self.content),
            "tags": self.tags,
        }


@dataclass
class PostListPage:
    """All posts, newest first."""
    posts: list[PostSummary] = field(default_factory=list)

    def to_template_context(self) -> dict:
        return {"posts": [p.to_dict() for p in self.posts]}


@dataclass
class IndexPage:
    """Freeform index page; gets the most recent posts for templates that loop over them."""
    last_posts: list[PostSummary] = field(default_factory=list)

    def to_template_context(self) -> dict:
        return {"last_posts": [p.to_dict() for p in self.last_posts]}
