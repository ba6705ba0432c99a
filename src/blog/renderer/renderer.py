"""Page Renderer: two-stage page composition.

Every page is rendered in two steps:
1. The page-specific content (post, post list, index body, about fragment)
2. The base template, with the step 1 HTML as ``page_content``

The whole page is built in memory; an error in either step raises and
nothing is returned.

Usage:
    renderer = PageRenderer(repository, resolver, settings)
    html = renderer.render_post("hello-world")
"""

from __future__ import annotations

from typing import Optional

from src.common.config import Settings
from src.common.logging import setup_logging

from ..post_parser.models import Post, PostSummary
from ..repository import ContentRepository
from ..template_engine import BasePage, IndexPage, PostListPage, PostPage, TemplateResolver
from .directives import (
    LAST_POSTS_DIRECTIVE,
    last_posts_handler,
    restore_directives,
    stash_directives,
)

logger = setup_logging(module_name="blog.renderer")

LIST_TITLE = "Blog"
ABOUT_TITLE = "About"


class PageRenderer:
    """Renders complete HTML pages from repository content and templates."""

    def __init__(
        self,
        repository: ContentRepository,
        resolver: TemplateResolver,
        settings: Optional[Settings] = None,
    ):
        self.repository = repository
        self.resolver = resolver
        self.settings = settings or repository.settings

    def _summarize(self, posts: list[Post]) -> list[PostSummary]:
        prefix = self.settings.post_url_prefix
        return [PostSummary.from_post(p, prefix) for p in posts]

    def _wrap(self, title: str, page_content: str) -> str:
        """Render the base template around already-rendered content."""
        page = BasePage(
            title=title,
            page_content=page_content,
            stylesheet=self.repository.get_stylesheet(),
        )
        return self.resolver.render("base", page.to_template_context())

    def render_post(self, post_id: str) -> str:
        """Full page for one post.

        Raises:
            PostNotFoundError, MalformedPostError, TemplateError, StorageUnavailableError
        """
        post = self.repository.get(post_id)
        inner = self.resolver.render("post", PostPage.from_post(post).to_template_context())
        logger.debug("Rendered post %s", post_id)
        return self._wrap(post.title, inner)

    def render_post_list(self) -> str:
        """Full page listing every post, newest first."""
        summaries = self._summarize(self.repository.all_sorted())
        inner = self.resolver.render("list", PostListPage(summaries).to_template_context())
        return self._wrap(LIST_TITLE, inner)

    def render_index(self) -> str:
        """Full index page with ``[[blog_last_x N]]`` directives expanded."""
        source = self.repository.get_index_source()
        newest = self._summarize(self.repository.all_sorted())

        # Directives come from the page source only, never from rendered titles
        source, stashed = stash_directives(
            source,
            {LAST_POSTS_DIRECTIVE: last_posts_handler(lambda n: newest[:n])},
        )
        template = self.resolver.from_source("index", source)
        page = IndexPage(last_posts=newest[: self.settings.index_last_n])
        body = self.resolver.render_template(template, "index", page.to_template_context())

        return self._wrap(self.settings.site_title, restore_directives(body, stashed))

    def render_about(self) -> str:
        """Full about page; the fragment is inserted unmodified."""
        return self._wrap(ABOUT_TITLE, self.repository.get_about())
