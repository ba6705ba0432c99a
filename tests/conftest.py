"""Shared test fixtures for the blog engine."""

import sys
from pathlib import Path

import pytest

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.common.config import Settings
from src.blog.renderer import PageRenderer
from src.blog.repository import ContentRepository
from src.blog.template_engine import TemplateResolver


BASE_TEMPLATE = """<!-- base:start -->
<title>{{ title }}</title>
<style>{{ stylesheet }}</style>
{{ page_content }}
<!-- base:end -->
"""

POST_TEMPLATE = """<h1>{{ title }}</h1>
<p class="date">{{ date_display }}</p>
<div class="content">{{ content }}</div>
"""

LIST_TEMPLATE = """<ul>
{% for post in posts %}
<li><a href="{{ post.link }}">{{ post.title }}</a> {{ post.date_display }}</li>
{% endfor %}
</ul>
"""

INDEX_PAGE = """<h1>Home</h1>
[[blog_last_x 2]]
"""

ABOUT_PAGE = "<p>About <b>me</b> & this site</p>"

STYLESHEET = "body > p { color: #333; }"


def post_text(title: str, date: str, tags: str = "", body: str = "") -> str:
    """Build raw post file text."""
    return f"{title}\n{date}\n{tags}\n\n{body}"


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def content_dir(tmp_path) -> Path:
    """Content directory with templates, static pages and three posts.

    Posts in file name order are dated Jan 1, Mar 1 and Feb 1 2023.
    """
    root = tmp_path / "content"
    templates = root / "templates"
    posts = root / "blog"
    templates.mkdir(parents=True)
    posts.mkdir()

    (templates / "_base.html").write_text(BASE_TEMPLATE, encoding="utf-8")
    (templates / "blog_post.html").write_text(POST_TEMPLATE, encoding="utf-8")
    (templates / "blog_list.html").write_text(LIST_TEMPLATE, encoding="utf-8")
    (root / "index.html").write_text(INDEX_PAGE, encoding="utf-8")
    (root / "about.html").write_text(ABOUT_PAGE, encoding="utf-8")
    (root / "style.css").write_text(STYLESHEET, encoding="utf-8")

    (posts / "a-first.post").write_text(
        post_text("First", "1/1/2023", "[[tags: intro]]", "hello"), encoding="utf-8"
    )
    (posts / "b-second.post").write_text(
        post_text("Second", "3/1/2023", "", "line1\nline2"), encoding="utf-8"
    )
    (posts / "c-third.post").write_text(
        post_text("Third", "2/1/2023", "", "only line"), encoding="utf-8"
    )
    return root


@pytest.fixture
def write_post(content_dir):
    """Write a post file into the fixture content directory."""

    def _write(post_id: str, text: str) -> Path:
        path = content_dir / "blog" / f"{post_id}.post"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def settings(content_dir) -> Settings:
    """Settings pointing at the fixture content directory."""
    return Settings(content_dir=content_dir)


@pytest.fixture
def repository(settings) -> ContentRepository:
    return ContentRepository(settings)


@pytest.fixture
def resolver(settings) -> TemplateResolver:
    return TemplateResolver(settings.templates_dir, mode=settings.template_mode)


@pytest.fixture
def renderer(repository, resolver, settings) -> PageRenderer:
    return PageRenderer(repository, resolver, settings)
