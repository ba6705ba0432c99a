"""HTTP shell: maps routes to PageRenderer calls.

Routes:
    /              303 redirect to /index/
    /index/        index page
    /blog/         post list
    /blog/<id>     single post (/post/<id> is an alias)
    /about/        about page

ContentNotFoundError becomes a 404; every other BlogError becomes a 500,
with the error text only when ``expose_errors`` is set.
"""

from __future__ import annotations

import time
from typing import Optional

from flask import Blueprint, Flask, current_app, g, redirect, request, url_for

from src.common.config import Settings, TemplateMode
from src.common.errors import BlogError, ContentNotFoundError
from src.common.logging import set_log_level, setup_logging

from ..renderer import PageRenderer
from ..repository import ContentRepository, build_cache
from ..template_engine import TemplateResolver

logger = setup_logging(module_name="blog.web")
request_logger = setup_logging(module_name="blog.request")

RENDERER_KEY = "blog_renderer"
HTML_CONTENT_TYPE = "text/html; charset=utf-8"

bp_pages = Blueprint("pages", __name__)


def get_renderer() -> PageRenderer:
    return current_app.extensions[RENDERER_KEY]


def build_renderer(settings: Settings) -> PageRenderer:
    """Wire repository, cache and template resolver from settings."""
    repository = ContentRepository(settings, cache=build_cache(settings.cache))
    resolver = TemplateResolver(settings.templates_dir, mode=settings.template_mode)
    if settings.template_mode is TemplateMode.COMPILE_ONCE:
        resolver.preload()
    return PageRenderer(repository, resolver, settings)


def _html(body: str):
    return body, 200, {"Content-Type": HTML_CONTENT_TYPE}


@bp_pages.route("/")
def root():
    return redirect(url_for("pages.index"), code=303)


@bp_pages.route("/index/")
def index():
    return _html(get_renderer().render_index())


@bp_pages.route("/blog/")
def post_list():
    return _html(get_renderer().render_post_list())


@bp_pages.route("/blog/<post_id>")
@bp_pages.route("/post/<post_id>")
def post(post_id: str):
    return _html(get_renderer().render_post(post_id))


@bp_pages.route("/about/")
def about():
    return _html(get_renderer().render_about())


def handle_not_found(error: ContentNotFoundError):
    logger.warning("404: %s (%s)", request.path, error)
    return "404 page not found\n", 404, {"Content-Type": "text/plain; charset=utf-8"}


def handle_blog_error(error: BlogError):
    logger.error("500: %s %s failed: %s", request.method, request.path, error)
    settings: Settings = current_app.config["BLOG_SETTINGS"]
    if settings.expose_errors:
        body = f"500 internal server error\n{type(error).__name__}: {error}\n"
    else:
        body = "500 internal server error\n"
    return body, 500, {"Content-Type": "text/plain; charset=utf-8"}


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Application factory.

    Args:
        settings: Settings to use. Defaults to Settings.load().

    Returns:
        Configured Flask app.
    """
    settings = settings or Settings.load()
    set_log_level(settings.log_level)

    app = Flask(__name__)
    app.config["BLOG_SETTINGS"] = settings
    app.extensions[RENDERER_KEY] = build_renderer(settings)

    @app.before_request
    def start_timer():
        g.request_start_time = time.time()

    @app.after_request
    def log_request(response):
        started = g.get("request_start_time", time.time())
        request_logger.info(
            "%s %s %s %s %.3fs",
            request.method,
            request.path,
            response.status_code,
            request.remote_addr,
            time.time() - started,
        )
        return response

    app.register_error_handler(ContentNotFoundError, handle_not_found)
    app.register_error_handler(BlogError, handle_blog_error)
    app.register_blueprint(bp_pages)

    logger.info(
        "Serving content from %s (templates: %s, cache: %s, list policy: %s)",
        settings.content_root,
        settings.template_mode.value,
        settings.cache.backend,
        settings.list_failure_policy.value,
    )
    return app
