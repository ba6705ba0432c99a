"""CLI entry point for the blog server.

Usage:
    python -m src.blog.web.main serve
    python -m src.blog.web.main serve --host 0.0.0.0 --port 8080 --content-dir ./content
    python -m src.blog.web.main render index
    python -m src.blog.web.main render post --id hello-world
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from src.common.config import Settings, TemplateMode
from src.common.errors import BlogError
from src.common.logging import set_log_level, setup_logging

from .app import build_renderer, create_app

logger = setup_logging(module_name="blog.main")

PAGES = ("index", "list", "about", "post")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Flat-file blog server")
    parser.add_argument(
        "--config",
        type=Path,
        help="Settings YAML file (default: config/settings.yaml)",
    )
    parser.add_argument(
        "--content-dir",
        type=Path,
        help="Content directory holding blog/, templates/, index.html, about.html, style.css",
    )
    parser.add_argument(
        "--template-mode",
        choices=[m.value for m in TemplateMode],
        help="reload templates on every request, or compile them once",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP server")
    serve.add_argument("--host", type=str, help="Bind address")
    serve.add_argument("--port", type=int, help="Bind port")
    serve.add_argument("--debug", action="store_true", help="Flask debug mode")

    render = subparsers.add_parser("render", help="Render one page to stdout")
    render.add_argument("page", choices=PAGES)
    render.add_argument("--id", dest="post_id", help="Post id (required for 'post')")

    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Settings from file/env, then command-line overrides."""
    settings = Settings.load(args.config)
    updates: dict = {}
    if args.content_dir:
        updates["content_dir"] = args.content_dir
    if args.template_mode:
        updates["template_mode"] = TemplateMode(args.template_mode)
    server_updates: dict = {}
    if getattr(args, "host", None):
        server_updates["host"] = args.host
    if getattr(args, "port", None):
        server_updates["port"] = args.port
    if getattr(args, "debug", False):
        server_updates["debug"] = True
    if server_updates:
        updates["server"] = settings.server.model_copy(update=server_updates)
    return settings.model_copy(update=updates)


def render_page(settings: Settings, page: str, post_id: Optional[str] = None) -> str:
    renderer = build_renderer(settings)
    if page == "index":
        return renderer.render_index()
    if page == "list":
        return renderer.render_post_list()
    if page == "about":
        return renderer.render_about()
    return renderer.render_post(post_id or "")


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = load_settings(args)
    set_log_level(settings.log_level)

    if args.command == "render":
        if args.page == "post" and not args.post_id:
            parser.error("--id is required when rendering a post")
        try:
            html = render_page(settings, args.page, args.post_id)
        except BlogError as e:
            logger.error("Render failed: %s", e)
            return 1
        sys.stdout.write(html)
        return 0

    app = create_app(settings)
    logger.info("Starting HTTP server on %s:%d", settings.server.host, settings.server.port)
    app.run(
        host=settings.server.host,
        port=settings.server.port,
        debug=settings.server.debug,
        threaded=True,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
