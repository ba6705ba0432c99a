# Web Module
# Flask HTTP shell and CLI around the page renderer

from .app import bp_pages, build_renderer, create_app

__all__ = ["bp_pages", "build_renderer", "create_app"]
