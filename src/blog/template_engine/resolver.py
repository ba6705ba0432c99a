"""
Template Resolver for blog pages.
Handles Jinja2 template loading, compilation and rendering.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    Template,
    TemplateNotFound,
    TemplateSyntaxError,
    select_autoescape,
)
from jinja2 import TemplateError as JinjaTemplateError

from src.common.config import TemplateMode
from src.common.errors import TemplateError
from src.common.logging import setup_logging

logger = setup_logging(module_name="blog.templates")

# Logical template name -> file in the templates directory
TEMPLATE_FILES: dict[str, str] = {
    "base": "_base.html",
    "post": "blog_post.html",
    "list": "blog_list.html",
}


class TemplateResolver:
    """
    Loads and compiles page templates from a directory.

    In RELOAD mode every call re-reads and re-compiles the file, so templates
    can be edited without restarting. In COMPILE_ONCE mode a template is
    compiled on first use and reused afterwards.

    Usage:
        resolver = TemplateResolver(Path("content/templates"))
        html = resolver.render("post", {"title": "Hi", ...})
    """

    def __init__(self, templates_dir: Path, mode: TemplateMode = TemplateMode.RELOAD):
        """
        Initialize the template resolver.

        Args:
            templates_dir: Directory holding the template files.
            mode: Compilation strategy.
        """
        self.templates_dir = templates_dir
        self.mode = TemplateMode(mode)
        reload = self.mode is TemplateMode.RELOAD
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml"], default_for_string=True),
            trim_blocks=True,
            lstrip_blocks=True,
            cache_size=0 if reload else 400,
            auto_reload=False,
        )

    def get(self, name: str) -> Template:
        """
        Load and compile a template.

        Args:
            name: Logical name ("base", "post", "list") or a file name.

        Returns:
            Compiled template

        Raises:
            TemplateError: If the file is missing or does not compile.
        """
        filename = TEMPLATE_FILES.get(name, name)
        try:
            template = self.env.get_template(filename)
        except TemplateNotFound as e:
            raise TemplateError(name, f"{filename} not found in {self.templates_dir}") from e
        except TemplateSyntaxError as e:
            raise TemplateError(name, f"syntax error at line {e.lineno}: {e.message}") from e
        except OSError as e:
            raise TemplateError(name, f"cannot read {filename}: {e}") from e
        logger.debug("Loaded template %s (%s)", name, self.mode.value)
        return template

    def from_source(self, name: str, source: str) -> Template:
        """
        Compile a template from text that does not live in the templates directory.

        Raises:
            TemplateError: If the source does not compile.
        """
        try:
            return self.env.from_string(source)
        except TemplateSyntaxError as e:
            raise TemplateError(name, f"syntax error at line {e.lineno}: {e.message}") from e

    def render_template(self, template: Template, name: str, context: dict[str, Any]) -> str:
        """
        Execute a compiled template.

        Raises:
            TemplateError: If execution fails.
        """
        try:
            return template.render(**context)
        except (JinjaTemplateError, TypeError, ValueError) as e:
            raise TemplateError(name, f"render failed: {e}") from e

    def render(self, name: str, context: dict[str, Any]) -> str:
        """
        Load a template by name and render it.

        Args:
            name: Logical template name
            context: Template variables

        Returns:
            Rendered HTML string
        """
        return self.render_template(self.get(name), name, context)

    def preload(self) -> None:
        """Compile every standard template so a broken one fails at startup."""
        for name in TEMPLATE_FILES:
            self.get(name)
        logger.info("Preloaded %d templates from %s", len(TEMPLATE_FILES), self.templates_dir)
