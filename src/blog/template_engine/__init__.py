# Template Engine Module
# Jinja2 page templates (base shell, post, post list, index)

from .models import BasePage, IndexPage, PostListPage, PostPage
from .resolver import TEMPLATE_FILES, TemplateResolver

__all__ = [
    "TEMPLATE_FILES",
    "TemplateResolver",
    "BasePage",
    "IndexPage",
    "PostListPage",
    "PostPage",
]
