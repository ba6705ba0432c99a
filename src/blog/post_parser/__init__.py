# Post Parser Module
# Line-oriented post format -> Post records

from .models import DATE_FORMAT, LINE_BREAK, Post, PostSummary, format_date
from .parser import join_body, load_post, parse_date, parse_post, parse_tags, split_lines

__all__ = [
    "DATE_FORMAT",
    "LINE_BREAK",
    "Post",
    "PostSummary",
    "format_date",
    "join_body",
    "load_post",
    "parse_date",
    "parse_post",
    "parse_tags",
    "split_lines",
]
