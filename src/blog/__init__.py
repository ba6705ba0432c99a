# Blog: Content Pipeline
"""
Flat-file blog rendering:
- post_parser: line-oriented post format -> Post
- repository: post lookup, listing, ordering, post cache
- template_engine: Jinja2 page templates (reload or compile-once)
- renderer: two-stage page composition and index directives
- web: Flask HTTP shell and CLI
"""

__version__ = "0.1.0"
