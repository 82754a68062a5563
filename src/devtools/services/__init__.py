"""Shared services used by the tool features."""

from src.devtools.services.rate_limiter import limiter, page_rate_limit, tool_rate_limit
from src.devtools.services.templates import TOOLS, render_fragment, render_page, templates

__all__ = [
    "limiter",
    "page_rate_limit",
    "tool_rate_limit",
    "TOOLS",
    "render_fragment",
    "render_page",
    "templates",
]
