"""Jinja2 template rendering and the shared tool catalogue."""

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# Navigation entries shown on every page. Only entries with a path are implemented.
TOOLS: list[dict[str, str | None]] = [
    {"id": "jwt", "name": "JWT Decoder", "icon": "key", "description": "Encode/Decode JWT tokens", "path": "/tools/jwt"},
    {"id": "uuid", "name": "UUID Generator", "icon": "fingerprint", "description": "Generate UUID v4/v7", "path": "/tools/uuid"},
    {"id": "base64", "name": "Base64", "icon": "code", "description": "Encode/Decode Base64", "path": None},
    {"id": "json2java", "name": "JSON to Java", "icon": "braces", "description": "Convert JSON to Java classes", "path": None},
    {"id": "cron", "name": "Cron Builder", "icon": "clock", "description": "Build and explain cron expressions", "path": None},
    {"id": "regex", "name": "Regex Tester", "icon": "search", "description": "Test regular expressions", "path": None},
    {"id": "timestamp", "name": "Timestamp", "icon": "calendar", "description": "Convert timestamps", "path": None},
    {"id": "hash", "name": "Hash Generator", "icon": "lock", "description": "Generate hashes and passwords", "path": None},
    {"id": "sql", "name": "SQL Formatter", "icon": "database", "description": "Format SQL queries", "path": None},
]


def render_page(
    request: Request,
    template_name: str,
    active_tool: str,
    page_title: str | None = None,
    **context: Any,
) -> Response:
    """
    Render a full page with the navigation catalogue.

    Args:
        request: Incoming request (required by Jinja2Templates)
        template_name: Template path relative to the templates directory
        active_tool: Catalogue id highlighted in the navigation
        page_title: Optional title shown in the header
        **context: Extra template variables

    Returns:
        HTML response
    """
    return templates.TemplateResponse(
        request,
        template_name,
        {"tools": TOOLS, "active_tool": active_tool, "page_title": page_title, **context},
    )


def render_fragment(request: Request, template_name: str, **context: Any) -> Response:
    """Render a partial template meant to be swapped into an existing page."""
    return templates.TemplateResponse(request, template_name, context)
