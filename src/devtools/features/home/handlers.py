"""Handlers for the home page."""

from fastapi import APIRouter, Request
from starlette.responses import Response

from src.devtools.services import page_rate_limit, render_page

router = APIRouter()


@router.get("/")
@page_rate_limit
async def home(request: Request) -> Response:
    """Render the tool catalogue."""
    return render_page(request, "index.html", active_tool="home")
