"""API handlers for the UUID tool."""

from fastapi import APIRouter, Form, Request
from starlette.responses import Response

from src.devtools.features.common import ErrorResult, run_tool
from src.devtools.features.uuid_generator import service
from src.devtools.features.uuid_generator.schemas import GenerateResult, ParseResult
from src.devtools.services import page_rate_limit, render_fragment, render_page, tool_rate_limit

# HTML pages and htmx fragments
router = APIRouter()

# JSON API mirroring the fragment endpoints
api_router = APIRouter()


@router.get("")
@page_rate_limit
async def uuid_page(request: Request) -> Response:
    """Render the UUID generator page."""
    return render_page(request, "tools/uuid.html", active_tool="uuid", page_title="UUID Generator")


@router.post("/generate-v4")
@tool_rate_limit
async def generate_v4(request: Request, count: int = Form(1)) -> Response:
    """Generate random UUIDs and render the result fragment."""
    result = run_tool("generate UUID v4", service.generate_random, count)
    return render_fragment(request, "partials/uuid_result.html", result=result)


@router.post("/generate-v7")
@tool_rate_limit
async def generate_v7(request: Request, count: int = Form(1)) -> Response:
    """Generate time-ordered UUIDs and render the result fragment."""
    result = run_tool("generate UUID v7", service.generate_time_ordered, count)
    return render_fragment(request, "partials/uuid_result.html", result=result)


@router.post("/parse")
@tool_rate_limit
async def parse_uuid(request: Request, uuid: str = Form("")) -> Response:
    """Parse a UUID and render the parse fragment."""
    result = run_tool("parse UUID", service.parse, uuid)
    return render_fragment(request, "partials/uuid_parse_result.html", parse_result=result)


@api_router.post("/generate-v4", response_model=GenerateResult | ErrorResult)
@tool_rate_limit
async def api_generate_v4(request: Request, count: int = Form(1)) -> GenerateResult | ErrorResult:
    """
    Generate random (version 4) UUIDs.

    Args:
        count: Number of UUIDs to generate (default: 1, max: 100)

    Returns:
        GenerateResult on success, ErrorResult when count is out of range

    Examples:
        - One UUID: POST /api/v1/tools/uuid/generate-v4
        - Batch: POST /api/v1/tools/uuid/generate-v4 with count=10
    """
    return run_tool("generate UUID v4", service.generate_random, count)


@api_router.post("/generate-v7", response_model=GenerateResult | ErrorResult)
@tool_rate_limit
async def api_generate_v7(request: Request, count: int = Form(1)) -> GenerateResult | ErrorResult:
    """Generate time-ordered (version 7) UUIDs."""
    return run_tool("generate UUID v7", service.generate_time_ordered, count)


@api_router.post("/parse", response_model=ParseResult | ErrorResult)
@tool_rate_limit
async def api_parse_uuid(request: Request, uuid: str = Form("")) -> ParseResult | ErrorResult:
    """Parse a UUID string into its version, variant and bit fields."""
    return run_tool("parse UUID", service.parse, uuid)
