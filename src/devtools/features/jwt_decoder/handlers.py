"""API handlers for the JWT tool."""

from fastapi import APIRouter, Form, Request
from starlette.responses import Response

from src.devtools.features.common import ErrorResult, run_tool
from src.devtools.features.jwt_decoder import service
from src.devtools.features.jwt_decoder.schemas import DecodeResult, VerifyResult
from src.devtools.services import page_rate_limit, render_fragment, render_page, tool_rate_limit

router = APIRouter()
api_router = APIRouter()


@router.get("")
@page_rate_limit
async def jwt_page(request: Request) -> Response:
    """Render the JWT decoder page."""
    return render_page(request, "tools/jwt.html", active_tool="jwt", page_title="JWT Decoder")


@router.post("/decode")
@tool_rate_limit
async def decode_jwt(request: Request, token: str = Form("")) -> Response:
    """Decode a token and render the result fragment."""
    result = run_tool("decode JWT", service.decode, token)
    return render_fragment(request, "partials/jwt_result.html", result=result, token=token)


@router.post("/verify")
@tool_rate_limit
async def verify_jwt(
    request: Request,
    token: str = Form(""),
    secret: str = Form(""),
) -> Response:
    """Verify a token signature and render the verification fragment."""
    verify_result = run_tool("verify JWT", service.verify, token, secret)
    return render_fragment(request, "partials/jwt_verify_result.html", verify_result=verify_result)


@api_router.post("/decode", response_model=DecodeResult | ErrorResult)
@tool_rate_limit
async def api_decode_jwt(request: Request, token: str = Form("")) -> DecodeResult | ErrorResult:
    """
    Decode a JWT without verifying it.

    Args:
        token: Compact JWT (2 or 3 dot-separated segments)

    Returns:
        DecodeResult with pretty-printed header and payload, or ErrorResult
    """
    return run_tool("decode JWT", service.decode, token)


@api_router.post("/verify", response_model=VerifyResult | ErrorResult)
@tool_rate_limit
async def api_verify_jwt(
    request: Request,
    token: str = Form(""),
    secret: str = Form(""),
) -> VerifyResult | ErrorResult:
    """
    Verify an HS256/HS384/HS512 signature with a shared secret.

    The algorithm comes from the token header. Expiration is not checked.

    Args:
        token: Compact JWT with 3 segments
        secret: Shared HMAC secret

    Returns:
        VerifyResult with valid flag and algorithm, or ErrorResult
    """
    return run_tool("verify JWT", service.verify, token, secret)
