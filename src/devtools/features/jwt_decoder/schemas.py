"""Result models for the JWT tool."""

from typing import Literal

from src.devtools.features.common import ToolResult


class DecodeResult(ToolResult):
    """Decoded JWT header and payload with claim annotations."""

    success: Literal[True] = True
    header: str  # Pretty-printed JSON
    header_raw: str
    payload: str  # Pretty-printed JSON
    payload_raw: str
    has_signature: bool
    signature: str | None = None
    is_expired: bool | None = None
    exp_formatted: str | None = None
    iat_formatted: str | None = None
    nbf_formatted: str | None = None


class VerifyResult(ToolResult):
    """Outcome of an HMAC signature check."""

    success: Literal[True] = True
    valid: bool
    algorithm: str
    message: str
