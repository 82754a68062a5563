"""Result models for the UUID tool."""

from typing import Literal

from pydantic import Field

from src.devtools.features.common import ToolResult


class GenerateResult(ToolResult):
    """Batch of generated UUIDs."""

    success: Literal[True] = True
    uuids: list[str]
    count: int
    version: Literal["4", "7"]
    description: str
    timestamp: str | None = Field(None, description="ISO-8601 generation instant (v7 only)")


class ParseResult(ToolResult):
    """Fields extracted from a UUID string."""

    success: Literal[True] = True
    uuid: str
    version: int
    variant: int = Field(description="0 = NCS, 2 = RFC 4122/9562, 6 = Microsoft, 7 = reserved")
    type: str
    most_sig_bits: str
    least_sig_bits: str
    timestamp: int | None = Field(
        None, description="60-bit count of 100ns intervals since 1582-10-15 (v1 only)"
    )
    timestamp_formatted: str | None = None
