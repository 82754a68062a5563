"""Error and result types shared by the tool features."""

from src.devtools.features.common.exceptions import (
    DecodeError,
    FormatError,
    ToolError,
    UnsupportedAlgorithmError,
    ValidationError,
)
from src.devtools.features.common.results import ErrorResult, ToolResult, run_tool

__all__ = [
    "ToolError",
    "ValidationError",
    "FormatError",
    "DecodeError",
    "UnsupportedAlgorithmError",
    "ToolResult",
    "ErrorResult",
    "run_tool",
]
