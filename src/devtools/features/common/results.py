"""Discriminated result types shared by all tools."""

import logging
from typing import Callable, Literal, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.devtools.features.common.exceptions import ToolError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="ToolResult")


class ToolResult(BaseModel):
    """Base for every result; serialises with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResult(ToolResult):
    """Failed tool invocation."""

    success: Literal[False] = False
    valid: Literal[False] = False
    kind: str
    error: str


def run_tool(operation: str, func: Callable[..., T], *args, **kwargs) -> T | ErrorResult:
    """
    Run a tool service call and capture any failure into an ErrorResult.

    Expected failures (ToolError subclasses) keep their message and kind.
    Anything else is reported as an unexpected error prefixed with the
    operation name.

    Args:
        operation: Human-readable operation name, e.g. "generate UUID v4"
        func: Service callable returning a ToolResult
        *args: Positional arguments for func
        **kwargs: Keyword arguments for func

    Returns:
        The service result, or an ErrorResult describing the failure
    """
    try:
        return func(*args, **kwargs)
    except ToolError as e:
        logger.warning(
            f"{operation} rejected: {e}",
            extra={"error_type": e.kind, "operation": operation},
        )
        return ErrorResult(kind=e.kind, error=str(e))
    except Exception as e:
        logger.error(
            f"Unexpected error during {operation}: {e}",
            exc_info=True,
            extra={"error_type": "unexpected_error", "operation": operation},
        )
        return ErrorResult(kind="unexpected_error", error=f"Failed to {operation}: {e}")
