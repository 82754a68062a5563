"""Custom exceptions raised by tool services."""


class ToolError(Exception):
    """Base exception for all expected tool failures."""

    kind = "tool_error"


class ValidationError(ToolError):
    """Raised when an input parameter is outside its accepted range."""

    kind = "validation_error"


class FormatError(ToolError):
    """Raised when textual input does not have the required shape."""

    kind = "format_error"


class DecodeError(ToolError):
    """Raised when Base64URL or JSON content cannot be decoded."""

    kind = "decode_error"


class UnsupportedAlgorithmError(ToolError):
    """Raised when a token declares an algorithm that cannot be verified."""

    kind = "unsupported_algorithm"
