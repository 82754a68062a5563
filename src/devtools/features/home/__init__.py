"""Home page listing the available tools."""

from src.devtools.features.home.handlers import router

__all__ = ["router"]
