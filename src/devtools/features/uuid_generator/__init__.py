"""UUID generator and parser tool."""

from src.devtools.features.uuid_generator.handlers import api_router, router

__all__ = ["router", "api_router"]
