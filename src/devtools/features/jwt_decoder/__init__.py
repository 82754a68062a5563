"""JWT decoder and HMAC signature verifier tool."""

from src.devtools.features.jwt_decoder.handlers import api_router, router

__all__ = ["router", "api_router"]
