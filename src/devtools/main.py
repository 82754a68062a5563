"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.devtools.config import settings
from src.devtools.features.home import router as home_router
from src.devtools.features.jwt_decoder import api_router as jwt_api_router
from src.devtools.features.jwt_decoder import router as jwt_router
from src.devtools.features.uuid_generator import api_router as uuid_api_router
from src.devtools.features.uuid_generator import router as uuid_router
from src.devtools.logging_config import configure_logging
from src.devtools.services import limiter
from src.devtools.services.templates import TEMPLATES_DIR

logger = logging.getLogger(__name__)

STATIC_DIR = TEMPLATES_DIR.parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle (startup and shutdown)."""
    configure_logging(settings.log_level)
    logger.info(
        "DevTools started",
        extra={
            "api_prefix": settings.api_v1_prefix,
            "rate_limit_enabled": settings.rate_limit_enabled,
        },
    )

    yield

    logger.info("DevTools shutting down")


app = FastAPI(
    title=settings.app_name,
    description="Self-hosted developer utilities (JWT, UUID)",
    version="0.1.0",
    debug=settings.debug,
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

origins = settings.cors_origins.split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "HX-Request", "HX-Target", "HX-Current-URL"],
)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

app.include_router(home_router, tags=["home"])
app.include_router(uuid_router, prefix="/tools/uuid", tags=["uuid"])
app.include_router(jwt_router, prefix="/tools/jwt", tags=["jwt"])
app.include_router(
    uuid_api_router, prefix=f"{settings.api_v1_prefix}/tools/uuid", tags=["uuid-api"]
)
app.include_router(
    jwt_api_router, prefix=f"{settings.api_v1_prefix}/tools/jwt", tags=["jwt-api"]
)


class HealthCheckResponse(BaseModel):
    """Health check response."""

    status: str


@app.get("/health", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """Health check endpoint."""
    return HealthCheckResponse(status="healthy")


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run("src.devtools.main:app", host="0.0.0.0", port=8080, reload=settings.debug)
