"""MDO Command Center API - Main FastAPI Application."""

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from command_center.api.routes import agents, harness, health, mdo, missions, ooda, swarm
from command_center.core.catalog import SERVICE_NAME, VERSION
from command_center.core.config import get_settings
from command_center.core.exceptions import CommandCenterException, sanitize_error
from command_center.middleware.performance import RequestIDMiddleware, RequestTimingMiddleware


# Configure logging: JSON for production, text for dev
def _configure_logging() -> None:
    """Set up logging based on LOG_FORMAT / LOG_LEVEL settings.

    json: Structured JSON via python-json-logger.
    text: Human-readable format (for local development).
    """
    settings = get_settings()
    log_level = settings.LOG_LEVEL.upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level, logging.INFO))

    # Remove existing handlers to avoid duplicate output
    root_logger.handlers.clear()

    handler = logging.StreamHandler()

    if settings.LOG_FORMAT == "json":
        from pythonjsonlogger.json import JsonFormatter

        formatter = JsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={
                "asctime": "timestamp",
                "levelname": "level",
                "name": "service",
            },
            static_fields={"app": "mdo-command-center"},
        )
        handler.setFormatter(formatter)
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root_logger.addHandler(handler)


_configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> Any:
    """Application lifespan handler for startup and shutdown events."""
    from command_center.core.context import get_context

    settings = get_settings()
    logger.info("Starting %s API v%s (%s)", SERVICE_NAME, VERSION, settings.APP_ENV)
    context = get_context()
    logger.info(
        "OODA loop ready: phase=%s tempo=%s",
        context.engine.current_phase.value,
        context.engine.tempo.value,
    )
    if settings.harness_configured:
        logger.info("HARNESS_PAT configured - pipeline triggers enabled")
    else:
        logger.warning("HARNESS_PAT not configured - pipeline triggers are SIMULATED")
    yield
    logger.info("Shutting down %s API...", SERVICE_NAME)


app = FastAPI(
    title=f"{SERVICE_NAME} API",
    description="OODA loop state machine, multi-domain agent routing and mission tracking",
    version=VERSION,
    lifespan=lifespan,
)

CORS_ORIGINS = get_settings().cors_origins_list
logger.info("CORS allowed origins: %s", CORS_ORIGINS)

# In Starlette, last-added = outermost, so add timing first, then ID.
app.add_middleware(RequestTimingMiddleware)
app.add_middleware(RequestIDMiddleware)

# CORS added last so it is outermost (handles preflight first)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(agents.router, prefix="/api/v1")
app.include_router(harness.router, prefix="/api/v1")
app.include_router(health.router, prefix="/api/v1")
app.include_router(mdo.router, prefix="/api/v1")
app.include_router(missions.router, prefix="/api/v1")
app.include_router(ooda.router, prefix="/api/v1")
app.include_router(swarm.router, prefix="/api/v1")


@app.get("/health", tags=["system"])
async def root_health_check() -> dict[str, str]:
    """Root health check endpoint.

    Lightweight check, returns 200 if the process is running.
    For service details, use /api/v1/health.
    """
    return {"status": "healthy"}


@app.get("/", tags=["system"])
async def root() -> dict[str, str]:
    """Root endpoint with API information."""
    return {
        "name": f"{SERVICE_NAME} API",
        "version": VERSION,
        "description": "OODA Loop + Multi-Domain Operations",
    }


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or str(uuid.uuid4())


@app.exception_handler(CommandCenterException)
async def command_center_exception_handler(
    request: Request, exc: CommandCenterException
) -> JSONResponse:
    """Handle command center exceptions.

    Args:
        request: The incoming request.
        exc: The command center exception.

    Returns:
        JSON error response with consistent format.
    """
    request_id = _request_id(request)
    logger.warning(
        "Command center exception occurred",
        extra={
            "code": exc.code,
            "status_code": exc.status_code,
            "request_id": request_id,
            "path": request.url.path,
        },
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.message,
            "code": exc.code,
            "request_id": request_id,
        },
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI request validation errors (body parsing and typing)."""
    request_id = _request_id(request)
    logger.warning(
        "Request validation error",
        extra={
            "request_id": request_id,
            "path": request.url.path,
            "method": request.method,
            "error_count": len(exc.errors()),
        },
    )
    return JSONResponse(
        status_code=400,
        content={
            "detail": "Request validation error",
            "code": "REQUEST_VALIDATION_ERROR",
            "request_id": request_id,
            "errors": jsonable_errors(exc),
        },
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Strip non-serializable context from validation errors."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unhandled exceptions globally."""
    request_id = _request_id(request)
    logger.exception(
        "Unhandled exception occurred",
        exc_info=exc,
        extra={
            "request_id": request_id,
            "path": request.url.path,
        },
    )
    return JSONResponse(
        status_code=500,
        content={
            "detail": sanitize_error(exc),
            "code": "INTERNAL_ERROR",
            "request_id": request_id,
        },
    )
