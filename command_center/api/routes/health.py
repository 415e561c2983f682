"""Health check and service info API routes.

Provides:
- GET /health: service status, version and uptime
- GET /info: descriptive deployment info
"""

import time
from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, status

from command_center.core.catalog import SERVICE_NAME, VERSION, service_info
from command_center.integrations.harness import harness_circuit_breaker

router = APIRouter(tags=["health"])

_start_time = time.monotonic()


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, Any]:
    """Overall health with uptime and the pipeline trigger's circuit state."""
    return {
        "status": "operational",
        "service": f"{SERVICE_NAME} API",
        "version": VERSION,
        "uptime_seconds": round(time.monotonic() - _start_time, 1),
        "timestamp": datetime.now(UTC).isoformat(),
        "circuit_breakers": {"harness": harness_circuit_breaker.to_dict()},
    }


@router.get("/info")
async def info() -> dict[str, Any]:
    """Descriptive info about the service and its deployment."""
    return service_info()
