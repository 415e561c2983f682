"""Swarm model and cloud status API routes."""

from typing import Any

from fastapi import APIRouter

from command_center.api.deps import Context
from command_center.core.catalog import swarm_models, swarm_tier

router = APIRouter(tags=["swarm"])


@router.get("/swarm/models")
async def list_models() -> dict[str, list[dict[str, str]]]:
    """Get every swarm model tier."""
    return swarm_models()


@router.get("/swarm/models/{tier}")
async def get_tier(tier: str) -> list[dict[str, str]]:
    """Get the models of one tier (t1_fast, t2_power or t3_deep)."""
    return swarm_tier(tier)


@router.get("/cloud/status")
async def cloud_status(context: Context) -> dict[str, dict[str, Any]]:
    """Get the last known status of each cloud connection."""
    return {name: conn.to_dict() for name, conn in context.cloud.items()}
