"""Agent routing API routes."""

import logging
from typing import Any

from fastapi import APIRouter

from command_center.api.deps import Context
from command_center.core.routing import route_task
from command_center.models.ooda import RouteRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/agents", tags=["agents"])


@router.post("/route")
async def route(context: Context, data: RouteRequest | None = None) -> dict[str, Any]:
    """Select an agent and model tier for a task.

    The current OODA phase picks the base assignment. ``complexity`` of
    "high"/"low" overrides the model, ``domain`` of
    "intelligence"/"infrastructure" overrides the agent.
    """
    data = data or RouteRequest()
    decision = route_task(
        context.engine,
        task=data.task,
        complexity=data.complexity,
        domain=data.domain,
    )
    return decision.to_dict()
