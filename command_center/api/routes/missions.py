"""Mission API routes."""

import logging
from typing import Any

from fastapi import APIRouter, status

from command_center.api.deps import Context
from command_center.models.mission import MissionCreate, RecordPatch

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/missions", tags=["missions"])


@router.get("")
async def list_missions(context: Context) -> list[dict[str, Any]]:
    """List missions in creation order."""
    return context.missions.list()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_mission(data: MissionCreate, context: Context) -> dict[str, Any]:
    """Create a mission for a task force.

    Missions start in "planning" status at the observe phase, with the
    task force's agent roster.
    """
    return context.missions.create(
        task_force=data.task_force,
        intent=data.intent,
        domains=data.domains,
    )


@router.get("/{mission_id}")
async def get_mission(mission_id: str, context: Context) -> dict[str, Any]:
    """Get a single mission."""
    return context.missions.get(mission_id)


@router.put("/{mission_id}")
async def update_mission(mission_id: str, data: RecordPatch, context: Context) -> dict[str, Any]:
    """Merge the submitted fields into a mission."""
    return context.missions.patch(mission_id, data.updates())
