"""OODA loop API routes.

This module provides endpoints for:
- Reading the cycle state
- Advancing to the next phase
- Resetting the loop
- Setting the operational tempo
"""

import logging
from typing import Any

from fastapi import APIRouter

from command_center.api.deps import Context
from command_center.models.ooda import AdvanceRequest, TempoUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ooda", tags=["ooda"])


@router.get("/state")
async def get_state(context: Context) -> dict[str, Any]:
    """Get the current phase, cycle count, tempo and history."""
    return context.engine.get_state().to_dict()


@router.post("/advance")
async def advance(context: Context, data: AdvanceRequest | None = None) -> dict[str, Any]:
    """Complete the current phase and move to the next one.

    The optional ``data`` payload is stored with the completed phase in
    the history.
    """
    payload = data.data if data else None
    return context.engine.advance(payload).to_dict()


@router.post("/reset")
async def reset(context: Context) -> dict[str, Any]:
    """Reset phase, cycle count and history. Tempo is kept."""
    state = context.engine.reset()
    return {"status": "reset", "state": state.to_dict()}


@router.put("/tempo")
async def set_tempo(data: TempoUpdate, context: Context) -> dict[str, str]:
    """Set the operational tempo (strategic, operational or tactical)."""
    tempo = context.engine.set_tempo(data.tempo)
    return {"tempo": tempo.value}
