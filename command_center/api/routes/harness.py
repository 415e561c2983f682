"""Harness pipeline trigger route."""

import logging
from typing import Any

from fastapi import APIRouter

from command_center.api.deps import Harness
from command_center.models.ooda import PipelineTriggerRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/harness", tags=["harness"])


@router.post("/trigger")
async def trigger_pipeline(
    client: Harness, data: PipelineTriggerRequest | None = None
) -> dict[str, Any]:
    """Trigger a Harness pipeline.

    Returns a simulated execution when HARNESS_PAT is not configured.
    Harness failures return 502.
    """
    pipeline_id = data.pipeline_id if data else None
    return await client.trigger_pipeline(pipeline_id)
