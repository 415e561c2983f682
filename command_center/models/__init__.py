"""Models package for the command center API."""

from command_center.models.mission import MissionCreate, RecordPatch
from command_center.models.ooda import (
    AdvanceRequest,
    PipelineTriggerRequest,
    RouteRequest,
    TempoUpdate,
)

__all__ = [
    "AdvanceRequest",
    "MissionCreate",
    "PipelineTriggerRequest",
    "RecordPatch",
    "RouteRequest",
    "TempoUpdate",
]
