"""Core state machine, registries and routing policy."""

from command_center.core.context import CommandContext, get_context
from command_center.core.domains import DomainRegistry
from command_center.core.missions import MissionRegistry
from command_center.core.ooda import (
    CycleState,
    OODAPhase,
    PhaseEngine,
    PhaseRecord,
    PhaseTransition,
    Tempo,
)
from command_center.core.routing import RouteDecision, route_task, select_route

__all__ = [
    "CommandContext",
    "get_context",
    "DomainRegistry",
    "MissionRegistry",
    "CycleState",
    "OODAPhase",
    "PhaseEngine",
    "PhaseRecord",
    "PhaseTransition",
    "Tempo",
    "RouteDecision",
    "route_task",
    "select_route",
]
