"""Phase-driven agent routing.

Selects a worker and a model tier for a task. The current OODA phase
supplies the base assignment; a complexity hint can then override the
model and a domain hint can override the agent. The two overrides touch
different fields, so they never conflict.

Routing is advisory: nothing is dispatched.
"""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from command_center.core.catalog import DEFAULT_DOMAIN
from command_center.core.ooda import OODAPhase, PhaseEngine

logger = logging.getLogger(__name__)

UNSPECIFIED_TASK = "unspecified"

# Base (agent, model) assignment per phase
PHASE_ASSIGNMENTS: dict[OODAPhase, tuple[str, str]] = {
    OODAPhase.OBSERVE: ("explore", "haiku"),
    OODAPhase.ORIENT: ("analyst", "opus"),
    OODAPhase.DECIDE: ("planner", "opus"),
    OODAPhase.ACT: ("executor", "sonnet"),
}

COMPLEXITY_OVERRIDES: dict[str, str] = {
    "high": "opus",
    "low": "haiku",
}

DOMAIN_OVERRIDES: dict[str, str] = {
    "intelligence": "security-reviewer",
    "infrastructure": "build-fixer",
}


@dataclass
class RouteDecision:
    """Worker and model tier selected for a task."""

    agent: str
    model: str
    ooda_phase: OODAPhase
    domain: str
    task: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation suitable for JSON.
        """
        return {
            "agent": self.agent,
            "model": self.model,
            "ooda_phase": self.ooda_phase.value,
            "domain": self.domain,
            "task": self.task,
            "timestamp": self.timestamp.isoformat(),
        }


def select_route(
    phase: OODAPhase,
    task: str | None = None,
    complexity: str | None = None,
    domain: str | None = None,
) -> RouteDecision:
    """Pick an agent and model for a task in the given phase.

    Order is fixed: phase base, then complexity (model only), then domain
    (agent only). Unrecognized hints are ignored.

    Args:
        phase: OODA phase the task is routed in.
        task: Task label, echoed back.
        complexity: "high" or "low" to force the model tier.
        domain: "intelligence" or "infrastructure" to force the agent.

    Returns:
        The routing decision.
    """
    agent, model = PHASE_ASSIGNMENTS[phase]

    if complexity == "high":
        model = COMPLEXITY_OVERRIDES["high"]
    if complexity == "low":
        model = COMPLEXITY_OVERRIDES["low"]

    if domain == "intelligence":
        agent = DOMAIN_OVERRIDES["intelligence"]
    if domain == "infrastructure":
        agent = DOMAIN_OVERRIDES["infrastructure"]

    return RouteDecision(
        agent=agent,
        model=model,
        ooda_phase=phase,
        domain=domain or DEFAULT_DOMAIN,
        task=task or UNSPECIFIED_TASK,
    )


def route_task(
    engine: PhaseEngine,
    task: str | None = None,
    complexity: str | None = None,
    domain: str | None = None,
) -> RouteDecision:
    """Route a task using the engine's live phase."""
    decision = select_route(engine.current_phase, task=task, complexity=complexity, domain=domain)
    logger.info(
        "Task routed",
        extra={
            "agent": decision.agent,
            "model": decision.model,
            "ooda_phase": decision.ooda_phase.value,
            "task": decision.task,
        },
    )
    return decision
