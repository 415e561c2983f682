"""Static reference data for the command center.

Task forces, domain rosters, cross-domain synergy, swarm model tiers and
service info. Nothing here changes at runtime; callers that need to modify
a value must copy it first (the accessors below return copies).
"""

import copy
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from command_center.core.exceptions import ModelTierNotFoundError

VERSION = "2.0.0"
SERVICE_NAME = "MDO Command Center"
DOCTRINE = "multi-domain-operations"

DEFAULT_TASK_FORCE = "alpha_feature"
DEFAULT_DOMAIN = "code"

DEFAULT_ELICE_URL = "http://localhost:8100"
DEFAULT_REPLIT_URL = "https://replit.com"


@dataclass(frozen=True)
class TaskForce:
    """Commander and agent roster for one mission type."""

    commander: str
    agents: tuple[str, ...]
    mission_type: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "commander": self.commander,
            "agents": list(self.agents),
            "mission_type": self.mission_type,
        }


TASK_FORCES: dict[str, TaskForce] = {
    "alpha_feature": TaskForce(
        commander="architect",
        agents=("planner", "executor", "test-engineer", "verifier"),
        mission_type="deliberate_attack",
    ),
    "bravo_incident": TaskForce(
        commander="debugger",
        agents=("explore", "build-fixer", "executor", "qa-tester"),
        mission_type="hasty_defense",
    ),
    "charlie_knowledge": TaskForce(
        commander="scientist",
        agents=("document-specialist", "explore", "writer"),
        mission_type="intelligence_prep",
    ),
    "delta_security": TaskForce(
        commander="security-reviewer",
        agents=("debugger", "qa-tester", "code-reviewer"),
        mission_type="area_defense",
    ),
    "echo_platform": TaskForce(
        commander="build-fixer",
        agents=("executor", "verifier"),
        mission_type="stability_ops",
    ),
}

# Initial worker rosters for the fixed operational domains
DOMAIN_AGENTS: dict[str, tuple[str, ...]] = {
    "code": ("executor", "build-fixer", "test-engineer"),
    "orchestration": ("architect", "planner", "analyst", "critic"),
    "data_knowledge": ("scientist", "document-specialist", "explore"),
    "infrastructure": ("devops", "dagu", "docker"),
    "intelligence": ("security-reviewer", "debugger", "qa-tester"),
}

CROSS_DOMAIN_SYNERGY: dict[str, str] = {
    "code_to_data": "Store patterns after implementation",
    "data_to_code": "Enrich context with RAG before coding",
    "intel_to_code": "Security scan triggers vulnerability fix",
    "orch_to_infra": "Scale decisions trigger resource allocation",
    "infra_to_orch": "Health status adjusts operational tempo",
}


@dataclass(frozen=True)
class SwarmModel:
    """A model available to the swarm."""

    id: str
    provider: str
    latency: str
    status: str = "active"

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "provider": self.provider,
            "latency": self.latency,
            "status": self.status,
        }


SWARM_MODELS: dict[str, tuple[SwarmModel, ...]] = {
    "t1_fast": (
        SwarmModel("swarm/gemini-flash", "Google", "3s"),
        SwarmModel("swarm/gemini3-flash", "Google", "3s"),
        SwarmModel("openrouter/qwen3-coder", "Alibaba", "5s"),
        SwarmModel("openrouter/mistral-small", "Mistral", "9s"),
        SwarmModel("openrouter/minimax-m2.5", "MiniMax", "10s"),
    ),
    "t2_power": (
        SwarmModel("swarm/deepseek-v3", "DeepSeek", "5s"),
        SwarmModel("openrouter/gemini-3-pro", "Google", "7s"),
        SwarmModel("openrouter/claude-haiku", "Anthropic", "5s"),
        SwarmModel("swarm/qwen3-235b-free", "Alibaba", "14s"),
    ),
    "t3_deep": (SwarmModel("openrouter/deepseek-r1", "DeepSeek", "21s"),),
}

SERVICE_INFO: dict[str, Any] = {
    "name": SERVICE_NAME,
    "version": VERSION,
    "architecture": "OODA Loop + Multi-Domain Operations",
    "platforms": ["web", "android-pwa", "desktop"],
    "deployment": {
        "frontend": "GitHub Pages (hugefisco94.github.io/ai-orchestration-hub)",
        "backend": "Replit",
        "cicd": "Harness.io",
        "cloud": "Elice Cloud (A100 GPU)",
    },
    "github": "https://github.com/hugefisco94/ai-orchestration-hub",
    "harness": "https://app.harness.io",
}


def get_task_force(key: str) -> TaskForce | None:
    """Look up a task force, returning None for unrecognized keys."""
    return TASK_FORCES.get(key)


def mdo_config() -> dict[str, Any]:
    """Return the multi-domain operations configuration document."""
    return {
        "version": VERSION,
        "doctrine": DOCTRINE,
        "task_forces": {key: tf.to_dict() for key, tf in TASK_FORCES.items()},
        "cross_domain_synergy": dict(CROSS_DOMAIN_SYNERGY),
    }


def swarm_models() -> dict[str, list[dict[str, str]]]:
    """Return every swarm model tier."""
    return {tier: [m.to_dict() for m in models] for tier, models in SWARM_MODELS.items()}


def swarm_tier(tier: str) -> list[dict[str, str]]:
    """Return the models of one swarm tier.

    Raises:
        ModelTierNotFoundError: If ``tier`` is not a known tier.
    """
    models = SWARM_MODELS.get(tier)
    if models is None:
        raise ModelTierNotFoundError(tier, list(SWARM_MODELS))
    return [m.to_dict() for m in models]


def service_info() -> dict[str, Any]:
    """Return descriptive info about the deployment."""
    return copy.deepcopy(SERVICE_INFO)


@dataclass
class CloudConnection:
    """Last known status of a cloud endpoint."""

    status: str
    url: str
    last_check: datetime | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "url": self.url,
            "last_check": self.last_check.isoformat() if self.last_check else None,
        }


def build_cloud_status(
    elice_url: str = DEFAULT_ELICE_URL, replit_url: str = DEFAULT_REPLIT_URL
) -> dict[str, CloudConnection]:
    """Build the initial cloud connection table."""
    now = datetime.now(UTC)
    return {
        "elice": CloudConnection(status="unknown", url=elice_url),
        "harness": CloudConnection(status="unknown", url="https://app.harness.io"),
        "replit": CloudConnection(status="active", url=replit_url, last_check=now),
        "github": CloudConnection(
            status="active", url="https://github.com/hugefisco94", last_check=now
        ),
    }
