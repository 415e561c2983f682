"""Command context: one instance of every state store.

Operations receive the context they act on instead of reaching for module
globals, so tests (or several command centers in one process) can each
hold an independent set of stores. The HTTP layer shares a single
process-wide context through ``get_context``.
"""

import logging
from dataclasses import dataclass, field

from command_center.core.catalog import CloudConnection, build_cloud_status
from command_center.core.config import Settings, get_settings
from command_center.core.domains import DomainRegistry
from command_center.core.missions import MissionRegistry
from command_center.core.ooda import PhaseEngine

logger = logging.getLogger(__name__)


@dataclass
class CommandContext:
    """State stores owned by one command center."""

    engine: PhaseEngine = field(default_factory=PhaseEngine)
    domains: DomainRegistry = field(default_factory=DomainRegistry)
    missions: MissionRegistry = field(default_factory=MissionRegistry)
    cloud: dict[str, CloudConnection] = field(default_factory=build_cloud_status)

    @classmethod
    def from_settings(cls, settings: Settings) -> "CommandContext":
        """Build a context configured from application settings."""
        return cls(
            engine=PhaseEngine(history_limit=settings.history_limit),
            cloud=build_cloud_status(settings.ELICE_URL, settings.REPLIT_URL),
        )


_context: CommandContext | None = None


def get_context() -> CommandContext:
    """Get or create the process-wide command context.

    Returns:
        The shared CommandContext instance
    """
    global _context
    if _context is None:
        settings = get_settings()
        _context = CommandContext.from_settings(settings)
        logger.info(
            "Command context initialized",
            extra={"history_limit": settings.history_limit},
        )
    return _context
