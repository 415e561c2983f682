"""Mission registry.

Missions are created against a task force and then updated in place. They
are never removed; retiring a mission means patching its status (for
example to "archived").
"""

from __future__ import annotations

import copy
import logging
import threading
import time
import uuid
from datetime import UTC, datetime
from typing import Any

from command_center.core.catalog import DEFAULT_DOMAIN, DEFAULT_TASK_FORCE, get_task_force
from command_center.core.exceptions import MissionNotFoundError
from command_center.core.ooda import OODAPhase

logger = logging.getLogger(__name__)

INITIAL_STATUS = "planning"


def generate_mission_id() -> str:
    """Create a mission ID.

    The millisecond timestamp keeps IDs roughly sortable; the random suffix
    keeps them unique when several missions share a millisecond.
    """
    return f"mission-{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"


class MissionRegistry:
    """Thread-safe, append-ordered store of missions."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._missions: list[dict[str, Any]] = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._missions)

    def list(self) -> list[dict[str, Any]]:
        """Return every mission in creation order."""
        with self._lock:
            return copy.deepcopy(self._missions)

    def get(self, mission_id: str) -> dict[str, Any]:
        """Return one mission.

        Raises:
            MissionNotFoundError: If no mission has ``mission_id``.
        """
        with self._lock:
            return copy.deepcopy(self._find(mission_id))

    def create(
        self,
        task_force: str | None = None,
        intent: str | None = None,
        domains: list[str] | None = None,
    ) -> dict[str, Any]:
        """Create and register a new mission.

        An unrecognized task force is recorded as given and gets an empty
        agent roster.

        Args:
            task_force: Task force key, defaults to alpha_feature.
            intent: Free-text commander's intent.
            domains: Domain keys the mission touches, defaults to ["code"] when
                omitted. An empty list is kept.

        Returns:
            The new mission.
        """
        task_force = task_force or DEFAULT_TASK_FORCE
        resolved = get_task_force(task_force)
        mission = {
            "id": generate_mission_id(),
            "task_force": task_force,
            "intent": intent or "",
            "status": INITIAL_STATUS,
            "ooda_phase": OODAPhase.OBSERVE.value,
            "created_at": datetime.now(UTC).isoformat(),
            "domains": list(domains) if domains is not None else [DEFAULT_DOMAIN],
            "agents": list(resolved.agents) if resolved else [],
        }

        with self._lock:
            self._missions.append(mission)
            created = copy.deepcopy(mission)

        if resolved is None:
            logger.warning(
                "Mission created with unrecognized task force",
                extra={"mission_id": mission["id"], "task_force": task_force},
            )
        logger.info(
            "Mission created",
            extra={"mission_id": mission["id"], "task_force": task_force},
        )
        return created

    def patch(self, mission_id: str, fields: dict[str, Any]) -> dict[str, Any]:
        """Merge ``fields`` into a mission.

        Any field may be overwritten except the ID; unknown fields are
        stored as given.

        Args:
            mission_id: ID of the mission to update.
            fields: Fields to overwrite.

        Returns:
            The merged mission.

        Raises:
            MissionNotFoundError: If no mission has ``mission_id``.
        """
        updates = {k: v for k, v in fields.items() if k != "id"}
        with self._lock:
            mission = self._find(mission_id)
            mission.update(copy.deepcopy(updates))
            merged = copy.deepcopy(mission)

        if "id" in fields:
            logger.warning(
                "Mission ID is immutable, ignoring id in patch",
                extra={"mission_id": mission_id, "requested_id": fields["id"]},
            )
        logger.info(
            "Mission updated",
            extra={"mission_id": mission_id, "fields": sorted(updates)},
        )
        return merged

    def _find(self, mission_id: str) -> dict[str, Any]:
        for mission in self._missions:
            if mission["id"] == mission_id:
                return mission
        raise MissionNotFoundError(mission_id)
