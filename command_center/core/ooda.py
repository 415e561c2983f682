"""OODA loop phase engine.

Tracks the command center's position in the Observe-Orient-Decide-Act
cycle. The engine owns the current phase, the number of completed cycles,
the operational tempo, and a history of completed phases.

Phases advance in a fixed order and wrap from Act back to Observe; each
wrap completes one cycle. Tempo is an independent pace classifier that
only changes through an explicit ``set_tempo`` call and survives resets.
"""

import copy
import logging
import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from command_center.core.exceptions import ValidationError

logger = logging.getLogger(__name__)


class OODAPhase(str, Enum):
    """Phases of the OODA loop, in cycle order."""

    OBSERVE = "observe"
    ORIENT = "orient"
    DECIDE = "decide"
    ACT = "act"


class Tempo(str, Enum):
    """Operational pace of the command center."""

    STRATEGIC = "strategic"
    OPERATIONAL = "operational"
    TACTICAL = "tactical"


PHASE_ORDER: tuple[OODAPhase, ...] = tuple(OODAPhase)
VALID_TEMPOS: tuple[str, ...] = tuple(t.value for t in Tempo)


@dataclass
class PhaseRecord:
    """History entry for a phase that has been completed."""

    phase: OODAPhase
    completed_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation suitable for JSON.
        """
        return {
            "phase": self.phase.value,
            "completed_at": self.completed_at.isoformat(),
            "data": self.data,
        }


@dataclass
class CycleState:
    """Full state of the OODA loop."""

    current_phase: OODAPhase = OODAPhase.OBSERVE
    cycle_count: int = 0
    tempo: Tempo = Tempo.OPERATIONAL
    history: list[PhaseRecord] = field(default_factory=list)
    started_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def to_dict(self) -> dict[str, Any]:
        """Serialize state to dictionary.

        Returns:
            Dictionary representation suitable for JSON.
        """
        return {
            "current_phase": self.current_phase.value,
            "cycle_count": self.cycle_count,
            "tempo": self.tempo.value,
            "history": [record.to_dict() for record in self.history],
            "started_at": self.started_at.isoformat(),
        }


@dataclass
class PhaseTransition:
    """Result of a single phase advance."""

    previous_phase: OODAPhase
    current_phase: OODAPhase
    cycle_count: int
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation suitable for JSON.
        """
        return {
            "previous_phase": self.previous_phase.value,
            "current_phase": self.current_phase.value,
            "cycle_count": self.cycle_count,
            "timestamp": self.timestamp.isoformat(),
        }


def next_phase(phase: OODAPhase) -> OODAPhase:
    """Return the phase that follows ``phase`` in cycle order."""
    index = PHASE_ORDER.index(phase)
    return PHASE_ORDER[(index + 1) % len(PHASE_ORDER)]


class PhaseEngine:
    """Thread-safe owner of the OODA cycle state.

    History is append-only between resets. With ``history_limit`` left at
    None every completed phase is retained; otherwise only the most recent
    ``history_limit`` records are kept. The cycle counter is unaffected by
    eviction.

    Args:
        history_limit: Maximum number of history records to retain.
        tempo: Initial tempo.
    """

    def __init__(
        self,
        history_limit: int | None = None,
        tempo: Tempo = Tempo.OPERATIONAL,
    ) -> None:
        if history_limit is not None and history_limit <= 0:
            raise ValueError("history_limit must be a positive integer or None")
        self.history_limit = history_limit
        self._lock = threading.Lock()
        self._current_phase = OODAPhase.OBSERVE
        self._cycle_count = 0
        self._tempo = tempo
        self._history: deque[PhaseRecord] = deque(maxlen=history_limit)
        self._started_at = datetime.now(UTC)

    @property
    def current_phase(self) -> OODAPhase:
        """The live current phase."""
        with self._lock:
            return self._current_phase

    @property
    def tempo(self) -> Tempo:
        """The current operational tempo."""
        with self._lock:
            return self._tempo

    def get_state(self) -> CycleState:
        """Return a snapshot of the cycle state.

        The snapshot is detached from the engine; later advances do not
        show up in it.
        """
        with self._lock:
            return self._snapshot()

    def advance(self, data: Any = None) -> PhaseTransition:
        """Complete the current phase and move to the next one.

        Args:
            data: Opaque payload recorded with the completed phase.

        Returns:
            The transition that was applied.
        """
        with self._lock:
            previous = self._current_phase
            self._history.append(PhaseRecord(phase=previous, data=copy.deepcopy(data)))
            current = next_phase(previous)
            if current == PHASE_ORDER[0]:
                self._cycle_count += 1
            self._current_phase = current
            transition = PhaseTransition(
                previous_phase=previous,
                current_phase=current,
                cycle_count=self._cycle_count,
            )

        logger.info(
            "OODA phase advanced",
            extra={
                "previous_phase": previous.value,
                "current_phase": current.value,
                "cycle_count": transition.cycle_count,
            },
        )
        return transition

    def reset(self) -> CycleState:
        """Return to the start of a fresh cycle.

        Phase, cycle count, history and start time are reset. Tempo keeps
        its last explicitly set value.
        """
        with self._lock:
            self._current_phase = OODAPhase.OBSERVE
            self._cycle_count = 0
            self._history.clear()
            self._started_at = datetime.now(UTC)
            state = self._snapshot()

        logger.info("OODA loop reset", extra={"tempo": state.tempo.value})
        return state

    def set_tempo(self, value: str | Tempo) -> Tempo:
        """Set the operational tempo.

        Args:
            value: One of "strategic", "operational" or "tactical".

        Returns:
            The new tempo.

        Raises:
            ValidationError: If ``value`` is not a recognized tempo.
        """
        try:
            tempo = Tempo(value)
        except ValueError:
            raise ValidationError(
                f"Invalid tempo. Use: {', '.join(VALID_TEMPOS)}",
                field="tempo",
                details={"allowed": list(VALID_TEMPOS)},
            ) from None

        with self._lock:
            self._tempo = tempo

        logger.info("OODA tempo set", extra={"tempo": tempo.value})
        return tempo

    def _snapshot(self) -> CycleState:
        return CycleState(
            current_phase=self._current_phase,
            cycle_count=self._cycle_count,
            tempo=self._tempo,
            history=[copy.deepcopy(record) for record in self._history],
            started_at=self._started_at,
        )
