"""Registry of the fixed operational domains.

The set of domains never changes at runtime. Each domain's descriptive
state (status, agents, load, and any extra field a caller adds) is
free-form and updated by shallow merge.
"""

import copy
import logging
import threading
from typing import Any

from command_center.core.catalog import DOMAIN_AGENTS
from command_center.core.exceptions import DomainNotFoundError

logger = logging.getLogger(__name__)


def initial_domains() -> dict[str, dict[str, Any]]:
    """Build the starting record for every domain."""
    return {
        key: {"status": "active", "agents": list(agents), "load": 0}
        for key, agents in DOMAIN_AGENTS.items()
    }


class DomainRegistry:
    """Thread-safe store of domain records keyed by domain name."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._domains = initial_domains()

    def get_all(self) -> dict[str, dict[str, Any]]:
        """Return a snapshot of every domain record."""
        with self._lock:
            return copy.deepcopy(self._domains)

    def get(self, key: str) -> dict[str, Any]:
        """Return a snapshot of one domain record.

        Raises:
            DomainNotFoundError: If ``key`` is not a known domain.
        """
        with self._lock:
            if key not in self._domains:
                raise DomainNotFoundError(key)
            return copy.deepcopy(self._domains[key])

    def patch(self, key: str, fields: dict[str, Any]) -> dict[str, Any]:
        """Merge ``fields`` into a domain record.

        Provided fields overwrite, omitted fields are kept. Values are not
        validated.

        Args:
            key: Domain key.
            fields: Fields to overwrite.

        Returns:
            The merged domain record.

        Raises:
            DomainNotFoundError: If ``key`` is not a known domain.
        """
        with self._lock:
            record = self._domains.get(key)
            if record is None:
                raise DomainNotFoundError(key)
            record.update(copy.deepcopy(fields))
            merged = copy.deepcopy(record)

        logger.info(
            "Domain updated",
            extra={"domain": key, "fields": sorted(fields)},
        )
        return merged
