"""Multi-domain operations API routes."""

import logging
from typing import Any

from fastapi import APIRouter

from command_center.api.deps import Context
from command_center.core.catalog import CROSS_DOMAIN_SYNERGY, mdo_config
from command_center.models.mission import RecordPatch

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/mdo", tags=["mdo"])


@router.get("/config")
async def get_config() -> dict[str, Any]:
    """Get the MDO doctrine, task forces and cross-domain synergy."""
    return mdo_config()


@router.get("/domains")
async def list_domains(context: Context) -> dict[str, dict[str, Any]]:
    """Get every operational domain with its status, agents and load."""
    return context.domains.get_all()


@router.put("/domains/{domain}")
async def update_domain(domain: str, data: RecordPatch, context: Context) -> dict[str, Any]:
    """Merge the submitted fields into a domain.

    Any field may be set; values are stored as given.
    """
    record = context.domains.patch(domain, data.updates())
    return {"domain": domain, **record}


@router.get("/synergy")
async def get_synergy() -> dict[str, str]:
    """Get the cross-domain synergy map."""
    return dict(CROSS_DOMAIN_SYNERGY)
