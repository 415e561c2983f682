"""FastAPI dependencies for the command center routes."""

from typing import Annotated

from fastapi import Depends

from command_center.core.context import CommandContext, get_context
from command_center.integrations.harness import HarnessClient, get_harness_client

# Tests override these with app.dependency_overrides
Context = Annotated[CommandContext, Depends(get_context)]
Harness = Annotated[HarnessClient, Depends(get_harness_client)]
