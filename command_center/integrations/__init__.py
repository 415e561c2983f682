"""Integrations with external services."""

from command_center.integrations.harness import HarnessClient, get_harness_client

__all__ = ["HarnessClient", "get_harness_client"]
