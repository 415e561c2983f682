"""Harness pipeline trigger client.

Starts a Harness pipeline execution. When no personal access token is
configured the client returns a simulated execution instead of calling
out, so local and test deployments never touch the network.
"""

import logging
import time
from typing import Any

import httpx

from command_center.core.circuit_breaker import CircuitBreaker, CircuitBreakerOpen
from command_center.core.config import Settings, get_settings
from command_center.core.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

SERVICE_NAME = "harness"

harness_circuit_breaker = CircuitBreaker(SERVICE_NAME, failure_threshold=3, recovery_timeout=60.0)


class HarnessClient:
    """Client for the Harness pipeline execution API."""

    EXECUTE_PATH = "/gateway/pipeline/api/pipeline/execute/{pipeline_id}/v2"

    def __init__(
        self,
        settings: Settings | None = None,
        circuit_breaker: CircuitBreaker | None = None,
    ) -> None:
        """Initialize the Harness client.

        Args:
            settings: Application settings, defaults to the cached settings.
            circuit_breaker: Breaker guarding outbound calls.
        """
        self.settings = settings or get_settings()
        self.circuit_breaker = circuit_breaker or harness_circuit_breaker
        self.headers: dict[str, str] = {
            "x-api-key": self.settings.HARNESS_PAT.get_secret_value(),
            "Content-Type": "application/json",
        }

    @property
    def is_configured(self) -> bool:
        return self.settings.harness_configured

    def execute_url(self, pipeline_id: str) -> str:
        return self.settings.HARNESS_BASE_URL + self.EXECUTE_PATH.format(pipeline_id=pipeline_id)

    def execute_params(self) -> dict[str, str]:
        return {
            "accountIdentifier": self.settings.HARNESS_ACCOUNT,
            "orgIdentifier": self.settings.HARNESS_ORG,
            "projectIdentifier": self.settings.HARNESS_PROJECT,
        }

    async def trigger_pipeline(self, pipeline_id: str | None = None) -> dict[str, Any]:
        """Trigger a pipeline execution.

        Args:
            pipeline_id: Pipeline identifier, defaults to HARNESS_DEFAULT_PIPELINE.

        Returns:
            A "triggered" descriptor with the Harness response, or a
            "simulated" descriptor when no token is configured.

        Raises:
            ExternalServiceError: If Harness is unreachable, answers with a
                non-2xx status, or the circuit breaker is open.
        """
        pipeline_id = pipeline_id or self.settings.HARNESS_DEFAULT_PIPELINE

        if not self.is_configured:
            logger.info("Harness PAT not configured, simulating pipeline %s", pipeline_id)
            return {
                "status": "simulated",
                "message": "Harness PAT not configured, returning simulated response",
                "pipeline_id": pipeline_id,
                "execution_id": f"sim-{int(time.time() * 1000)}",
            }

        try:
            data = await self.circuit_breaker.call_async(self._execute, pipeline_id)
        except CircuitBreakerOpen as e:
            logger.warning("Harness circuit open, pipeline %s not triggered", pipeline_id)
            raise ExternalServiceError(
                SERVICE_NAME, "Harness is temporarily unavailable"
            ) from e
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(
                "Harness API error: status=%s pipeline=%s body=%s",
                status_code,
                pipeline_id,
                e.response.text[:200],
            )
            raise ExternalServiceError(
                SERVICE_NAME, f"Harness API error (status {status_code})"
            ) from e
        except httpx.RequestError as e:
            logger.error("Harness connection error: %s", str(e))
            raise ExternalServiceError(
                SERVICE_NAME, f"Failed to connect to Harness: {e}"
            ) from e

        logger.info("Harness pipeline triggered", extra={"pipeline_id": pipeline_id})
        return {"status": "triggered", "pipeline_id": pipeline_id, "data": data}

    async def _execute(self, pipeline_id: str) -> Any:
        async with httpx.AsyncClient(timeout=self.settings.HARNESS_TIMEOUT_SECONDS) as client:
            response = await client.post(
                self.execute_url(pipeline_id),
                params=self.execute_params(),
                headers=self.headers,
                json={},
            )
            response.raise_for_status()
            try:
                return response.json()
            except ValueError:
                return {"raw": response.text}


_harness_client: HarnessClient | None = None


def get_harness_client() -> HarnessClient:
    """Get or create Harness client singleton.

    Returns:
        The shared HarnessClient instance
    """
    global _harness_client
    if _harness_client is None:
        _harness_client = HarnessClient()
    return _harness_client
