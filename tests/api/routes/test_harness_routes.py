"""Tests for the Harness pipeline trigger route."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from command_center.api.routes import harness
from command_center.core.exceptions import CommandCenterException, ExternalServiceError
from command_center.integrations.harness import get_harness_client
from command_center.main import command_center_exception_handler


@pytest.fixture
def mock_harness() -> MagicMock:
    client = MagicMock()
    client.trigger_pipeline = AsyncMock(
        return_value={"status": "simulated", "pipeline_id": "deploy_ai_orchestration_hub"}
    )
    return client


@pytest.fixture
def client(mock_harness: MagicMock) -> TestClient:
    app = FastAPI()
    app.include_router(harness.router, prefix="/api/v1")
    app.add_exception_handler(CommandCenterException, command_center_exception_handler)
    app.dependency_overrides[get_harness_client] = lambda: mock_harness
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_trigger_default_pipeline(client: TestClient, mock_harness: MagicMock) -> None:
    response = client.post("/api/v1/harness/trigger")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "simulated"
    mock_harness.trigger_pipeline.assert_awaited_once_with(None)


def test_trigger_named_pipeline(client: TestClient, mock_harness: MagicMock) -> None:
    client.post("/api/v1/harness/trigger", json={"pipeline_id": "nightly"})

    mock_harness.trigger_pipeline.assert_awaited_once_with("nightly")


def test_trigger_failure_returns_502(client: TestClient, mock_harness: MagicMock) -> None:
    mock_harness.trigger_pipeline.side_effect = ExternalServiceError(
        "harness", "Harness API error (status 500)"
    )

    response = client.post("/api/v1/harness/trigger", json={})

    assert response.status_code == status.HTTP_502_BAD_GATEWAY
    data = response.json()
    assert data["code"] == "EXTERNAL_SERVICE_ERROR"
    assert data["detail"] == "Harness API error (status 500)"
