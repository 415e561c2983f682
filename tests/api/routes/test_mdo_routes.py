"""Tests for multi-domain operations API routes."""

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from command_center.api.routes import mdo
from command_center.core.context import CommandContext, get_context
from command_center.core.exceptions import CommandCenterException
from command_center.main import command_center_exception_handler


@pytest.fixture
def context() -> CommandContext:
    return CommandContext()


@pytest.fixture
def client(context: CommandContext) -> TestClient:
    app = FastAPI()
    app.include_router(mdo.router, prefix="/api/v1")
    app.add_exception_handler(CommandCenterException, command_center_exception_handler)
    app.dependency_overrides[get_context] = lambda: context
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_get_config(client: TestClient) -> None:
    response = client.get("/api/v1/mdo/config")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["doctrine"] == "multi-domain-operations"
    assert len(data["task_forces"]) == 5


def test_get_synergy(client: TestClient) -> None:
    data = client.get("/api/v1/mdo/synergy").json()

    assert data["code_to_data"] == "Store patterns after implementation"
    assert len(data) == 5


def test_list_domains(client: TestClient) -> None:
    data = client.get("/api/v1/mdo/domains").json()

    assert len(data) == 5
    assert data["orchestration"]["agents"] == ["architect", "planner", "analyst", "critic"]


def test_update_domain_merges_fields(client: TestClient) -> None:
    response = client.put("/api/v1/mdo/domains/code", json={"status": "busy", "load": 0.9})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["domain"] == "code"
    assert data["status"] == "busy"
    assert data["load"] == 0.9
    assert data["agents"] == ["executor", "build-fixer", "test-engineer"]
    assert client.get("/api/v1/mdo/domains").json()["code"]["status"] == "busy"


def test_update_unknown_domain_returns_404(client: TestClient, context: CommandContext) -> None:
    before = context.domains.get_all()

    response = client.put("/api/v1/mdo/domains/space", json={"status": "active"})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["code"] == "NOT_FOUND"
    assert context.domains.get_all() == before
