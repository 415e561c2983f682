"""Tests for static reference data."""

import pytest

from command_center.core import catalog
from command_center.core.exceptions import ModelTierNotFoundError


def test_task_forces_cover_five_mission_types() -> None:
    assert set(catalog.TASK_FORCES) == {
        "alpha_feature",
        "bravo_incident",
        "charlie_knowledge",
        "delta_security",
        "echo_platform",
    }
    echo = catalog.TASK_FORCES["echo_platform"]
    assert echo.commander == "build-fixer"
    assert echo.agents == ("executor", "verifier")
    assert echo.mission_type == "stability_ops"


def test_get_task_force_unknown_returns_none() -> None:
    assert catalog.get_task_force("zulu") is None


def test_mdo_config_document() -> None:
    config = catalog.mdo_config()

    assert config["version"] == "2.0.0"
    assert config["doctrine"] == "multi-domain-operations"
    assert config["task_forces"]["alpha_feature"]["commander"] == "architect"
    assert config["cross_domain_synergy"]["infra_to_orch"] == (
        "Health status adjusts operational tempo"
    )


def test_swarm_models_tiers() -> None:
    models = catalog.swarm_models()

    assert list(models) == ["t1_fast", "t2_power", "t3_deep"]
    assert len(models["t1_fast"]) == 5
    assert models["t3_deep"] == [
        {"id": "openrouter/deepseek-r1", "provider": "DeepSeek", "latency": "21s", "status": "active"}
    ]


def test_swarm_tier_unknown_raises() -> None:
    with pytest.raises(ModelTierNotFoundError, match="t1_fast, t2_power, t3_deep"):
        catalog.swarm_tier("t4_mythical")


def test_service_info_is_a_copy() -> None:
    info = catalog.service_info()
    info["platforms"].append("fax")

    assert "fax" not in catalog.service_info()["platforms"]


def test_cloud_status_uses_given_urls() -> None:
    cloud = catalog.build_cloud_status("http://elice.test", "https://replit.test")

    assert cloud["elice"].url == "http://elice.test"
    assert cloud["elice"].to_dict()["last_check"] is None
    assert cloud["replit"].url == "https://replit.test"
    assert cloud["github"].status == "active"
