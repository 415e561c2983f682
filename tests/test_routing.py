"""Tests for phase-driven agent routing."""

import pytest

from command_center.core.ooda import OODAPhase, PhaseEngine
from command_center.core.routing import route_task, select_route


@pytest.mark.parametrize(
    ("phase", "agent", "model"),
    [
        (OODAPhase.OBSERVE, "explore", "haiku"),
        (OODAPhase.ORIENT, "analyst", "opus"),
        (OODAPhase.DECIDE, "planner", "opus"),
        (OODAPhase.ACT, "executor", "sonnet"),
    ],
)
def test_phase_base_assignment(phase: OODAPhase, agent: str, model: str) -> None:
    decision = select_route(phase)

    assert decision.agent == agent
    assert decision.model == model
    assert decision.ooda_phase == phase


def test_act_without_hints_routes_to_executor_on_sonnet() -> None:
    decision = select_route(OODAPhase.ACT)

    assert decision.agent == "executor"
    assert decision.model == "sonnet"
    assert decision.domain == "code"
    assert decision.task == "unspecified"


def test_decide_low_infrastructure_combines_both_overrides() -> None:
    decision = select_route(OODAPhase.DECIDE, complexity="low", domain="infrastructure")

    assert decision.agent == "build-fixer"
    assert decision.model == "haiku"
    assert decision.ooda_phase == OODAPhase.DECIDE
    assert decision.domain == "infrastructure"


def test_high_complexity_forces_opus() -> None:
    assert select_route(OODAPhase.OBSERVE, complexity="high").model == "opus"
    assert select_route(OODAPhase.ACT, complexity="high").model == "opus"


def test_low_complexity_forces_haiku() -> None:
    assert select_route(OODAPhase.ORIENT, complexity="low").model == "haiku"


def test_complexity_does_not_change_agent() -> None:
    assert select_route(OODAPhase.ACT, complexity="high").agent == "executor"


def test_intelligence_domain_forces_security_reviewer() -> None:
    decision = select_route(OODAPhase.OBSERVE, domain="intelligence")

    assert decision.agent == "security-reviewer"
    assert decision.model == "haiku"


def test_domain_does_not_change_model() -> None:
    assert select_route(OODAPhase.ACT, domain="infrastructure").model == "sonnet"


@pytest.mark.parametrize("complexity", ["medium", "HIGH", ""])
def test_unrecognized_complexity_is_ignored(complexity: str) -> None:
    assert select_route(OODAPhase.ACT, complexity=complexity).model == "sonnet"


def test_unrecognized_domain_is_echoed_without_override() -> None:
    decision = select_route(OODAPhase.ORIENT, domain="data_knowledge")

    assert decision.agent == "analyst"
    assert decision.domain == "data_knowledge"


def test_task_label_is_echoed() -> None:
    assert select_route(OODAPhase.ACT, task="fix flaky test").task == "fix flaky test"


def test_routing_is_deterministic() -> None:
    first = select_route(OODAPhase.DECIDE, task="t", complexity="high", domain="intelligence")
    second = select_route(OODAPhase.DECIDE, task="t", complexity="high", domain="intelligence")

    a, b = first.to_dict(), second.to_dict()
    a.pop("timestamp")
    b.pop("timestamp")
    assert a == b


def test_route_task_reads_live_phase() -> None:
    engine = PhaseEngine()
    assert route_task(engine).agent == "explore"

    engine.advance()
    engine.advance()
    decision = route_task(engine, complexity="low", domain="infrastructure")

    assert decision.ooda_phase == OODAPhase.DECIDE
    assert decision.agent == "build-fixer"
    assert decision.model == "haiku"


def test_route_task_does_not_mutate_engine() -> None:
    engine = PhaseEngine()
    route_task(engine, task="scan")

    state = engine.get_state()
    assert state.current_phase == OODAPhase.OBSERVE
    assert state.history == []


def test_route_decision_to_dict() -> None:
    result = select_route(OODAPhase.ACT, task="deploy").to_dict()

    assert result["agent"] == "executor"
    assert result["model"] == "sonnet"
    assert result["ooda_phase"] == "act"
    assert result["domain"] == "code"
    assert result["task"] == "deploy"
    assert "timestamp" in result
