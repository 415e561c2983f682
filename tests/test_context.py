"""Tests for the command context."""

from unittest.mock import patch

from command_center.core import context as context_module
from command_center.core.config import Settings
from command_center.core.context import CommandContext, get_context


def test_contexts_are_independent() -> None:
    first = CommandContext()
    second = CommandContext()

    first.engine.advance()
    first.missions.create()
    first.domains.patch("code", {"load": 3})

    assert second.engine.get_state().history == []
    assert second.missions.list() == []
    assert second.domains.get("code")["load"] == 0


def test_from_settings_applies_history_limit_and_urls() -> None:
    settings = Settings(_env_file=None, OODA_HISTORY_LIMIT=2, ELICE_URL="http://elice.test")

    ctx = CommandContext.from_settings(settings)
    for _ in range(5):
        ctx.engine.advance()

    assert len(ctx.engine.get_state().history) == 2
    assert ctx.cloud["elice"].url == "http://elice.test"


def test_get_context_returns_singleton() -> None:
    with patch.object(context_module, "_context", None):
        first = get_context()
        second = get_context()

    assert first is second
