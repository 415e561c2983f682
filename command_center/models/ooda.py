"""Request models for OODA loop, routing and pipeline endpoints."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


def text_or_none(value: Any) -> str | None:
    """Keep string values, treat anything else as not provided."""
    return value if isinstance(value, str) else None


class AdvanceRequest(BaseModel):
    """Request model for advancing the OODA loop."""

    data: Any = Field(default=None, description="Opaque payload stored with the completed phase")


class TempoUpdate(BaseModel):
    """Request model for setting the operational tempo.

    The value is checked by the phase engine, not here, so an invalid tempo
    produces the engine's error listing every valid value.
    """

    tempo: Any = None


class RouteRequest(BaseModel):
    """Request model for agent routing.

    Routing never rejects a request: hints that are not strings are dropped
    and the phase defaults apply.
    """

    task: str | None = None
    complexity: str | None = Field(default=None, description='"high" or "low" forces the model tier')
    domain: str | None = Field(default=None, description="Domain hint, defaults to code")

    @field_validator("task", "complexity", "domain", mode="before")
    @classmethod
    def drop_non_text(cls, v: Any) -> str | None:
        """Treat non-string hints as not provided."""
        return text_or_none(v)


class PipelineTriggerRequest(BaseModel):
    """Request model for triggering a Harness pipeline."""

    pipeline_id: str | None = None
