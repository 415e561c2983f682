"""Mission-related Pydantic models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from command_center.models.ooda import text_or_none


class MissionCreate(BaseModel):
    """Request model for creating a new mission."""

    task_force: str | None = Field(default=None, description="Task force key, defaults to alpha_feature")
    intent: str | None = None
    domains: list[str] | None = None

    @field_validator("task_force", "intent", mode="before")
    @classmethod
    def drop_non_text(cls, v: Any) -> str | None:
        """Treat non-string values as not provided."""
        return text_or_none(v)


class RecordPatch(BaseModel):
    """Request model for a schema-less partial update.

    Every submitted field is merged into the target record as given, so
    the model accepts arbitrary keys.
    """

    model_config = ConfigDict(extra="allow")

    def updates(self) -> dict[str, Any]:
        """Return the submitted fields."""
        return dict(self.model_extra or {})
