"""Pydantic schemas for task file validation."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, NonNegativeInt, field_validator


class TaskSchema(BaseModel):
    """Schema for one task entry."""

    id: str | None = None  # Required in list form, taken from the key in mapping form
    name: str | None = None  # Defaults to the ID
    duration: NonNegativeInt
    predecessors: list[str] = Field(default_factory=list)

    @field_validator("id", "name", mode="before")
    @classmethod
    def coerce_to_string(cls, v: Any) -> str | None:
        """Allow bare numbers as IDs and names."""
        if v is None:
            return None
        return str(v)

    @field_validator("predecessors", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> list[str]:
        """Accept a single ID or a list of IDs."""
        if v is None:
            return []
        if isinstance(v, list):
            return [str(item) for item in v]  # type: ignore[misc]
        return [str(v)]


class MetadataSchema(BaseModel):
    """Schema for the optional metadata section."""

    name: str = "Untitled project"

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name_to_string(cls, v: Any) -> str:
        return str(v)


class ProjectSchema(BaseModel):
    """Schema for the whole task file.

    ``tasks`` is either a mapping of ID to task, or a list of tasks that
    each carry an ``id``.
    """

    metadata: MetadataSchema = Field(default_factory=MetadataSchema)
    tasks: dict[str, TaskSchema] | list[TaskSchema] = Field(default_factory=list)
