"""Request bodies and query strings for the ClickUp API.

Options the user did not pass stay ``None`` and are left out of the
payload entirely, so the server never sees ``null`` or ``""`` for them.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


class Payload(BaseModel):
    """Base for everything sent over the wire."""

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class SpaceCreate(Payload):
    name: str
    features: dict[str, dict[str, bool]] = Field(default_factory=dict)

    @classmethod
    def with_features(cls, name: str, enabled: list[str] | None = None) -> "SpaceCreate":
        """Build a space body enabling the named ClickUp features."""
        return cls(name=name, features={feature: {"enabled": True} for feature in enabled or []})


class FolderCreate(Payload):
    name: str


class ListCreate(Payload):
    name: str
    content: Optional[str] = None
    due_date: Optional[int] = None
    priority: Optional[int] = None
    status: Optional[str] = None


class TaskCreate(Payload):
    name: str
    description: Optional[str] = None
    assignees: Optional[list[int]] = None
    status: Optional[str] = None
    priority: Optional[int] = None
    due_date: Optional[int] = None


class TaskUpdate(Payload):
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[int] = None
    due_date: Optional[int] = None


class TaskQuery(Payload):
    archived: Optional[bool] = None
    include_closed: Optional[bool] = None
    statuses: Optional[list[str]] = Field(default=None, serialization_alias="statuses[]")
    assignees: Optional[list[str]] = Field(default=None, serialization_alias="assignees[]")

    def to_wire(self) -> dict[str, Any]:
        # Booleans go out as lowercase query strings
        params = super().to_wire()
        return {k: (str(v).lower() if isinstance(v, bool) else v) for k, v in params.items()}


class TimerStart(Payload):
    task_id: str = Field(serialization_alias="tid")
    description: Optional[str] = None


class TimeEntryQuery(Payload):
    start_date: Optional[int] = None
    end_date: Optional[int] = None
    assignee: Optional[str] = None
