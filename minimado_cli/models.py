"""
Pydantic models for the local config and the remote task records.

LEARNING NOTES:
- The server sends loosely shaped JSON (tags can be strings OR objects)
- Validating it here, at the boundary, means the formatters only ever see
  well-typed Task objects and never have to poke at raw dicts
- Field aliases map the server's camelCase names (createdAt) onto
  snake_case attributes (created_at)
"""

import json
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserConfig(BaseModel):
    """
    The local configuration file contents.

    Only userId is understood. Any other keys already in the file are kept
    (extra="allow") so saving never drops them.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    user_id: str | None = Field(
        default=None,
        alias="userId",
        description="Cached Clerk user id"
    )

    @property
    def has_user_id(self) -> bool:
        # An empty string counts as "not set"
        return bool(self.user_id)

    def to_json(self, indent: int = 2) -> str:
        data = self.model_dump(mode="json", by_alias=True)
        # Unset id is omitted; unknown keys are written back as loaded
        if data.get("userId") is None:
            data.pop("userId", None)
        return json.dumps(data, indent=indent, ensure_ascii=False)


class TagRef(BaseModel):
    """A structured tag entry, e.g. {"name": "home", "color": "#f00"}."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None


class Task(BaseModel):
    """
    A single task as returned by GET /api/tasks.

    Example:
        task = Task.model_validate({
            "text": "Buy milk",
            "completed": False,
            "createdAt": "2026-10-17T09:00:00Z",
            "tags": ["errands", {"name": "home"}],
        })
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    text: str = Field(
        description="The task title"
    )

    completed: bool = Field(
        default=False,
        description="Whether the task is done"
    )

    created_at: datetime = Field(
        alias="createdAt",
        description="When the task was created"
    )

    completed_at: datetime | None = Field(
        default=None,
        alias="completedAt",
        description="When the task was completed (if it was)"
    )

    # str is tried first, so plain string tags stay strings
    tags: list[str | TagRef] = Field(
        default_factory=list,
        description="Tag names or tag objects"
    )

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value):
        """Map null to [] and unrecognised entries to an empty TagRef."""
        if value is None:
            return []
        if not isinstance(value, list):
            return value
        return [_normalize_tag(tag) for tag in value]

    @field_validator("completed", mode="before")
    @classmethod
    def _null_is_incomplete(cls, value):
        return False if value is None else value


def _normalize_tag(tag):
    if isinstance(tag, str):
        return tag
    # A tag object whose name is missing or not text displays as "unknown"
    if isinstance(tag, dict) and isinstance(tag.get("name"), str):
        return tag
    return {}
