# Dashboard data models.
# Wire shapes for launch items and notes, plus the drafts sent on create.

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

ItemId = Union[int, str]


class LaunchItem(BaseModel):
    """A named reference to a launchable target."""

    id: ItemId
    name: str
    path: str


class LaunchItemDraft(BaseModel):
    name: str
    path: str


class Note(BaseModel):
    """A short text note. ``title`` may be empty."""

    id: ItemId
    title: str = ""
    content: str

    @field_validator("title", mode="before")
    @classmethod
    def _none_title_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class NoteDraft(BaseModel):
    title: str = Field(default="")
    content: str


def parse_collection(body: Any, model: type[BaseModel]) -> list[Any]:
    """Validate a collection body into a list of ``model`` instances.

    Raises ValueError when the body is not a list or an entry is invalid.
    """
    if not isinstance(body, list):
        raise ValueError(f"expected a list, got {type(body).__name__}")
    try:
        return [model.model_validate(entry) for entry in body]
    except ValidationError as e:
        raise ValueError(str(e)) from e


def coerce_id(raw: str) -> ItemId:
    """Turn a user-typed id into the form the service hands out."""
    raw = raw.strip()
    return int(raw) if raw.isdigit() else raw
