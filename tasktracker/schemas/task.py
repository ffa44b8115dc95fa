from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class TaskIn(BaseModel):
    """Request body for POST /tasks and PUT /tasks/{id}.

    PUT replaces every field, so an omitted `completed` resets the task to
    pending and an omitted `description` clears it. Any `id` in the body is
    ignored.
    """

    title: str
    description: Optional[str] = None
    completed: bool = False

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title must not be blank")
        return v


class TaskOut(BaseModel):
    id: int = Field(ge=0)
    title: str
    description: Optional[str] = None
    completed: bool = False

    @field_validator("completed", mode="before")
    @classmethod
    def null_is_pending(cls, v):
        return False if v is None else v
