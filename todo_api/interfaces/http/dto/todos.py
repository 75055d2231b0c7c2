from __future__ import annotations

from datetime import UTC, date, datetime, time
from typing import Any

from pydantic import BaseModel, Field, field_validator

from todo_api.domain.todos.entities import Todo


class TodoRequestDTO(BaseModel):
    title: str = Field(min_length=1, max_length=256)
    deadline: datetime

    @field_validator("deadline", mode="before")
    @classmethod
    def accept_bare_date(cls, value: Any) -> Any:
        # "2026-11-01" means midnight UTC on that day
        if isinstance(value, str) and len(value) == 10:
            try:
                return datetime.combine(date.fromisoformat(value), time.min, tzinfo=UTC)
            except ValueError:
                return value
        return value

    @field_validator("deadline", mode="after")
    @classmethod
    def normalise_to_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)


class TodoDTO(BaseModel):
    id: str
    title: str
    deadline: datetime
    done: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, todo: Todo) -> TodoDTO:
        return cls(
            id=todo.id,
            title=todo.title,
            deadline=todo.deadline,
            done=todo.done,
            created_at=todo.created_at,
        )
