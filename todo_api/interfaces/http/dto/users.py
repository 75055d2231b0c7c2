from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from todo_api.domain.users.entities import User

from .todos import TodoDTO


class CreateUserRequestDTO(BaseModel):
    name: str = Field(min_length=1, max_length=128)
    username: str = Field(min_length=1, max_length=64)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        if value != value.strip() or any(ch.isspace() for ch in value):
            raise PydanticCustomError(
                "username_whitespace",
                "Username must not contain whitespace",
                {},
            )
        return value


class UserDTO(BaseModel):
    id: str
    name: str
    username: str
    pro: bool
    todos: list[TodoDTO]

    @classmethod
    def from_entity(cls, user: User) -> UserDTO:
        return cls(
            id=user.id,
            name=user.name,
            username=user.username,
            pro=user.pro,
            todos=[TodoDTO.from_entity(todo) for todo in user.todos],
        )
