# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from todo_api.domain.todos.entities import Todo
from todo_api.domain.users.entities import User
from todo_api.shared.utils.ids import new_id


def _utcnow() -> datetime:
    return datetime.now(UTC)


class CreateTodoUseCase:
    def __init__(
        self,
        *,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._id_factory = id_factory
        self._clock = clock

    def execute(self, user: User, title: str, deadline: datetime) -> Todo:
        todo = Todo(
            id=self._id_factory(),
            title=title,
            deadline=deadline,
            created_at=self._clock(),
        )
        user.add_todo(todo)
        return todo
