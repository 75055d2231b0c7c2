# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field

from todo_api.domain.todos.entities import Todo

from .exceptions import AlreadyProError


@dataclass(slots=True, eq=False)
class User:

    id: str
    name: str
    username: str
    pro: bool = False
    todos: list[Todo] = field(default_factory=list)

    def upgrade_to_pro(self) -> None:
        if self.pro:
            raise AlreadyProError(context={"user_id": self.id})
        self.pro = True

    def find_todo(self, todo_id: str) -> Todo | None:
        return next((todo for todo in self.todos if todo.id == todo_id), None)

    def add_todo(self, todo: Todo) -> None:
        self.todos.append(todo)

    def remove_todo(self, todo: Todo) -> bool:
        for index, candidate in enumerate(self.todos):
            if candidate is todo:
                del self.todos[index]
                return True
        return False
