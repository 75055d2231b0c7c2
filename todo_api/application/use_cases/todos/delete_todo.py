# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from todo_api.domain.todos.entities import Todo
from todo_api.domain.todos.exceptions import TodoNotFoundError
from todo_api.domain.users.entities import User


class DeleteTodoUseCase:
    def execute(self, user: User, todo: Todo) -> None:
        # The guard resolved the todo, but it may have gone by the time we get here.
        if not user.remove_todo(todo):
            raise TodoNotFoundError(todo.id)
