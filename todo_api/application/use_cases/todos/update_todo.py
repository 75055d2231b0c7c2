# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from todo_api.domain.todos.entities import Todo


class UpdateTodoUseCase:
    def execute(self, todo: Todo, title: str, deadline: datetime) -> Todo:
        todo.update(title=title, deadline=deadline)
        return todo


class MarkTodoDoneUseCase:
    def execute(self, todo: Todo) -> Todo:
        todo.mark_done()
        return todo
