# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from todo_api.domain.todos.entities import Todo
from todo_api.domain.users.entities import User


class ListTodosUseCase:
    def execute(self, user: User) -> Sequence[Todo]:
        return list(user.todos)
