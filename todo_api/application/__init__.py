# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .guards import GuardContext, GuardFailure, RequestGuards, enforce, run_guards
from .use_cases.todos.create_todo import CreateTodoUseCase
from .use_cases.todos.delete_todo import DeleteTodoUseCase
from .use_cases.todos.list_todos import ListTodosUseCase
from .use_cases.todos.update_todo import MarkTodoDoneUseCase, UpdateTodoUseCase
from .use_cases.users.register_user import RegisterUserUseCase
from .use_cases.users.upgrade_to_pro import UpgradeToProUseCase

__all__ = [
    "GuardContext",
    "GuardFailure",
    "RequestGuards",
    "enforce",
    "run_guards",
    "CreateTodoUseCase",
    "DeleteTodoUseCase",
    "ListTodosUseCase",
    "MarkTodoDoneUseCase",
    "UpdateTodoUseCase",
    "RegisterUserUseCase",
    "UpgradeToProUseCase",
]
