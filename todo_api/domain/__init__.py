# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .todos.entities import Todo
from .todos.exceptions import InvalidTodoIdError, TodoNotFoundError, TodoQuotaExceededError
from .users.entities import User
from .users.exceptions import AlreadyProError, UserAlreadyExistsError, UserNotFoundError

__all__ = [
    "Todo",
    "User",
    "AlreadyProError",
    "InvalidTodoIdError",
    "TodoNotFoundError",
    "TodoQuotaExceededError",
    "UserAlreadyExistsError",
    "UserNotFoundError",
]
