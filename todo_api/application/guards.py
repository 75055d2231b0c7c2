# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Request guards run before every user and todo operation.

A guard takes a :class:`GuardContext` and returns either a new, enriched
context or a :class:`GuardFailure`. Routes compose guards as an ordered
sequence; :func:`run_guards` stops at the first failure so later guards
never observe a context an earlier one rejected.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace

from todo_api.domain.todos.entities import Todo
from todo_api.domain.todos.exceptions import (
    InvalidTodoIdError,
    TodoNotFoundError,
    TodoQuotaExceededError,
)
from todo_api.domain.users.entities import User
from todo_api.domain.users.exceptions import UserNotFoundError
from todo_api.domain.users.repositories import UserRepository
from todo_api.shared.errors import AppError
from todo_api.shared.logging import logger
from todo_api.shared.utils.ids import is_valid_uuid


@dataclass(slots=True, frozen=True)
class GuardContext:
    """Request inputs plus whatever the guards resolved so far."""

    username: str | None = None
    user_id: str | None = None
    todo_id: str | None = None
    user: User | None = None
    todo: Todo | None = None


@dataclass(slots=True, frozen=True)
class GuardFailure:
    guard: str
    error: AppError


GuardResult = GuardContext | GuardFailure
Guard = Callable[[GuardContext], GuardResult]


def run_guards(context: GuardContext, guards: Sequence[Guard]) -> GuardResult:
    for guard in guards:
        result = guard(context)
        if isinstance(result, GuardFailure):
            logger.info(f"guards: {result.guard} rejected request ({result.error.code})")
            return result
        context = result
    return context


def enforce(context: GuardContext, guards: Sequence[Guard]) -> GuardContext:
    """Run ``guards`` and raise the first failure's error."""

    result = run_guards(context, guards)
    if isinstance(result, GuardFailure):
        raise result.error
    return result


class RequestGuards:
    def __init__(self, *, users: UserRepository, free_todo_limit: int) -> None:
        self._users = users
        self._free_todo_limit = free_todo_limit

    def resolve_user(self, context: GuardContext) -> GuardResult:
        user = self._find_by_username(context.username)
        if user is None:
            return GuardFailure(
                "resolve_user", UserNotFoundError(context={"username": context.username})
            )
        return replace(context, user=user)

    def check_todo_quota(self, context: GuardContext) -> GuardResult:
        user = context.user
        if user is None:
            return GuardFailure(
                "check_todo_quota", UserNotFoundError(context={"username": context.username})
            )
        # Pro users bypass the quota entirely; the count is never consulted.
        if user.pro:
            return context
        if len(user.todos) >= self._free_todo_limit:
            return GuardFailure("check_todo_quota", TodoQuotaExceededError(self._free_todo_limit))
        return context

    def resolve_todo(self, context: GuardContext) -> GuardResult:
        todo_id = context.todo_id
        if not is_valid_uuid(todo_id):
            return GuardFailure("resolve_todo", InvalidTodoIdError(str(todo_id)))

        user = self._find_by_username(context.username)
        if user is None:
            return GuardFailure(
                "resolve_todo", UserNotFoundError(context={"username": context.username})
            )

        todo = user.find_todo(todo_id)
        if todo is None:
            return GuardFailure("resolve_todo", TodoNotFoundError(todo_id))

        return replace(context, user=user, todo=todo)

    def resolve_user_by_id(self, context: GuardContext) -> GuardResult:
        user = self._users.find_by_id(context.user_id) if context.user_id else None
        if user is None:
            return GuardFailure(
                "resolve_user_by_id", UserNotFoundError(context={"user_id": context.user_id})
            )
        return replace(context, user=user)

    def _find_by_username(self, username: str | None) -> User | None:
        if not username:
            return None
        return self._users.find_by_username(username)


__all__ = [
    "Guard",
    "GuardContext",
    "GuardFailure",
    "GuardResult",
    "RequestGuards",
    "enforce",
    "run_guards",
]
