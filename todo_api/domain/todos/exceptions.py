# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from todo_api.shared.errors.base import DomainError


class TodoNotFoundError(DomainError):
    code = "todo_not_found"
    status = HTTPStatus.NOT_FOUND

    def __init__(self, todo_id: str) -> None:
        super().__init__(context={"todo_id": todo_id})


class InvalidTodoIdError(DomainError):
    code = "invalid_todo_id"
    status = HTTPStatus.BAD_REQUEST

    def __init__(self, todo_id: str) -> None:
        super().__init__(context={"todo_id": todo_id})


class TodoQuotaExceededError(DomainError):
    code = "todo_quota_exceeded"
    status = HTTPStatus.FORBIDDEN

    def __init__(self, limit: int) -> None:
        super().__init__(context={"limit": limit})
