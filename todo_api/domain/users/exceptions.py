# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from todo_api.shared.errors.base import DomainError


class UserAlreadyExistsError(DomainError):
    code = "username_taken"


class UserNotFoundError(DomainError):
    code = "user_not_found"
    status = HTTPStatus.NOT_FOUND


class AlreadyProError(DomainError):
    code = "already_pro"
