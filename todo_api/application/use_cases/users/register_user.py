# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from todo_api.domain.users.entities import User
from todo_api.domain.users.repositories import UserRepository
from todo_api.shared.utils.ids import new_id


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._users = users
        self._id_factory = id_factory

    def execute(self, name: str, username: str) -> User:
        """Register a free-plan user.

        Raises :class:`UserAlreadyExistsError` from the repository, which
        checks the username index and inserts under one lock.
        """

        user = User(id=self._id_factory(), name=name, username=username)
        return self._users.add(user)
