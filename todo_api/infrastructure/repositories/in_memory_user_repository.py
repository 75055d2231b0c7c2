# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Process-local user store."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from todo_api.domain.users.entities import User
from todo_api.domain.users.exceptions import UserAlreadyExistsError
from todo_api.domain.users.repositories import UserRepository
from todo_api.shared.logging import logger


class InMemoryUserRepository(UserRepository):
    """Users keyed by id with a secondary username index.

    State lives for the lifetime of the instance. One re-entrant lock guards
    every read and write; callers that need a guard check and a mutation to
    see the same snapshot wrap both in :meth:`transaction`.
    """

    def __init__(self) -> None:
        self._by_id: dict[str, User] = {}
        self._by_username: dict[str, str] = {}
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator[None]:
        with self._lock:
            yield

    def find_by_username(self, username: str) -> User | None:
        with self._lock:
            user_id = self._by_username.get(username)
            if user_id is None:
                return None
            return self._by_id.get(user_id)

    def find_by_id(self, user_id: str) -> User | None:
        with self._lock:
            return self._by_id.get(user_id)

    def add(self, user: User) -> User:
        with self._lock:
            if user.username in self._by_username:
                raise UserAlreadyExistsError(context={"username": user.username})
            self._by_id[user.id] = user
            self._by_username[user.username] = user.id
        logger.debug(f"users.store: added id={user.id} total={len(self)}")
        return user

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_id)
