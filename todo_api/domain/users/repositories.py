# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol

from .entities import User


class UserRepository(Protocol):
    def find_by_username(self, username: str) -> User | None: ...
    def find_by_id(self, user_id: str) -> User | None: ...
    def add(self, user: User) -> User: ...
    def transaction(self) -> AbstractContextManager[None]: ...
