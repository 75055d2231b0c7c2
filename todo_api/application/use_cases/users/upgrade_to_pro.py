# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from todo_api.domain.users.entities import User


class UpgradeToProUseCase:
    def execute(self, user: User) -> User:
        user.upgrade_to_pro()
        return user
