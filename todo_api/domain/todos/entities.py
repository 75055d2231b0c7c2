# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, eq=False)
class Todo:
    """A to-do item owned by exactly one user.

    Equality is identity: removal from the owner's list must hit the
    resolved instance, never a look-alike.
    """

    id: str
    title: str
    deadline: datetime
    created_at: datetime
    done: bool = False

    def update(self, *, title: str, deadline: datetime) -> None:
        self.title = title
        self.deadline = deadline

    def mark_done(self) -> None:
        self.done = True
