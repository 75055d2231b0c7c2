# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
import uuid

# Hyphenated RFC 4122 form, versions 1-5, plus the nil UUID.
_UUID_RE = re.compile(
    r"^(?:[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"
    r"|00000000-0000-0000-0000-000000000000)$",
    re.IGNORECASE,
)


def new_id() -> str:
    return str(uuid.uuid4())


def is_valid_uuid(value: object) -> bool:
    return isinstance(value, str) and _UUID_RE.match(value) is not None


__all__ = ["is_valid_uuid", "new_id"]
