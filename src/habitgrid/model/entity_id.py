# SPDX-License-Identifier: MIT

import time
from typing import TypeAlias

EntityId: TypeAlias = str

_last_generated_ms = 0


def generate_entity_id(prefix: str) -> EntityId:
    """Generate a time based id such as `habit_1718000000000`.

    Ids are never handed out twice within a process: when two ids are
    requested in the same millisecond the second one is bumped forward.
    """
    global _last_generated_ms

    now_ms = time.time_ns() // 1_000_000
    if now_ms <= _last_generated_ms:
        now_ms = _last_generated_ms + 1
    _last_generated_ms = now_ms
    return f"{prefix}_{now_ms}"
