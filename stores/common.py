from __future__ import annotations

import time
from typing import Optional, Sequence


def now_ms(previous: int = 0) -> int:
    """Epoch milliseconds, never earlier than `previous` (clock may step back)."""
    return max(int(time.time() * 1000), int(previous or 0))


def next_selection(remaining_ids: Sequence[str], deleted_index: int) -> Optional[str]:
    """
    Which entity to select after the one at `deleted_index` was removed.
    Prefer whatever now sits at that index, else the one before it, else nothing.
    """
    if 0 <= deleted_index < len(remaining_ids):
        return remaining_ids[deleted_index]
    if 0 <= deleted_index - 1 < len(remaining_ids):
        return remaining_ids[deleted_index - 1]
    return None
