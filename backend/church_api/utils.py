"""Time and identifier helpers shared by the services."""

import datetime as dt
import time
from typing import Iterable, Optional


def epoch_millis() -> int:
    """Current time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def utc_now_iso() -> str:
    """ISO datetime in UTC with millisecond precision and a trailing Z."""
    now = dt.datetime.now(dt.timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def next_record_id(existing_ids: Iterable[int], now_ms: int) -> int:
    """
    Millisecond-shaped id that is unique within one collection.

    Normally the creation time itself. When another record already holds that
    value (two creates within the same millisecond), the id moves past the
    largest id in use.
    """
    taken = set(existing_ids)
    if now_ms not in taken:
        return now_ms
    return max(taken) + 1


def parse_record_id(raw: str) -> Optional[int]:
    """Path segment → integer id, or None when it is not a plain integer."""
    try:
        return int(raw.strip())
    except (TypeError, ValueError):
        return None
