"""
Step timing for the Atlas CRUD demo.

Each network-bound step is wrapped in `profile_block` so its wall-clock
duration can be reported next to its outcome.

Usage:
    from atlas_crud.utils.profiler import profile_block

    with profile_block("create") as stats:
        await collection.insert_one(doc)

    print(stats.duration_seconds)
"""

from __future__ import annotations

import contextlib
import time
from dataclasses import dataclass, field
from typing import Any, Generator


@dataclass
class ProfileStats:
    """
    Container for timing measurements.
    """

    label: str
    start_ts: float = field(default=0.0)
    end_ts: float = field(default=0.0)
    duration_seconds: float = field(default=0.0)
    extra: dict[str, Any] = field(default_factory=dict)


@contextlib.contextmanager
def profile_block(label: str) -> Generator[ProfileStats, None, None]:
    """
    Context manager measuring the wall-clock duration of a block.

    The stats are filled in when the block exits, including when it raises.
    Awaiting inside the block is fine: the measurement covers the time the
    caller spent suspended on the network call.
    """
    stats = ProfileStats(label=label)
    stats.start_ts = time.perf_counter()
    try:
        yield stats
    finally:
        stats.end_ts = time.perf_counter()
        stats.duration_seconds = stats.end_ts - stats.start_ts


__all__ = ["ProfileStats", "profile_block"]
