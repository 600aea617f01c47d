from __future__ import annotations

import os
import resource
import sys
import time
from pathlib import Path
from typing import Any

from persistence.repositories import AsyncOrderRepository, AsyncPostRepository

PROCESS_STARTED_AT = time.monotonic()


def process_uptime() -> float:
    """Seconds since this module was first imported (process start for the app)."""
    return time.monotonic() - PROCESS_STARTED_AT


def process_memory() -> dict[str, int]:
    usage = resource.getrusage(resource.RUSAGE_SELF)
    # ru_maxrss is bytes on macOS, kilobytes elsewhere
    maxrss = usage.ru_maxrss if sys.platform == "darwin" else usage.ru_maxrss * 1024
    memory = {"maxrss": int(maxrss)}

    statm = Path("/proc/self/statm")
    if statm.exists():
        pages = int(statm.read_text().split()[1])
        memory["rss"] = pages * os.sysconf("SC_PAGE_SIZE")
    return memory


class StatsAggregator:
    def __init__(self, posts: AsyncPostRepository, orders: AsyncOrderRepository) -> None:
        self._posts = posts
        self._orders = orders

    async def stats(self) -> dict[str, Any]:
        return {
            "postsCount": await self._posts.count(),
            "ordersCount": await self._orders.count(),
            "processUptime": process_uptime(),
            "processMemory": process_memory(),
        }
