# File: parked_domains/aggregator.py
"""parked_domains.aggregator: deduplication of matches and the scan report."""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass, field
from typing import List, Optional, Set

from parked_domains.logger import logger

__all__ = ["ScanReport", "ResultAggregator"]


@dataclass(slots=True)
class ScanReport:
    """Unique parked URLs in order of first discovery, plus run counters."""

    matches: List[str] = field(default_factory=list)
    scanned: int = 0
    errors: int = 0

    def json(self) -> str:
        """Compact JSON array of the matched URLs."""
        return json.dumps(self.matches, ensure_ascii=False, separators=(",", ":"))


class ResultAggregator:
    """
    Collects matches from the result stream, first arrival wins.

    The state is owned by the single consumer task, so no lock is taken.
    Discovery order depends on which worker finishes first and may differ
    between runs.
    """

    def __init__(self) -> None:
        self._seen: Set[str] = set()
        self.matches: List[str] = []

    def add(self, url: str) -> bool:
        """Records *url*; returns False if it was already seen."""
        if url in self._seen:
            return False
        self._seen.add(url)
        self.matches.append(url)
        return True

    async def consume(self, queue: asyncio.Queue[Optional[str]]) -> List[str]:
        """Drains *queue* until the ``None`` sentinel and returns the matches."""
        while True:
            url = await queue.get()
            try:
                if url is None:
                    break
                if not self.add(url):
                    logger.debug("Duplicate match skipped: %s", url)
            finally:
                queue.task_done()
        return self.matches
