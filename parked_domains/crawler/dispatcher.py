# parked_domains/crawler/dispatcher.py
"""
Worker pool: each target is fetched and classified by exactly one worker.
"""
from __future__ import annotations

import asyncio
import time
from typing import List, Optional, Protocol, Sequence

from parked_domains.aggregator import ResultAggregator, ScanReport
from parked_domains.classifier import SignatureSet
from parked_domains.crawler.models import FetchError, PageData
from parked_domains.logger import logger
from parked_domains.utils import normalize_target, partition, remove_duplicates

__all__ = ("Dispatcher",)


class SupportsFetch(Protocol):
    async def fetch(self, url: str) -> PageData: ...


class Dispatcher:
    """Partitions the targets round-robin across ``threads`` asyncio workers."""

    def __init__(self, fetcher: SupportsFetch, signatures: SignatureSet, threads: int = 10) -> None:
        if threads < 1:
            raise ValueError("threads must be >= 1")
        self.fetcher = fetcher
        self.signatures = signatures
        self.threads = threads

    async def run(self, targets: Sequence[str]) -> ScanReport:
        urls = remove_duplicates([u for u in map(normalize_target, targets) if u])
        report = ScanReport(scanned=len(urls))
        logger.info("Scanning %d targets with %d workers", len(urls), self.threads)
        start = time.monotonic()

        # Bounded to the pool size; the consumer runs alongside the producers.
        queue: asyncio.Queue[Optional[str]] = asyncio.Queue(maxsize=self.threads)
        aggregator = ResultAggregator()
        consumer = asyncio.create_task(aggregator.consume(queue))
        workers = [
            asyncio.create_task(self._worker(n, chunk, queue, report))
            for n, chunk in enumerate(partition(urls, self.threads))
        ]
        try:
            await asyncio.gather(*workers)
            await queue.put(None)
            report.matches = await consumer
        finally:
            for task in (*workers, consumer):
                task.cancel()
            await asyncio.gather(*workers, consumer, return_exceptions=True)

        duration = time.monotonic() - start
        logger.info(
            "Done: %d parked, %d errors out of %d targets in %.2f s",
            len(report.matches), report.errors, report.scanned, duration,
        )
        return report

    async def _worker(
        self,
        n: int,
        urls: List[str],
        queue: asyncio.Queue[Optional[str]],
        report: ScanReport,
    ) -> None:
        for url in urls:
            try:
                page = await self.fetcher.fetch(url)
            except FetchError as exc:
                report.errors += 1
                logger.warning("Error loading URL: %s - %s", url, exc.cause)
                continue
            phrase = self.signatures.match(page.content)
            logger.debug("[worker %d] %s -> HTTP %s, %s", n, url, page.status, phrase or "not parked")
            if phrase is not None:
                await queue.put(url)
