# === FILE: parked_domains/scanner.py ===
"""
Entry point of a scan: builds the HTTP session and runs the worker pool.
"""
from typing import Sequence

from aiohttp import ClientSession, ClientTimeout, TCPConnector

from parked_domains.aggregator import ScanReport
from parked_domains.classifier import SignatureSet
from parked_domains.config import ScannerConfig
from parked_domains.crawler.dispatcher import Dispatcher
from parked_domains.crawler.fetcher import Fetcher


async def start_scan(cfg: ScannerConfig, targets: Sequence[str]) -> ScanReport:
    """
    Fetches every target once and returns the report of parked ones.

    Parameters
    ----------
    cfg : ScannerConfig
        Scan configuration.
    targets : Sequence[str]
        Domains or URLs, as given by the user.

    Returns
    -------
    ScanReport
        Unique parked URLs in discovery order, plus counters.
    """
    signatures = SignatureSet.from_config(cfg)
    if cfg.insecure:
        connector = TCPConnector(limit=cfg.threads, ssl=False)
    else:
        connector = TCPConnector(limit=cfg.threads)
    async with ClientSession(
        connector=connector,
        timeout=ClientTimeout(total=cfg.timeout),
        headers={"User-Agent": cfg.user_agent},
        raise_for_status=False,
    ) as session:
        dispatcher = Dispatcher(Fetcher(session, cfg), signatures, cfg.threads)
        return await dispatcher.run(targets)

__all__ = ["start_scan"]
