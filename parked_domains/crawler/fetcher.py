# parked_domains/crawler/fetcher.py
"""
Fetcher module: a single GET per URL, following same-host redirects only.
"""
from __future__ import annotations

import asyncio
from typing import Optional
from urllib.parse import urljoin

from aiohttp import ClientError, ClientSession
from parked_domains.config import ScannerConfig
from parked_domains.crawler.models import FetchError, PageData, TooManyRedirects
from parked_domains.logger import logger
from parked_domains.utils import extract_host


def should_follow(url: str, location: str) -> bool:
    """A redirect is followed only to the same host or to its ``www.`` variant."""
    source = extract_host(url)
    target = extract_host(location)
    return source == target or "www." + source == target


def redirect_target(url: str, location: str) -> Optional[str]:
    """Absolute URL to follow for *location*, or None when it is not followable.

    An unparseable Location (``http://[::1/x``) is never followed.
    """
    try:
        target = urljoin(url, location)
        return target if should_follow(url, target) else None
    except ValueError:
        return None


class Fetcher:
    """Fetches a page body; redirects to other hosts are not followed.

    Timeout, TLS verification and the User-Agent header are properties of the
    shared ``ClientSession``; the fetcher itself holds no per-URL state.
    """

    def __init__(self, session: ClientSession, config: ScannerConfig) -> None:
        self.session = session
        self.config = config

    async def fetch(self, url: str) -> PageData:
        """
        Fetch *url* and return its body whatever the status code.

        Raises FetchError on network errors, timeouts and malformed URLs,
        TooManyRedirects when a same-host chain exceeds ``max_redirects``.
        """
        current = url
        hops = 0
        while True:
            try:
                async with self.session.get(current, allow_redirects=False) as resp:
                    location = resp.headers.get("Location")
                    if location:
                        target = redirect_target(current, location)
                        if target is not None:
                            hops += 1
                            if hops > self.config.max_redirects:
                                raise TooManyRedirects(url, self.config.max_redirects)
                            logger.debug("Redirect %s -> %s", current, target)
                            current = target
                            continue
                        logger.debug("Not following redirect %s -> %s", current, location)
                    text = await resp.text(errors="replace")
                    return PageData(current, text, resp.status)
            except asyncio.TimeoutError as exc:
                raise FetchError(current, "timeout") from exc
            except (ClientError, ValueError) as exc:
                raise FetchError(current, exc) from exc
