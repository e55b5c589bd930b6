# parked_domains/crawler/models.py
"""
Data models and errors of the fetch stage.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class PageData:
    """Final URL, HTTP status and decoded body of a fetched page."""

    url: str
    content: str
    status: int


class FetchError(Exception):
    """A single URL could not be fetched; *cause* holds the underlying error."""

    def __init__(self, url: str, cause: BaseException | str) -> None:
        super().__init__(f"{url}: {cause}")
        self.url = url
        self.cause = cause


class TooManyRedirects(FetchError):
    """A same-host redirect chain went past the configured hop limit."""

    def __init__(self, url: str, max_redirects: int) -> None:
        super().__init__(url, f"stopped after {max_redirects} redirects")
        self.max_redirects = max_redirects
