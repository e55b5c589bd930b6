# File: parked_domains/utils.py
"""parked_domains.utils: helpers for input targets, hosts and wordlist-style files."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Collection, List, Sequence, TypeVar, Union
from urllib.parse import urlparse

from parked_domains.logger import logger

__all__: Sequence[str] = (
    "normalize_target",
    "extract_host",
    "read_wordlist",
    "remove_duplicates",
    "partition",
)

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")

T = TypeVar("T")


def normalize_target(target: str) -> str:
    """Trims whitespace and prefixes ``http://`` when no scheme is given."""
    target = target.strip()
    if target and not _SCHEME_RE.match(target):
        target = "http://" + target
    return target


def extract_host(url: str) -> str:
    """Returns the lowercased host (with port, without userinfo) of *url*."""
    netloc = urlparse(url).netloc
    return netloc.rpartition("@")[2].lower()


def read_wordlist(path: Union[str, Path]) -> List[str]:
    """Reads a newline-delimited file, returns non-empty stripped lines."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"File not found: {p}")
    words = [line.strip() for line in p.read_text(encoding="utf-8").splitlines() if line.strip()]
    logger.debug("Loaded %d entries from %s", len(words), p)
    return words


def remove_duplicates(items: Collection[str]) -> List[str]:
    """Removes duplicates, preserving the order of first occurrence."""
    unique = list(dict.fromkeys(items))
    removed = len(items) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate entries", removed)
    return unique


def partition(items: Sequence[T], parts: int) -> List[List[T]]:
    """Splits *items* round-robin into at most *parts* disjoint, non-empty chunks."""
    if parts < 1:
        raise ValueError("parts must be >= 1")
    return [list(items[i::parts]) for i in range(min(parts, len(items)))]
