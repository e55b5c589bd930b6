# File: parked_domains/classifier.py
"""Parked-page classifier: literal, case-sensitive signature matching on page bodies."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Iterable, Optional, Tuple

from parked_domains.utils import read_wordlist

if TYPE_CHECKING:
    from parked_domains.config import ScannerConfig

__all__ = ["DEFAULT_SIGNATURES", "SignatureSet"]

DEFAULT_SIGNATURES: Tuple[str, ...] = (
    "buy this domain",
    "parked free",
    "godaddy",
    "is for sale",
    "domain parking",
    "renew now",
    "this domain",
    "namecheap",
    "buy now for",
    "hugedomains",
    "is owned and listed by",
    "sav.com",
    "searchvity.com",
    "domain for sale",
    "register4less",
    "aplus.net",
    "related searches",
    "related links",
    "search ads",
    "domain expert",
    "united domains",
    "domian name has been registered",
    "this domain may be for sale",
    "domain name is available for sale",
    "premium domain",
    "this domain name",
    "this domain has expired",
    "domainpage.io",
    "sedoparking.com",
    "parking-lander",
)


class SignatureSet:
    """Immutable set of signature phrases.

    A body is parked if it contains any phrase as a substring. Phrases are
    literal text (``sav.com`` does not match ``savXcom``) and case-sensitive.
    """

    __slots__ = ("_phrases", "_pattern")

    def __init__(self, phrases: Iterable[str] = DEFAULT_SIGNATURES) -> None:
        self._phrases: Tuple[str, ...] = tuple(dict.fromkeys(p for p in phrases if p))
        self._pattern: Optional[re.Pattern[str]] = (
            re.compile("|".join(map(re.escape, self._phrases))) if self._phrases else None
        )

    @classmethod
    def from_config(cls, config: ScannerConfig) -> SignatureSet:
        """Configured phrases plus the lines of ``config.signatures_file``, if any."""
        phrases = list(config.signatures)
        if config.signatures_file is not None:
            phrases.extend(read_wordlist(config.signatures_file))
        return cls(phrases)

    @property
    def phrases(self) -> Tuple[str, ...]:
        return self._phrases

    def match(self, body: str) -> Optional[str]:
        """Returns the first phrase found in *body*, or None."""
        if self._pattern is None:
            return None
        found = self._pattern.search(body)
        return found.group(0) if found else None

    def is_parked(self, body: str) -> bool:
        return self.match(body) is not None

    def __len__(self) -> int:
        return len(self._phrases)

    def __repr__(self) -> str:
        return f"<SignatureSet phrases={len(self._phrases)}>"
