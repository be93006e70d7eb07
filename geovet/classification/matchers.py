"""Signal matchers for classification.

This module provides the abstract base class and the three concrete matchers,
one per detection tier (ASN, hostname suffix, IP prefix). Matchers hold only
immutable tables and are safe to share across threads.
"""

from __future__ import annotations

import ipaddress
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Tuple

from .models import DetectionSignal, ProviderCategory
from .tables import ASN_PROVIDERS, HOSTNAME_SUFFIXES, IP_PREFIXES


@dataclass(slots=True, frozen=True)
class MatchHit:
    """A single matcher hit: provider display name and category."""

    provider: str
    category: ProviderCategory


class SignalMatcher(ABC):
    """Abstract base class for classification matchers.

    Subclasses must implement:
        - match(ip, asn, hostname) -> Optional[MatchHit]
        - rule_count() -> int
        - providers() -> set[str]

    Attributes:
        signal: Detection tier this matcher represents
    """

    signal: DetectionSignal

    @abstractmethod
    def match(self, ip: str, asn: Optional[int] = None, hostname: Optional[str] = None) -> Optional[MatchHit]:
        """Check the inputs against this matcher's table.

        Args:
            ip: Resolved IPv4 or IPv6 address
            asn: Autonomous system number, if known
            hostname: Original hostname, only when the input was not an IP literal

        Returns:
            MatchHit if matched, None otherwise
        """

    @abstractmethod
    def rule_count(self) -> int:
        """Number of rules in this matcher's table."""

    @abstractmethod
    def providers(self) -> set[str]:
        """Provider display names this matcher can report."""


class AsnMatcher(SignalMatcher):
    """Exact match on autonomous system number."""

    signal = DetectionSignal.ASN

    def __init__(self, table: Mapping[int, Tuple[str, ProviderCategory]] = ASN_PROVIDERS) -> None:
        self._table = table

    def match(self, ip: str, asn: Optional[int] = None, hostname: Optional[str] = None) -> Optional[MatchHit]:
        if not asn:
            return None
        entry = self._table.get(asn)
        if entry is None:
            return None
        return MatchHit(provider=entry[0], category=entry[1])

    def rule_count(self) -> int:
        return len(self._table)

    def providers(self) -> set[str]:
        return {name for name, _ in self._table.values()}


class HostnameMatcher(SignalMatcher):
    """Case-insensitive suffix match on the hostname; first suffix in order wins."""

    signal = DetectionSignal.HOSTNAME

    def __init__(self, suffixes: Sequence[Tuple[str, str, ProviderCategory]] = HOSTNAME_SUFFIXES) -> None:
        self._suffixes = tuple((suffix.lower(), name, category) for suffix, name, category in suffixes)

    def match(self, ip: str, asn: Optional[int] = None, hostname: Optional[str] = None) -> Optional[MatchHit]:
        if not hostname:
            return None
        # FQDNs may carry a trailing root dot
        candidate = hostname.strip().lower().rstrip(".")
        for suffix, name, category in self._suffixes:
            if candidate.endswith(suffix):
                return MatchHit(provider=name, category=category)
        return None

    def rule_count(self) -> int:
        return len(self._suffixes)

    def providers(self) -> set[str]:
        return {name for _, name, _ in self._suffixes}


class IpPrefixMatcher(SignalMatcher):
    """Textual prefix match on the address; first prefix in order wins.

    IPv6 addresses are compared in compressed lowercase form so that
    ``2606:4700:0:0::1`` and ``2606:4700::1`` classify the same way.
    """

    signal = DetectionSignal.IP_PREFIX

    def __init__(self, prefixes: Sequence[Tuple[str, str, ProviderCategory]] = IP_PREFIXES) -> None:
        self._prefixes = tuple(prefixes)

    @staticmethod
    def _normalize(ip: str) -> str:
        try:
            address = ipaddress.ip_address(ip.strip())
        except ValueError:
            return ip
        if address.version == 6:
            return address.compressed
        return str(address)

    def match(self, ip: str, asn: Optional[int] = None, hostname: Optional[str] = None) -> Optional[MatchHit]:
        if not ip:
            return None
        text = self._normalize(ip)
        for prefix, name, category in self._prefixes:
            if text.startswith(prefix):
                return MatchHit(provider=name, category=category)
        return None

    def rule_count(self) -> int:
        return len(self._prefixes)

    def providers(self) -> set[str]:
        return {name for _, name, _ in self._prefixes}
