"""DNS resolution of lookup inputs.

Inputs that are already IP literals are used as-is. Hostnames are resolved via
A records first and AAAA records second, using dnspython.
"""

from __future__ import annotations

import ipaddress
import logging
import threading
from dataclasses import dataclass
from typing import List, Optional

import dns.exception
import dns.resolver

logger = logging.getLogger(__name__)


def is_ip_literal(value: str) -> bool:
    """Return True if value is a literal IPv4 or IPv6 address."""
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


@dataclass(slots=True, frozen=True)
class ResolvedAddress:
    """Outcome of resolving one input: an address or an error, never both."""

    ip: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.ip)


class DnsResolver:
    """Forward resolver with A-then-AAAA fallback.

    The system resolver configuration is read on the first hostname query, so
    IP literals never depend on it and a host without a usable configuration
    reports resolution failures instead of raising.

    Thread Safety:
        ``dns.resolver.Resolver.resolve`` holds no per-query state on the
        resolver object, so one instance serves concurrent batch workers.
    """

    def __init__(self, resolver: Optional[dns.resolver.Resolver] = None, lifetime: float = 5.0) -> None:
        """Initialize resolver.

        Args:
            resolver: dnspython resolver (default: system configuration, loaded on first use)
            lifetime: Total seconds allowed per query
        """
        self._resolver = resolver
        self.lifetime = lifetime
        self._lock = threading.Lock()

    @property
    def resolver(self) -> dns.resolver.Resolver:
        """The dnspython resolver.

        Raises:
            dns.resolver.NoResolverConfiguration: If the system configuration is unusable
        """
        if self._resolver is None:
            with self._lock:
                if self._resolver is None:
                    resolver = dns.resolver.Resolver()
                    resolver.lifetime = self.lifetime
                    self._resolver = resolver
        return self._resolver

    def _query(self, hostname: str, rdtype: str) -> List[str]:
        answers = self.resolver.resolve(hostname, rdtype)
        return [rdata.to_text() for rdata in answers]

    def resolve_a(self, hostname: str) -> List[str]:
        """Return IPv4 addresses for hostname.

        Raises:
            dns.exception.DNSException: If the query fails
        """
        return self._query(hostname, "A")

    def resolve_aaaa(self, hostname: str) -> List[str]:
        """Return IPv6 addresses for hostname.

        Raises:
            dns.exception.DNSException: If the query fails
        """
        return self._query(hostname, "AAAA")

    def resolve(self, value: str) -> ResolvedAddress:
        """Resolve an input to a single address.

        Args:
            value: IP literal or hostname

        Returns:
            ResolvedAddress with the first address found, or an error naming the input
        """
        if is_ip_literal(value):
            return ResolvedAddress(ip=value)

        for rdtype, query in (("A", self.resolve_a), ("AAAA", self.resolve_aaaa)):
            try:
                addresses = query(value)
            except dns.exception.DNSException as e:
                logger.debug(f"{rdtype} lookup failed for {value}: {e}")
                continue
            if addresses:
                logger.debug(f"Resolved {value} via {rdtype}: {addresses[0]}")
                return ResolvedAddress(ip=addresses[0])
            logger.debug(f"{rdtype} lookup for {value} returned no addresses")

        return ResolvedAddress(ip="", error=f"Could not resolve: {value}")
