"""Base provider interface for geolocation sources.

This module defines the interface every geolocation provider implements so the
orchestrator can select and fall back between them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..models import LookupResult, ProviderType


class GeoProvider(ABC):
    """Base class for IP geolocation providers.

    Subclasses must implement:
        - is_available() -> bool: idempotent readiness check
        - lookup(ip: str) -> LookupResult: never raises; failures set ``error``

    Attributes:
        name: Provider identifier stamped on every result
    """

    name: ProviderType

    @abstractmethod
    def is_available(self) -> bool:
        """Check whether this provider can serve lookups right now."""

    @abstractmethod
    def lookup(self, ip: str) -> LookupResult:
        """Resolve one IP address to location and network data.

        Args:
            ip: IPv4 or IPv6 address

        Returns:
            LookupResult; on failure ``error`` is set and network data is absent
        """

    def _failure(self, ip: str, error: str) -> LookupResult:
        return LookupResult.failure(input=ip, ip=ip, provider=self.name, error=error)

    def close(self) -> None:
        """Release provider resources (no-op by default)."""

    def __enter__(self) -> GeoProvider:
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
