"""Data models for geolocation lookups.

This module provides the immutable records produced by a lookup: the location
fields reported by a provider, the network owner, and the assembled result
that carries the classification verdict.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from .classification.models import ClassificationInfo


class ProviderType(str, Enum):
    """Provider identifiers.

    Attributes:
        LOCAL: Offline GeoLite2 databases on disk
        IPINFO: Remote ipinfo.io API
        AUTO: Try LOCAL first, fall back to IPINFO (never stamped on a result)
    """

    LOCAL = "local"
    IPINFO = "ipinfo"
    AUTO = "auto"

    @classmethod
    def parse(cls, value: str | ProviderType) -> ProviderType:
        """Coerce a string into a provider identifier.

        Raises:
            ValueError: If value names no known provider
        """
        if isinstance(value, ProviderType):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown provider: {value} (expected one of: {valid})") from None


# Python attribute name -> JSON key
_GEO_KEYS = {
    "ip": "ip",
    "country": "country",
    "country_code": "countryCode",
    "region": "region",
    "city": "city",
    "latitude": "latitude",
    "longitude": "longitude",
    "timezone": "timezone",
    "postal_code": "postalCode",
}


@dataclass(slots=True, frozen=True)
class GeoLocation:
    """Location data for a single address.

    Every field except ``ip`` is best-effort and depends on provider coverage.
    """

    ip: str
    country: Optional[str] = None
    country_code: Optional[str] = None
    region: Optional[str] = None
    city: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timezone: Optional[str] = None
    postal_code: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for attr, key in _GEO_KEYS.items():
            value = getattr(self, attr)
            if value is not None:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GeoLocation:
        return cls(**{attr: data.get(key) for attr, key in _GEO_KEYS.items() if key in data})


@dataclass(slots=True, frozen=True)
class NetworkInfo:
    """Network owner of an address. Either field may be present alone."""

    asn: Optional[int] = None
    org: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.asn is not None:
            data["asn"] = self.asn
        if self.org is not None:
            data["org"] = self.org
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> NetworkInfo:
        return cls(asn=data.get("asn"), org=data.get("org"))


@dataclass(slots=True, frozen=True)
class LookupResult:
    """Outcome of a single lookup.

    Attributes:
        input: Caller-supplied string (IP literal or hostname)
        ip: Resolved address, empty when resolution failed
        geo: Location data (only ``geo.ip`` is set on errors)
        provider: Concrete provider that served the data, never AUTO
        network: Network owner, if known
        classification: Present only when the address is CDN/cloud infrastructure
        cached: Reserved, always None
        error: Set if and only if no usable geo data was produced

    Example:
        >>> result = LookupResult(
        ...     input="8.8.8.8",
        ...     ip="8.8.8.8",
        ...     geo=GeoLocation(ip="8.8.8.8", country_code="US"),
        ...     provider=ProviderType.IPINFO,
        ... )
        >>> result.ok
        True
    """

    input: str
    ip: str
    geo: GeoLocation
    provider: ProviderType
    network: Optional[NetworkInfo] = None
    classification: Optional[ClassificationInfo] = None
    cached: Optional[bool] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, input: str, ip: str, provider: ProviderType, error: str) -> LookupResult:
        """Build an errored result with no network or classification data."""
        return cls(input=input, ip=ip, geo=GeoLocation(ip=ip), provider=provider, error=error)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready dict with unset optional fields omitted."""
        data: Dict[str, Any] = {
            "input": self.input,
            "ip": self.ip,
            "geo": self.geo.to_dict(),
        }
        if self.network is not None:
            data["network"] = self.network.to_dict()
        if self.classification is not None:
            data["cdn"] = self.classification.to_dict()
        data["provider"] = self.provider.value
        if self.cached is not None:
            data["cached"] = self.cached
        if self.error is not None:
            data["error"] = self.error
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LookupResult:
        network = data.get("network")
        classification = data.get("cdn")
        return cls(
            input=data["input"],
            ip=data["ip"],
            geo=GeoLocation.from_dict(data.get("geo", {})),
            provider=ProviderType.parse(data["provider"]),
            network=NetworkInfo.from_dict(network) if network is not None else None,
            classification=ClassificationInfo.from_dict(classification) if classification is not None else None,
            cached=data.get("cached"),
            error=data.get("error"),
        )


__all__ = ["GeoLocation", "LookupResult", "NetworkInfo", "ProviderType"]
