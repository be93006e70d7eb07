"""Data models for CDN/cloud classification.

This module provides the category and detection-signal enums and the immutable
classification verdict attached to lookup results.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class ProviderCategory(str, Enum):
    """Infrastructure categories.

    Attributes:
        CDN: Content delivery network; location is an edge server
        CLOUD: Cloud provider; location narrows to a data-center region
        HOSTING: Hosting/PaaS platform
        SECURITY: WAF or DDoS-protection edge
    """

    CDN = "cdn"
    CLOUD = "cloud"
    HOSTING = "hosting"
    SECURITY = "security"

    @property
    def location_note(self) -> str:
        """What the reported location actually points at for this category."""
        if self is ProviderCategory.CDN:
            return "edge server"
        if self is ProviderCategory.CLOUD:
            return "cloud region"
        return "provider location"


class DetectionSignal(str, Enum):
    """Which classification tier produced a match, strongest first."""

    ASN = "asn"
    HOSTNAME = "hostname"
    IP_PREFIX = "ip_prefix"

    @property
    def label(self) -> str:
        return {
            DetectionSignal.ASN: "ASN",
            DetectionSignal.HOSTNAME: "hostname",
            DetectionSignal.IP_PREFIX: "IP range",
        }[self]


@dataclass(slots=True, frozen=True)
class ClassificationInfo:
    """Immutable classification verdict.

    When ``is_cdn`` is False no other field is populated.

    Example:
        >>> info = ClassificationInfo.detected("Cloudflare", ProviderCategory.CDN, DetectionSignal.ASN)
        >>> info.note
        'Detected by ASN. Location shows edge server, not origin.'
    """

    is_cdn: bool
    provider: Optional[str] = None
    category: Optional[ProviderCategory] = None
    note: Optional[str] = None
    signal: Optional[DetectionSignal] = None

    @classmethod
    def detected(cls, provider: str, category: ProviderCategory, signal: DetectionSignal) -> ClassificationInfo:
        note = f"Detected by {signal.label}. Location shows {category.location_note}, not origin."
        return cls(is_cdn=True, provider=provider, category=category, note=note, signal=signal)

    @classmethod
    def not_detected(cls) -> ClassificationInfo:
        return cls(is_cdn=False)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"isCdn": self.is_cdn}
        if self.provider is not None:
            data["provider"] = self.provider
        if self.category is not None:
            data["type"] = self.category.value
        if self.note is not None:
            data["note"] = self.note
        if self.signal is not None:
            data["signal"] = self.signal.value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ClassificationInfo:
        category = data.get("type")
        signal = data.get("signal")
        return cls(
            is_cdn=bool(data.get("isCdn", False)),
            provider=data.get("provider"),
            category=ProviderCategory(category) if category is not None else None,
            note=data.get("note"),
            signal=DetectionSignal(signal) if signal is not None else None,
        )
