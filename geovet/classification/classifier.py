"""CDN/cloud classification service.

This module provides the classifier that decides whether an address belongs to
CDN, cloud, hosting, or security-edge infrastructure, so a caller does not
mistake an edge server's location for the origin's.

Example:
    >>> from geovet.classification import classify
    >>> result = classify("1.1.1.1", asn=13335)
    >>> print(f"{result.category.value}: {result.provider}")
    cdn: Cloudflare
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from .matchers import AsnMatcher, HostnameMatcher, IpPrefixMatcher, SignalMatcher
from .models import ClassificationInfo, DetectionSignal

logger = logging.getLogger(__name__)

_RULE_COUNT_KEYS = {
    DetectionSignal.ASN: "asn",
    DetectionSignal.HOSTNAME: "hostname",
    DetectionSignal.IP_PREFIX: "ip",
}


class CdnClassifier:
    """Classify addresses using priority-ordered matchers.

    Tiers, first match wins:
    1. ASN (authoritative: identifies the network operator)
    2. Hostname suffix (only when the original input was a hostname)
    3. IP textual prefix (weakest, checked last)

    Thread Safety:
        Matchers hold immutable tables and the classifier keeps no state, so
        one instance can serve any number of concurrent lookups.
    """

    def __init__(self, matchers: Optional[Sequence[SignalMatcher]] = None) -> None:
        """Initialize classifier.

        Args:
            matchers: Matchers in priority order (default: ASN, hostname, IP prefix)
        """
        if matchers is None:
            matchers = (AsnMatcher(), HostnameMatcher(), IpPrefixMatcher())
        self.matchers = tuple(matchers)

    def classify(self, ip: str, asn: Optional[int] = None, hostname: Optional[str] = None) -> ClassificationInfo:
        """Classify an address.

        Args:
            ip: Resolved IP address string
            asn: Optional autonomous system number
            hostname: Optional original hostname (omit for IP-literal inputs)

        Returns:
            ClassificationInfo; ``is_cdn`` is False when no tier matched

        Example:
            >>> CdnClassifier().classify("203.0.113.9", hostname="d111.cloudfront.net").provider
            'Amazon CloudFront'
        """
        for matcher in self.matchers:
            hit = matcher.match(ip, asn, hostname)
            if hit is not None:
                logger.debug(f"{ip}: {hit.provider} ({hit.category.value}) matched by {matcher.signal.value}")
                return ClassificationInfo.detected(hit.provider, hit.category, matcher.signal)
        return ClassificationInfo.not_detected()

    def known_providers(self) -> List[str]:
        """Sorted display names from the ASN and hostname matchers."""
        names: set[str] = set()
        for matcher in self.matchers:
            if matcher.signal is not DetectionSignal.IP_PREFIX:
                names |= matcher.providers()
        return sorted(names)

    def rule_counts(self) -> Dict[str, int]:
        """Rule totals per tier, zero for tiers without a matcher."""
        counts = {key: 0 for key in _RULE_COUNT_KEYS.values()}
        for matcher in self.matchers:
            counts[_RULE_COUNT_KEYS[matcher.signal]] += matcher.rule_count()
        return counts


_default_classifier = CdnClassifier()


def classify(ip: str, asn: Optional[int] = None, hostname: Optional[str] = None) -> ClassificationInfo:
    """Classify an address with the default tables."""
    return _default_classifier.classify(ip, asn, hostname)


def get_known_providers() -> List[str]:
    """Return the sorted list of provider display names the default tables know."""
    return _default_classifier.known_providers()


def get_rule_counts() -> Dict[str, int]:
    """Return the number of detection rules per tier."""
    return _default_classifier.rule_counts()
