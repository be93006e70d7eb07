"""CDN/cloud classification module.

This module flags addresses that belong to infrastructure whose geolocation
does not reflect the origin server:
- CDNs (Cloudflare, Akamai, Fastly, CloudFront): location is an edge server
- Cloud providers (AWS, GCP, Azure): location is a data-center region
- Hosting platforms and security edges (Vercel, Imperva)

Example:
    >>> from geovet.classification import classify
    >>> classify("93.184.216.34").is_cdn
    False
    >>> classify("203.0.113.9", hostname="example.herokuapp.com").provider
    'Heroku'
"""

from .classifier import CdnClassifier, classify, get_known_providers, get_rule_counts
from .models import ClassificationInfo, DetectionSignal, ProviderCategory

__all__ = [
    "CdnClassifier",
    "ClassificationInfo",
    "DetectionSignal",
    "ProviderCategory",
    "classify",
    "get_known_providers",
    "get_rule_counts",
]
