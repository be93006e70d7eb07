"""ipinfo.io remote provider.

API Documentation:
    https://ipinfo.io/developers

Response Format:
    {
        "ip": "8.8.8.8",
        "hostname": "dns.google",
        "city": "Mountain View",
        "region": "California",
        "country": "US",             # ISO 3166-1 alpha-2 code
        "loc": "37.4056,-122.0775",  # "lat,lon"
        "org": "AS15169 Google LLC",
        "postal": "94043",
        "timezone": "America/Los_Angeles"
    }

Reserved addresses come back as ``{"ip": "10.0.0.1", "bogon": true}``.

Rate Limit: 50,000 requests/month without a token
"""

from __future__ import annotations

import logging
import re
import threading
from typing import Any, Dict, Mapping, Optional, Tuple

import requests

from .. import get_version
from ..models import GeoLocation, LookupResult, NetworkInfo, ProviderType
from ..retry import AttemptOutcome, RetryPolicy, is_retryable_status
from .base import GeoProvider

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Consider using the local provider or set IPINFO_TOKEN"

_ORG_PATTERN = re.compile(r"^AS(\d+)\s+(.*)$")


def parse_org(org: Optional[str]) -> Optional[NetworkInfo]:
    """Split an ipinfo ``org`` field into ASN and organization.

    Examples:
        >>> parse_org("AS15169 Google LLC")
        NetworkInfo(asn=15169, org='Google LLC')
        >>> parse_org("Some Carrier")
        NetworkInfo(asn=None, org='Some Carrier')
    """
    if not org:
        return None
    match = _ORG_PATTERN.match(org)
    if match:
        return NetworkInfo(asn=int(match.group(1)), org=match.group(2))
    return NetworkInfo(org=org)


def parse_loc(loc: Optional[str]) -> Tuple[Optional[float], Optional[float]]:
    """Parse ``"lat,lon"``; anything unparseable yields ``(None, None)``."""
    if not loc:
        return None, None
    parts = loc.split(",")
    if len(parts) != 2:
        return None, None
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        return None, None


class IpinfoProvider(GeoProvider):
    """ipinfo.io JSON API provider with timeout and bounded retries.

    Retry behaviour:
        - 429: fails immediately with a rate-limit message
        - Other 4xx: fails immediately with ``API error: <status> <reason>``
        - 5xx and network/timeout errors: retried per ``retry_policy``

    Usage:
        provider = IpinfoProvider(api_key=os.environ.get("IPINFO_TOKEN"))
        result = provider.lookup("8.8.8.8")
        if result.ok:
            print(f"{result.geo.city}, {result.geo.country_code}")
    """

    name = ProviderType.IPINFO

    API_BASE_URL = "https://ipinfo.io"
    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        retry_policy: Optional[RetryPolicy] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize provider.

        Args:
            api_key: ipinfo token (optional; raises the free-tier limits)
            timeout: Seconds allowed per HTTP attempt
            retry_policy: Retry loop for transient failures (default: 2 retries, linear backoff)
            session: HTTP session to reuse; one is created and owned otherwise
        """
        self.api_key = api_key
        self.timeout = timeout
        self.retry_policy = retry_policy or RetryPolicy(max_retries=2)
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.headers = {
            "Accept": "application/json",
            "User-Agent": f"geovet/{get_version()}",
        }

        self.stats: Dict[str, int] = {
            'lookups': 0,
            'api_success': 0,
            'api_failures': 0,
            'rate_limited': 0,
            'bogons': 0,
        }
        self._stats_lock = threading.Lock()

    def _count(self, key: str) -> None:
        with self._stats_lock:
            self.stats[key] += 1

    def is_available(self) -> bool:
        return True

    def get_stats(self) -> Dict[str, int]:
        """Get provider statistics."""
        with self._stats_lock:
            return dict(self.stats)

    def lookup(self, ip: str) -> LookupResult:
        """Look up an IP address via the ipinfo.io API.

        Args:
            ip: IP address to look up (IPv4 or IPv6)

        Returns:
            LookupResult; HTTP and network failures are reported in ``error``
        """
        self._count('lookups')

        outcome = self.retry_policy.run(lambda attempt: self._request(ip, attempt))
        if not outcome.ok:
            self._count('api_failures')
            return self._failure(ip, outcome.error or "Request failed")

        self._count('api_success')
        return self._parse(ip, outcome.value or {})

    def _request(self, ip: str, attempt: int) -> AttemptOutcome[Dict[str, Any]]:
        url = f"{self.API_BASE_URL}/{ip}/json"
        params = {"token": self.api_key} if self.api_key else None

        try:
            response = self.session.get(url, params=params, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.debug(f"ipinfo request for {ip} failed on attempt {attempt + 1}: {e}")
            return AttemptOutcome.failure(f"Request failed: {e}", retryable=True)

        if response.status_code == 429:
            logger.warning(f"ipinfo rate limit hit for {ip}")
            self._count('rate_limited')
            return AttemptOutcome.failure(RATE_LIMIT_MESSAGE)

        if not response.ok:
            error = f"API error: {response.status_code} {response.reason}"
            logger.debug(f"ipinfo returned {response.status_code} for {ip} on attempt {attempt + 1}")
            return AttemptOutcome.failure(error, retryable=is_retryable_status(response.status_code))

        try:
            data = response.json()
        except ValueError as e:
            return AttemptOutcome.failure(f"Invalid response: {e}")
        if not isinstance(data, dict):
            return AttemptOutcome.failure("Invalid response: expected a JSON object")

        return AttemptOutcome.success(data)

    def _parse(self, ip: str, data: Mapping[str, Any]) -> LookupResult:
        if data.get("bogon"):
            logger.debug(f"ipinfo reports {ip} as bogon")
            self._count('bogons')
            return LookupResult(input=ip, ip=ip, geo=GeoLocation(ip=ip), provider=self.name)

        latitude, longitude = parse_loc(data.get("loc"))
        geo = GeoLocation(
            ip=ip,
            country_code=data.get("country") or None,
            region=data.get("region") or None,
            city=data.get("city") or None,
            latitude=latitude,
            longitude=longitude,
            timezone=data.get("timezone") or None,
            postal_code=data.get("postal") or None,
        )
        return LookupResult(
            input=ip,
            ip=ip,
            geo=geo,
            network=parse_org(data.get("org")),
            provider=self.name,
        )

    def close(self) -> None:
        """Close the HTTP session if this provider created it."""
        if self._owns_session:
            self.session.close()


__all__ = ['IpinfoProvider', 'RATE_LIMIT_MESSAGE', 'parse_loc', 'parse_org']
