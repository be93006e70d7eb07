"""MaxMind GeoLite2 offline database provider for geo/ASN lookups."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Set

import geoip2.database
import geoip2.errors

from ..models import GeoLocation, LookupResult, NetworkInfo, ProviderType
from .base import GeoProvider

logger = logging.getLogger(__name__)

CITY_DB_FILENAME = "GeoLite2-City.mmdb"
ASN_DB_FILENAME = "GeoLite2-ASN.mmdb"


@dataclass
class ReaderPair:
    """Opened readers for one data directory.

    Attributes:
        city: City database reader (always present once registered)
        asn: ASN database reader, None when GeoLite2-ASN.mmdb is absent
    """

    city: geoip2.database.Reader
    asn: Optional[geoip2.database.Reader] = None

    def close(self) -> None:
        self.city.close()
        if self.asn is not None:
            self.asn.close()


class ReaderRegistry:
    """Shared GeoLite2 readers keyed by data directory.

    Providers pointed at the same directory share one set of parsed readers.
    Opening is serialized by a lock, so concurrent first access parses each
    file once; afterwards readers are only read from.

    A directory without a City database is not registered, so a later call
    picks the files up once they have been downloaded.

    Usage:
        registry = ReaderRegistry()
        provider = LocalDatabaseProvider(Path("~/.geovet").expanduser(), registry)
        ...
        registry.close()
    """

    def __init__(self) -> None:
        self._readers: Dict[Path, ReaderPair] = {}
        self._missing: Set[Path] = set()
        self._lock = threading.Lock()

    @staticmethod
    def _key(data_dir: Path) -> Path:
        return Path(data_dir).expanduser().resolve()

    def get(self, data_dir: Path) -> Optional[ReaderPair]:
        """Get or open the readers for a data directory.

        Args:
            data_dir: Directory containing the GeoLite2 files

        Returns:
            ReaderPair, or None if the City database is missing or unreadable
        """
        key = self._key(data_dir)
        pair = self._readers.get(key)
        if pair is not None:
            return pair

        with self._lock:
            pair = self._readers.get(key)
            if pair is None:
                pair = self._open(key)
                if pair is not None:
                    self._readers[key] = pair
                    self._missing.discard(key)
        return pair

    def _open(self, data_dir: Path) -> Optional[ReaderPair]:
        city_path = data_dir / CITY_DB_FILENAME
        asn_path = data_dir / ASN_DB_FILENAME

        if not city_path.exists():
            # Warn once per directory
            if data_dir in self._missing:
                logger.debug(f"City database still missing: {city_path}")
            else:
                logger.warning(f"City database not found: {city_path}")
                self._missing.add(data_dir)
            return None

        try:
            city_reader = geoip2.database.Reader(str(city_path))
        except Exception as e:
            logger.error(f"Failed to open City database {city_path}: {e}")
            return None

        asn_reader: Optional[geoip2.database.Reader] = None
        if asn_path.exists():
            try:
                asn_reader = geoip2.database.Reader(str(asn_path))
            except Exception as e:
                logger.error(f"Failed to open ASN database {asn_path}: {e}")
        else:
            logger.info(f"ASN database not found, network data disabled: {asn_path}")

        logger.info(f"GeoLite2 readers opened for {data_dir}")
        return ReaderPair(city=city_reader, asn=asn_reader)

    def is_loaded(self, data_dir: Path) -> bool:
        return self._key(data_dir) in self._readers

    def close(self) -> None:
        """Close all readers and forget every directory."""
        with self._lock:
            for pair in self._readers.values():
                pair.close()
            self._readers.clear()
            self._missing.clear()
        logger.debug("GeoLite2 reader registry closed")

    reset = close

    def __enter__(self) -> ReaderRegistry:
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit - close readers."""
        self.close()


class LocalDatabaseProvider(GeoProvider):
    """Offline GeoLite2 provider.

    Database files:
        - GeoLite2-City.mmdb: country, subdivision, city, coordinates, time zone, postal code
        - GeoLite2-ASN.mmdb: ASN number and organization (optional)

    Usage:
        registry = ReaderRegistry()
        provider = LocalDatabaseProvider(data_dir=Path.home() / ".geovet", registry=registry)
        result = provider.lookup("8.8.8.8")
        if result.ok:
            print(f"Country: {result.geo.country}")
    """

    name = ProviderType.LOCAL

    def __init__(self, data_dir: Path, registry: ReaderRegistry) -> None:
        """Initialize provider.

        Args:
            data_dir: Directory containing GeoLite2 database files
            registry: Reader cache shared with other providers
        """
        self.data_dir = Path(data_dir).expanduser()
        self.registry = registry

        self.stats: Dict[str, int] = {
            'lookups': 0,
            'city_hits': 0,
            'asn_hits': 0,
            'not_found': 0,
            'errors': 0,
        }
        self._stats_lock = threading.Lock()

    @property
    def missing_database_message(self) -> str:
        return (
            f"GeoLite2 database not found at {self.data_dir}. "
            f"Download {CITY_DB_FILENAME} and {ASN_DB_FILENAME} into this directory "
            "(MaxMind license key required)."
        )

    def _count(self, key: str) -> None:
        with self._stats_lock:
            self.stats[key] += 1

    def is_available(self) -> bool:
        return self.registry.get(self.data_dir) is not None

    def lookup(self, ip: str) -> LookupResult:
        """Look up geo and ASN data for an IP address.

        Args:
            ip: IP address to look up (IPv4 or IPv6)

        Returns:
            LookupResult; errors for a missing database or an address not in it
        """
        self._count('lookups')

        readers = self.registry.get(self.data_dir)
        if readers is None:
            return self._failure(ip, self.missing_database_message)

        try:
            city_response = readers.city.city(ip)
        except geoip2.errors.AddressNotFoundError:
            logger.debug(f"IP {ip} not found in City database")
            self._count('not_found')
            return self._failure(ip, "IP not found in database")
        except Exception as e:
            logger.error(f"City lookup failed for {ip}: {e}")
            self._count('errors')
            return self._failure(ip, f"Lookup failed: {e}")

        self._count('city_hits')
        subdivisions = city_response.subdivisions
        geo = GeoLocation(
            ip=ip,
            country=city_response.country.name,
            country_code=city_response.country.iso_code,
            region=subdivisions[0].name if len(subdivisions) else None,
            city=city_response.city.name,
            latitude=city_response.location.latitude,
            longitude=city_response.location.longitude,
            timezone=city_response.location.time_zone,
            postal_code=city_response.postal.code,
        )

        return LookupResult(
            input=ip,
            ip=ip,
            geo=geo,
            network=self._lookup_network(readers, ip),
            provider=self.name,
        )

    def _lookup_network(self, readers: ReaderPair, ip: str) -> Optional[NetworkInfo]:
        """ASN enrichment; absence of the database or the address is not an error."""
        if readers.asn is None:
            return None

        try:
            asn_response = readers.asn.asn(ip)
        except geoip2.errors.AddressNotFoundError:
            logger.debug(f"IP {ip} not found in ASN database")
            return None
        except Exception as e:
            logger.debug(f"ASN lookup failed for {ip}: {e}")
            return None

        self._count('asn_hits')
        asn = asn_response.autonomous_system_number
        org = asn_response.autonomous_system_organization
        if asn is None and org is None:
            return None
        return NetworkInfo(asn=asn, org=org)

    def get_stats(self) -> Dict[str, int]:
        """Get provider statistics."""
        with self._stats_lock:
            return dict(self.stats)


__all__ = ['ASN_DB_FILENAME', 'CITY_DB_FILENAME', 'LocalDatabaseProvider', 'ReaderPair', 'ReaderRegistry']
