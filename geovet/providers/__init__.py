"""Geolocation providers: offline GeoLite2 databases and the ipinfo.io API."""

from .base import GeoProvider
from .ipinfo import IpinfoProvider
from .local import LocalDatabaseProvider, ReaderRegistry

__all__ = ["GeoProvider", "IpinfoProvider", "LocalDatabaseProvider", "ReaderRegistry"]
