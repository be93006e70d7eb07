"""IP and hostname geolocation with CDN/cloud edge detection."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Return the installed package version or a development marker."""
    try:
        return version("geovet")
    except PackageNotFoundError:
        return "0.0.0-dev"


# Submodules read get_version at import time, so it is defined first
from .classification import ClassificationInfo, classify, get_known_providers, get_rule_counts  # noqa: E402
from .database import get_db_status  # noqa: E402
from .formatter import format_result, format_results, format_summary  # noqa: E402
from .lookup import Geovet, lookup, lookup_batch  # noqa: E402
from .models import GeoLocation, LookupResult, NetworkInfo, ProviderType  # noqa: E402
from .settings import LookupSettings  # noqa: E402

__all__ = [
    "ClassificationInfo",
    "GeoLocation",
    "Geovet",
    "LookupResult",
    "LookupSettings",
    "NetworkInfo",
    "ProviderType",
    "classify",
    "format_result",
    "format_results",
    "format_summary",
    "get_db_status",
    "get_known_providers",
    "get_rule_counts",
    "get_version",
    "lookup",
    "lookup_batch",
]
