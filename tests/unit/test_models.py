"""Unit tests for lookup result models."""

from __future__ import annotations

import json

import pytest

from geovet.classification import classify
from geovet.models import GeoLocation, LookupResult, NetworkInfo, ProviderType


@pytest.fixture
def full_result() -> LookupResult:
    """Successful result with network and classification data."""
    return LookupResult(
        input="one.one.one.one",
        ip="1.1.1.1",
        geo=GeoLocation(
            ip="1.1.1.1",
            country="Australia",
            country_code="AU",
            region="Queensland",
            city="South Brisbane",
            latitude=-27.4766,
            longitude=153.0166,
            timezone="Australia/Brisbane",
            postal_code="4101",
        ),
        network=NetworkInfo(asn=13335, org="Cloudflare, Inc."),
        classification=classify("1.1.1.1", asn=13335),
        provider=ProviderType.IPINFO,
    )


class TestProviderType:
    """Test provider parsing."""

    @pytest.mark.parametrize("value", ["local", "LOCAL", " Local "])
    def test_parse(self, value: str) -> None:
        assert ProviderType.parse(value) is ProviderType.LOCAL

    def test_parse_passthrough(self) -> None:
        assert ProviderType.parse(ProviderType.AUTO) is ProviderType.AUTO

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown provider: maxmind"):
            ProviderType.parse("maxmind")


class TestGeoLocation:
    """Test GeoLocation serialization."""

    def test_to_dict_omits_missing(self) -> None:
        geo = GeoLocation(ip="8.8.8.8", country_code="US")

        assert geo.to_dict() == {"ip": "8.8.8.8", "countryCode": "US"}

    def test_camel_case_keys(self) -> None:
        geo = GeoLocation(ip="8.8.8.8", postal_code="94035")

        assert geo.to_dict()["postalCode"] == "94035"

    def test_frozen(self) -> None:
        geo = GeoLocation(ip="8.8.8.8")

        with pytest.raises(AttributeError):
            geo.city = "Nowhere"  # type: ignore[misc]


class TestLookupResult:
    """Test LookupResult invariants and serialization."""

    def test_failure_has_only_ip_geo(self) -> None:
        result = LookupResult.failure("8.8.8.8", "8.8.8.8", ProviderType.LOCAL, "IP not found in database")

        assert not result.ok
        assert result.geo == GeoLocation(ip="8.8.8.8")
        assert result.network is None
        assert result.classification is None

    def test_to_dict_key_order(self, full_result: LookupResult) -> None:
        assert list(full_result.to_dict()) == ["input", "ip", "geo", "network", "cdn", "provider"]

    def test_to_dict_error(self) -> None:
        result = LookupResult.failure("nope.invalid", "", ProviderType.LOCAL, "Could not resolve: nope.invalid")

        assert result.to_dict() == {
            "input": "nope.invalid",
            "ip": "",
            "geo": {"ip": ""},
            "provider": "local",
            "error": "Could not resolve: nope.invalid",
        }

    def test_json_round_trip(self, full_result: LookupResult) -> None:
        """Serializing through JSON and parsing back yields an equal result."""
        restored = LookupResult.from_dict(json.loads(json.dumps(full_result.to_dict())))

        assert restored == full_result

    def test_network_org_only(self) -> None:
        assert NetworkInfo(org="Some Carrier").to_dict() == {"org": "Some Carrier"}
