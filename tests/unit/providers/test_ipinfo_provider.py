"""Unit tests for the ipinfo.io provider."""

from __future__ import annotations

from typing import Callable
from unittest.mock import MagicMock, Mock

import pytest
import requests

from geovet.models import NetworkInfo, ProviderType
from geovet.providers.ipinfo import RATE_LIMIT_MESSAGE, IpinfoProvider, parse_loc, parse_org
from geovet.retry import RetryPolicy

GOOGLE_DNS = {
    "ip": "8.8.8.8",
    "hostname": "dns.google",
    "city": "Mountain View",
    "region": "California",
    "country": "US",
    "loc": "37.4056,-122.0775",
    "org": "AS15169 Google LLC",
    "postal": "94043",
    "timezone": "America/Los_Angeles",
}


@pytest.fixture
def sleep() -> Mock:
    return Mock()


@pytest.fixture
def provider(mock_session: MagicMock, sleep: Mock) -> IpinfoProvider:
    """Provider with a mocked session and no real sleeping."""
    return IpinfoProvider(session=mock_session, retry_policy=RetryPolicy(max_retries=2, sleep=sleep))


class TestParsers:
    """Test org and loc parsing."""

    def test_org_with_asn(self) -> None:
        assert parse_org("AS15169 Google LLC") == NetworkInfo(asn=15169, org="Google LLC")

    def test_org_without_asn(self) -> None:
        assert parse_org("Some Carrier") == NetworkInfo(org="Some Carrier")

    def test_org_missing(self) -> None:
        assert parse_org(None) is None
        assert parse_org("") is None

    def test_loc(self) -> None:
        assert parse_loc("37.4056,-122.0775") == (37.4056, -122.0775)

    @pytest.mark.parametrize("loc", [None, "", "north,west", "1,2,3"])
    def test_loc_unparseable(self, loc: str | None) -> None:
        assert parse_loc(loc) == (None, None)


class TestIpinfoLookup:
    """Test HTTP handling."""

    def test_success(self, provider: IpinfoProvider, mock_session: MagicMock, make_response: Callable) -> None:
        """Test a full response maps onto the result."""
        mock_session.get.return_value = make_response(200, GOOGLE_DNS)

        result = provider.lookup("8.8.8.8")

        assert result.ok
        assert result.provider == ProviderType.IPINFO
        assert result.geo.country_code == "US"
        assert result.geo.country is None
        assert result.geo.region == "California"
        assert result.geo.city == "Mountain View"
        assert result.geo.latitude == 37.4056
        assert result.geo.longitude == -122.0775
        assert result.geo.postal_code == "94043"
        assert result.geo.timezone == "America/Los_Angeles"
        assert result.network == NetworkInfo(asn=15169, org="Google LLC")

    def test_request_shape(self, mock_session: MagicMock, make_response: Callable) -> None:
        """Test URL, token and headers."""
        mock_session.get.return_value = make_response(200, GOOGLE_DNS)
        provider = IpinfoProvider(api_key="secret", timeout=3.0, session=mock_session)

        provider.lookup("8.8.8.8")

        args, kwargs = mock_session.get.call_args
        assert args[0] == "https://ipinfo.io/8.8.8.8/json"
        assert kwargs["params"] == {"token": "secret"}
        assert kwargs["timeout"] == 3.0
        assert kwargs["headers"]["Accept"] == "application/json"
        assert kwargs["headers"]["User-Agent"].startswith("geovet/")

    def test_no_token_without_key(self, provider: IpinfoProvider, mock_session: MagicMock, make_response: Callable) -> None:
        mock_session.get.return_value = make_response(200, GOOGLE_DNS)

        provider.lookup("8.8.8.8")

        assert mock_session.get.call_args.kwargs["params"] is None

    def test_rate_limited_not_retried(
        self, provider: IpinfoProvider, mock_session: MagicMock, sleep: Mock, make_response: Callable
    ) -> None:
        """Test 429 fails at once, without retries."""
        mock_session.get.return_value = make_response(429, reason="Too Many Requests")

        result = provider.lookup("8.8.8.8")

        assert result.error == RATE_LIMIT_MESSAGE
        assert "Rate limit" in result.error
        assert result.network is None
        assert mock_session.get.call_count == 1
        sleep.assert_not_called()
        assert provider.stats['rate_limited'] == 1

    def test_client_error_not_retried(
        self, provider: IpinfoProvider, mock_session: MagicMock, make_response: Callable
    ) -> None:
        mock_session.get.return_value = make_response(403, reason="Forbidden")

        result = provider.lookup("8.8.8.8")

        assert result.error == "API error: 403 Forbidden"
        assert mock_session.get.call_count == 1

    def test_server_error_retried_then_succeeds(
        self, provider: IpinfoProvider, mock_session: MagicMock, sleep: Mock, make_response: Callable
    ) -> None:
        """Test 5xx responses are retried with linear backoff."""
        mock_session.get.side_effect = [
            make_response(502, reason="Bad Gateway"),
            make_response(200, GOOGLE_DNS),
        ]

        result = provider.lookup("8.8.8.8")

        assert result.ok
        assert mock_session.get.call_count == 2
        sleep.assert_called_once_with(1.0)

    def test_server_error_exhausted(
        self, provider: IpinfoProvider, mock_session: MagicMock, sleep: Mock, make_response: Callable
    ) -> None:
        mock_session.get.return_value = make_response(503, reason="Service Unavailable")

        result = provider.lookup("8.8.8.8")

        assert result.error == "API error: 503 Service Unavailable"
        assert mock_session.get.call_count == 3
        assert [call.args[0] for call in sleep.call_args_list] == [1.0, 2.0]

    def test_network_error(self, provider: IpinfoProvider, mock_session: MagicMock) -> None:
        """Test network failures are retried and reported."""
        mock_session.get.side_effect = requests.ConnectionError("connection refused")

        result = provider.lookup("8.8.8.8")

        assert result.error == "Request failed: connection refused"
        assert mock_session.get.call_count == 3

    def test_timeout(self, provider: IpinfoProvider, mock_session: MagicMock) -> None:
        mock_session.get.side_effect = requests.Timeout("read timed out")

        assert provider.lookup("8.8.8.8").error == "Request failed: read timed out"

    def test_invalid_json(self, provider: IpinfoProvider, mock_session: MagicMock, make_response: Callable) -> None:
        mock_session.get.return_value = make_response(200, ValueError("Expecting value"))

        result = provider.lookup("8.8.8.8")

        assert result.error is not None
        assert result.error.startswith("Invalid response")
        assert mock_session.get.call_count == 1

    def test_bogon(self, provider: IpinfoProvider, mock_session: MagicMock, make_response: Callable) -> None:
        """Test reserved addresses yield geo with only the IP."""
        mock_session.get.return_value = make_response(200, {"ip": "10.0.0.1", "bogon": True})

        result = provider.lookup("10.0.0.1")

        assert result.ok
        assert result.geo.to_dict() == {"ip": "10.0.0.1"}
        assert result.network is None

    def test_org_without_asn(self, provider: IpinfoProvider, mock_session: MagicMock, make_response: Callable) -> None:
        mock_session.get.return_value = make_response(200, {"ip": "192.0.2.1", "org": "Some Carrier"})

        result = provider.lookup("192.0.2.1")

        assert result.network == NetworkInfo(org="Some Carrier")


class TestIpinfoSession:
    """Test session ownership."""

    def test_always_available(self, provider: IpinfoProvider) -> None:
        assert provider.is_available()

    def test_injected_session_not_closed(self, mock_session: MagicMock) -> None:
        IpinfoProvider(session=mock_session).close()

        mock_session.close.assert_not_called()

    def test_owned_session_closed(self) -> None:
        provider = IpinfoProvider()
        provider.session = MagicMock()

        provider.close()

        provider.session.close.assert_called_once()


class TestIpinfoStats:
    """Test provider statistics."""

    def test_counts_lookups(self, provider: IpinfoProvider, mock_session: MagicMock, make_response: Callable) -> None:
        mock_session.get.side_effect = [make_response(200, GOOGLE_DNS), make_response(429, reason="Too Many Requests")]

        provider.lookup("8.8.8.8")
        provider.lookup("8.8.4.4")
        stats = provider.get_stats()

        assert stats['lookups'] == 2
        assert stats['api_success'] == 1
        assert stats['api_failures'] == 1
        assert stats['rate_limited'] == 1
        assert stats['bogons'] == 0

    def test_returns_copy(self, provider: IpinfoProvider) -> None:
        """Test mutating the returned dict leaves the provider's counters alone."""
        stats = provider.get_stats()
        stats['lookups'] = 99

        assert provider.get_stats()['lookups'] == 0
