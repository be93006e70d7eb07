"""Unit tests for classification matchers."""

from __future__ import annotations

from geovet.classification.matchers import AsnMatcher, HostnameMatcher, IpPrefixMatcher, MatchHit
from geovet.classification.models import DetectionSignal, ProviderCategory


class TestAsnMatcher:
    """Test exact ASN matching."""

    def test_match(self) -> None:
        """A known ASN returns its provider."""
        matcher = AsnMatcher({64500: ("Example CDN", ProviderCategory.CDN)})

        assert matcher.match("192.0.2.1", asn=64500) == MatchHit("Example CDN", ProviderCategory.CDN)

    def test_missing_or_zero_asn(self) -> None:
        """No ASN (or ASN 0) never matches."""
        matcher = AsnMatcher()

        assert matcher.match("192.0.2.1") is None
        assert matcher.match("192.0.2.1", asn=0) is None

    def test_signal(self) -> None:
        assert AsnMatcher.signal == DetectionSignal.ASN


class TestHostnameMatcher:
    """Test hostname suffix matching."""

    def test_first_suffix_wins(self) -> None:
        """Suffix order is priority."""
        matcher = HostnameMatcher(
            [
                (".edge.example.net", "Edge", ProviderCategory.CDN),
                (".example.net", "Generic", ProviderCategory.HOSTING),
            ]
        )

        assert matcher.match("", hostname="a.edge.example.net").provider == "Edge"
        assert matcher.match("", hostname="a.example.net").provider == "Generic"

    def test_suffix_needs_label_boundary(self) -> None:
        """Suffixes include the leading dot, so a bare domain does not match."""
        matcher = HostnameMatcher([(".cloudfront.net", "Amazon CloudFront", ProviderCategory.CDN)])

        assert matcher.match("", hostname="notcloudfront.net") is None

    def test_no_hostname(self) -> None:
        assert HostnameMatcher().match("192.0.2.1") is None

    def test_providers(self) -> None:
        matcher = HostnameMatcher(
            [
                (".a.net", "A", ProviderCategory.CDN),
                (".b.net", "A", ProviderCategory.CDN),
            ]
        )

        assert matcher.providers() == {"A"}
        assert matcher.rule_count() == 2


class TestIpPrefixMatcher:
    """Test textual IP prefix matching."""

    def test_ipv4_prefix(self) -> None:
        matcher = IpPrefixMatcher([("198.51.", "Example", ProviderCategory.CLOUD)])

        assert matcher.match("198.51.100.7") == MatchHit("Example", ProviderCategory.CLOUD)
        assert matcher.match("198.5.1.1") is None

    def test_ipv6_normalized(self) -> None:
        """Expanded and uppercase IPv6 spellings are compressed before matching."""
        matcher = IpPrefixMatcher([("2001:db8:", "Doc", ProviderCategory.CDN)])

        assert matcher.match("2001:0DB8:0000:0000:0000:0000:0000:0001").provider == "Doc"

    def test_invalid_address_compared_verbatim(self) -> None:
        matcher = IpPrefixMatcher([("not-an-ip", "Odd", ProviderCategory.CDN)])

        assert matcher.match("not-an-ip-at-all").provider == "Odd"

    def test_empty_ip(self) -> None:
        assert IpPrefixMatcher().match("") is None
