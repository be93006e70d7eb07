"""Unit tests for classification models."""

from __future__ import annotations

import pytest

from geovet.classification.models import ClassificationInfo, DetectionSignal, ProviderCategory


class TestProviderCategory:
    """Test category notes."""

    @pytest.mark.parametrize(
        ("category", "note"),
        [
            (ProviderCategory.CDN, "edge server"),
            (ProviderCategory.CLOUD, "cloud region"),
            (ProviderCategory.HOSTING, "provider location"),
            (ProviderCategory.SECURITY, "provider location"),
        ],
    )
    def test_location_note(self, category: ProviderCategory, note: str) -> None:
        assert category.location_note == note


class TestClassificationInfo:
    """Test verdict construction and serialization."""

    def test_detected(self) -> None:
        info = ClassificationInfo.detected("Fastly", ProviderCategory.CDN, DetectionSignal.IP_PREFIX)

        assert info.is_cdn is True
        assert info.note == "Detected by IP range. Location shows edge server, not origin."

    def test_not_detected_serializes_flag_only(self) -> None:
        assert ClassificationInfo.not_detected().to_dict() == {"isCdn": False}

    def test_to_dict(self) -> None:
        info = ClassificationInfo.detected("Heroku", ProviderCategory.HOSTING, DetectionSignal.HOSTNAME)

        assert info.to_dict() == {
            "isCdn": True,
            "provider": "Heroku",
            "type": "hosting",
            "note": "Detected by hostname. Location shows provider location, not origin.",
            "signal": "hostname",
        }

    def test_from_dict(self) -> None:
        info = ClassificationInfo.detected("Akamai", ProviderCategory.CDN, DetectionSignal.ASN)

        assert ClassificationInfo.from_dict(info.to_dict()) == info
