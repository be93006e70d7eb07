"""Runtime configuration for geovet lookups."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping

from .models import ProviderType

DEFAULT_DATA_DIR = Path.home() / ".geovet"

# Batch concurrency when none is configured
DEFAULT_CONCURRENCY = {
    ProviderType.LOCAL: 50,
    ProviderType.IPINFO: 10,
    ProviderType.AUTO: 10,
}

ProgressCallback = Callable[[int, int], None]


def _coerce_int(value: str | None, default: int | None) -> int | None:
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def _coerce_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value.strip())
    except ValueError:
        return default


def validate_concurrency(concurrency: int) -> int:
    """Return concurrency unchanged if it is at least 1.

    Raises:
        ValueError: If concurrency is below 1
    """
    if concurrency < 1:
        raise ValueError(f"concurrency must be >= 1, got {concurrency}")
    return concurrency


@dataclass(slots=True)
class LookupSettings:
    """Normalized lookup configuration shared by single and batch lookups."""

    provider: ProviderType = ProviderType.LOCAL
    api_key: str | None = None
    concurrency: int | None = None
    data_dir: Path = DEFAULT_DATA_DIR
    request_timeout: float = 10.0
    max_retries: int = 2
    on_progress: ProgressCallback | None = None

    def __post_init__(self) -> None:
        self.provider = ProviderType.parse(self.provider)
        self.data_dir = Path(self.data_dir).expanduser()
        if self.concurrency is not None:
            validate_concurrency(self.concurrency)
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")

    @property
    def effective_concurrency(self) -> int:
        """Configured concurrency, or the provider's default."""
        if self.concurrency is not None:
            return self.concurrency
        return DEFAULT_CONCURRENCY[self.provider]

    @classmethod
    def from_sources(
        cls,
        config: Mapping[str, Any] | None = None,
        env_prefix: str = "GEOVET_",
    ) -> "LookupSettings":
        """Build settings from defaults, optional config mapping, and environment variables.

        Precedence order (highest to lowest):
        1. Explicit config mapping values
        2. Environment variables
        3. Default values

        The API key additionally falls back to ``IPINFO_TOKEN``.

        Raises:
            ValueError: If the provider is unknown or concurrency is below 1
        """
        cfg: dict[str, Any] = {
            "provider": ProviderType.LOCAL,
            "api_key": None,
            "concurrency": None,
            "data_dir": DEFAULT_DATA_DIR,
            "request_timeout": 10.0,
            "max_retries": 2,
            "on_progress": None,
        }

        # Track which keys were explicitly provided in config
        config_keys: set[str] = set()
        if config:
            config_keys = {k for k, v in config.items() if v is not None}
            cfg.update({k: v for k, v in config.items() if v is not None})

        env = os.environ
        prefix = env_prefix.upper()

        if "provider" not in config_keys:
            provider_override = env.get(f"{prefix}PROVIDER")
            if provider_override:
                cfg["provider"] = provider_override

        if "api_key" not in config_keys:
            cfg["api_key"] = env.get(f"{prefix}API_KEY") or env.get("IPINFO_TOKEN") or None

        if "concurrency" not in config_keys:
            cfg["concurrency"] = _coerce_int(env.get(f"{prefix}CONCURRENCY"), None)

        if "data_dir" not in config_keys:
            data_dir_override = env.get(f"{prefix}DATA_DIR")
            if data_dir_override:
                cfg["data_dir"] = Path(data_dir_override)

        if "request_timeout" not in config_keys:
            cfg["request_timeout"] = _coerce_float(
                env.get(f"{prefix}REQUEST_TIMEOUT"), float(cfg["request_timeout"])
            )

        if "max_retries" not in config_keys:
            cfg["max_retries"] = _coerce_int(env.get(f"{prefix}MAX_RETRIES"), int(cfg["max_retries"]))

        return cls(**cfg)


def load_lookup_settings(
    config: Mapping[str, Any] | None = None,
    env_prefix: str = "GEOVET_",
) -> LookupSettings:
    """Convenience wrapper for callers that only hold a plain mapping."""
    return LookupSettings.from_sources(config=config, env_prefix=env_prefix)


__all__ = ["DEFAULT_CONCURRENCY", "DEFAULT_DATA_DIR", "LookupSettings", "load_lookup_settings", "validate_concurrency"]
