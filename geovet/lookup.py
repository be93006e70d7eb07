"""Lookup orchestration: resolve, query a provider, classify.

The :class:`Geovet` orchestrator runs the single-lookup pipeline

    resolve address -> select provider -> provider lookup -> [fallback] -> classify

and fans it out over a thread pool for batches. Every failure inside one
lookup becomes ``LookupResult.error``, so a batch never aborts part-way.

Usage:
    from geovet import LookupSettings, ProviderType, lookup

    result = lookup("1.1.1.1", LookupSettings(provider=ProviderType.IPINFO))
    if result.classification:
        print(result.classification.note)
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Optional

import requests

from .classification import CdnClassifier
from .models import LookupResult, ProviderType
from .providers import GeoProvider, IpinfoProvider, LocalDatabaseProvider, ReaderRegistry
from .resolver import DnsResolver, is_ip_literal
from .retry import RetryPolicy
from .settings import LookupSettings, ProgressCallback, validate_concurrency
from .telemetry import start_span

logger = logging.getLogger(__name__)


class Geovet:
    """Lookup orchestrator owning providers, reader cache and resolver.

    Usage:
        settings = LookupSettings.from_sources({"provider": "auto"})
        with Geovet(settings) as geovet:
            result = geovet.lookup("example.com")
            results = geovet.lookup_batch(["1.1.1.1", "8.8.8.8"])
    """

    def __init__(
        self,
        settings: Optional[LookupSettings] = None,
        registry: Optional[ReaderRegistry] = None,
        resolver: Optional[DnsResolver] = None,
        classifier: Optional[CdnClassifier] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize orchestrator.

        Args:
            settings: Lookup configuration (default: from environment)
            registry: GeoLite2 reader cache; an owned one is created if omitted
            resolver: DNS resolver (default: system configuration)
            classifier: CDN/cloud classifier (default: built-in tables)
            session: HTTP session for the ipinfo provider
        """
        self.settings = settings or LookupSettings.from_sources()
        self._owns_registry = registry is None
        self.registry = registry or ReaderRegistry()
        self.resolver = resolver or DnsResolver()
        self.classifier = classifier or CdnClassifier()
        self.session = session

        self._providers: Dict[ProviderType, GeoProvider] = {}
        self._providers_lock = threading.Lock()

    def get_provider(self, kind: ProviderType) -> GeoProvider:
        """Return the provider instance for a concrete provider type, building it once."""
        with self._providers_lock:
            provider = self._providers.get(kind)
            if provider is None:
                provider = self._build_provider(kind)
                self._providers[kind] = provider
            return provider

    def _build_provider(self, kind: ProviderType) -> GeoProvider:
        if kind is ProviderType.LOCAL:
            return LocalDatabaseProvider(data_dir=self.settings.data_dir, registry=self.registry)
        if kind is ProviderType.IPINFO:
            return IpinfoProvider(
                api_key=self.settings.api_key,
                timeout=self.settings.request_timeout,
                retry_policy=RetryPolicy(max_retries=self.settings.max_retries),
                session=self.session,
            )
        raise ValueError(f"No provider implementation for {kind.value}")

    @property
    def _unresolved_provider(self) -> ProviderType:
        # auto is a strategy, never stamped on a result
        if self.settings.provider is ProviderType.AUTO:
            return ProviderType.LOCAL
        return self.settings.provider

    def lookup(self, value: str) -> LookupResult:
        """Look up a single IP address or hostname.

        Args:
            value: IP literal or hostname, echoed back as ``result.input``

        Returns:
            LookupResult; never raises for per-lookup failures
        """
        attributes = {"geovet.input": value, "geovet.provider": self.settings.provider.value}
        with start_span("geovet.lookup", attributes) as span:
            try:
                result = self._lookup(value)
            except Exception as e:
                logger.error(f"Unexpected error looking up {value}: {e}", exc_info=True)
                result = LookupResult.failure(
                    input=value, ip="", provider=self._unresolved_provider, error=f"Lookup failed: {e}"
                )

            span.set_attribute("geovet.result.provider", result.provider.value)
            if result.error:
                span.set_attribute("geovet.error", result.error)
            elif result.classification is not None:
                span.set_attribute("geovet.cdn.provider", result.classification.provider or "")
        return result

    def _lookup(self, value: str) -> LookupResult:
        resolved = self.resolver.resolve(value)
        if not resolved.ok:
            logger.debug(f"Resolution failed for {value}: {resolved.error}")
            return LookupResult.failure(
                input=value,
                ip="",
                provider=self._unresolved_provider,
                error=resolved.error or f"Could not resolve: {value}",
            )

        ip = resolved.ip
        result = self._query_provider(ip)
        if not result.ok:
            return replace(result, input=value)

        hostname = None if is_ip_literal(value) else value
        asn = result.network.asn if result.network is not None else None
        info = self.classifier.classify(ip, asn=asn, hostname=hostname)
        return replace(result, input=value, classification=info if info.is_cdn else None)

    def _query_provider(self, ip: str) -> LookupResult:
        requested = self.settings.provider
        if requested is not ProviderType.AUTO:
            return self.get_provider(requested).lookup(ip)

        local = self.get_provider(ProviderType.LOCAL)
        if local.is_available():
            result = local.lookup(ip)
            if result.ok:
                return result
            logger.debug(f"Local lookup failed for {ip}, falling back to ipinfo: {result.error}")
        else:
            logger.debug(f"Local database unavailable, using ipinfo for {ip}")
        return self.get_provider(ProviderType.IPINFO).lookup(ip)

    def lookup_batch(
        self,
        values: Iterable[str],
        concurrency: Optional[int] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> List[LookupResult]:
        """Look up many inputs concurrently, preserving input order.

        Args:
            values: IP literals and/or hostnames
            concurrency: Worker count (default: settings, then provider default)
            on_progress: Called with ``(completed, total)`` after each lookup

        Returns:
            One result per input, at the input's index

        Raises:
            ValueError: If concurrency is below 1
        """
        if concurrency is None:
            concurrency = self.settings.effective_concurrency
        validate_concurrency(concurrency)
        if on_progress is None:
            on_progress = self.settings.on_progress

        items = list(values)
        total = len(items)
        if total == 0:
            return []

        results: List[Optional[LookupResult]] = [None] * total
        lock = threading.Lock()
        next_index = 0
        completed = 0

        def worker() -> None:
            nonlocal next_index, completed
            while True:
                with lock:
                    if next_index >= total:
                        return
                    index = next_index
                    next_index += 1

                result = self.lookup(items[index])

                with lock:
                    results[index] = result
                    completed += 1
                    if on_progress is not None:
                        on_progress(completed, total)

        workers = min(concurrency, total)
        attributes = {
            "geovet.batch.size": total,
            "geovet.batch.workers": workers,
            "geovet.provider": self.settings.provider.value,
        }
        with start_span("geovet.lookup_batch", attributes):
            logger.debug(f"Starting batch of {total} lookups with {workers} workers")
            with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="geovet") as executor:
                futures = [executor.submit(worker) for _ in range(workers)]
                for future in futures:
                    future.result()

        return [result for result in results if result is not None]

    def close(self) -> None:
        """Close providers, and the reader registry if this orchestrator created it."""
        with self._providers_lock:
            for provider in self._providers.values():
                provider.close()
            self._providers.clear()
        if self._owns_registry:
            self.registry.close()

    def __enter__(self) -> Geovet:
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit - release resources."""
        self.close()


def lookup(value: str, settings: Optional[LookupSettings] = None) -> LookupResult:
    """Look up a single IP address or hostname.

    Builds and closes an orchestrator per call; hold a :class:`Geovet` to reuse
    opened readers across lookups.
    """
    with Geovet(settings) as geovet:
        return geovet.lookup(value)


def lookup_batch(values: Iterable[str], settings: Optional[LookupSettings] = None) -> List[LookupResult]:
    """Look up many inputs concurrently with default wiring.

    Raises:
        ValueError: If the configured concurrency is below 1
    """
    with Geovet(settings) as geovet:
        return geovet.lookup_batch(values)


__all__ = ["Geovet", "lookup", "lookup_batch"]
