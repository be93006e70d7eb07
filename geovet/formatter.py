"""Plain-text and JSON rendering of lookup results."""

from __future__ import annotations

import json
from collections import Counter
from typing import List, Sequence

from .classification import ProviderCategory
from .models import LookupResult

CATEGORY_LABELS = {
    ProviderCategory.CDN: "CDN",
    ProviderCategory.CLOUD: "Cloud",
    ProviderCategory.HOSTING: "Hosting",
    ProviderCategory.SECURITY: "WAF/Security",
}

TOP_COUNTRIES = 10


def format_result(result: LookupResult, json_output: bool = False) -> str:
    """Render one result as an indented text block or pretty-printed JSON.

    Args:
        result: Lookup result to render
        json_output: Emit JSON (indent 2) instead of text

    Returns:
        Rendered string without a trailing newline

    Example:
        >>> from geovet.models import ProviderType
        >>> print(format_result(LookupResult.failure("nope.invalid", "", ProviderType.LOCAL, "Could not resolve: nope.invalid")))
        ✗ nope.invalid: Could not resolve: nope.invalid
    """
    if json_output:
        return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)

    if result.error:
        return f"✗ {result.input}: {result.error}"

    geo = result.geo
    lines: List[str] = [f"✓ {result.input}"]

    if result.input != result.ip:
        lines.append(f"  IP: {result.ip}")

    location = ", ".join(part for part in (geo.city, geo.region, geo.country_code or geo.country) if part)
    if location:
        lines.append(f"  Location: {location}")

    if geo.latitude is not None and geo.longitude is not None:
        lines.append(f"  Coordinates: {geo.latitude:.4f}, {geo.longitude:.4f}")

    if geo.timezone:
        lines.append(f"  Timezone: {geo.timezone}")

    network = result.network
    if network is not None and (network.asn or network.org):
        if network.asn:
            network_str = f"AS{network.asn} {network.org}" if network.org else f"AS{network.asn}"
        else:
            network_str = network.org or ""
        lines.append(f"  Network: {network_str}")

    info = result.classification
    if info is not None and info.is_cdn:
        category = info.category or ProviderCategory.CDN
        label = CATEGORY_LABELS.get(category, "CDN")
        lines.append(f"  ⚠ {label}: {info.provider} - Location is {category.location_note}, not origin")

    lines.append(f"  Provider: {result.provider.value}")
    return "\n".join(lines)


def format_results(results: Sequence[LookupResult], json_output: bool = False) -> str:
    """Render several results: a JSON list, or text blocks separated by blank lines."""
    if json_output:
        return json.dumps([result.to_dict() for result in results], indent=2, ensure_ascii=False)
    return "\n\n".join(format_result(result) for result in results)


def format_summary(results: Sequence[LookupResult]) -> str:
    """Summarize a batch: totals and the most common countries among successes."""
    total = len(results)
    successes = [result for result in results if result.ok]
    errors = total - len(successes)

    countries: Counter[str] = Counter(
        result.geo.country_code or result.geo.country or "Unknown" for result in successes
    )

    lines = ["", "Summary:", f"  Total: {total}, Success: {len(successes)}, Errors: {errors}"]

    if countries:
        lines.append("")
        lines.append("  Countries:")
        ranked = countries.most_common()
        for country, count in ranked[:TOP_COUNTRIES]:
            pct = count / len(successes) * 100
            lines.append(f"    {country}: {count} ({pct:.1f}%)")
        if len(ranked) > TOP_COUNTRIES:
            lines.append(f"    ... and {len(ranked) - TOP_COUNTRIES} more")

    return "\n".join(lines)


__all__ = ["format_result", "format_results", "format_summary"]
