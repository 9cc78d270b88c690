"""Cross-index providers and locations.

Both views are pure functions of the provider list. Location matching is
case-insensitive and locale-invariant throughout.
"""

from __future__ import annotations

from typing import Any, Sequence

from scripts.provider_locations.comparers import InvariantIgnoreCase, iter_folded
from scripts.provider_locations.models import LocationProviders, Provider, ProviderLocations


def locations_by_provider(providers: Sequence[Provider]) -> list[ProviderLocations]:
    """Per provider, the deduplicated union of its resource-type locations."""
    return [
        ProviderLocations(
            namespace=p.namespace,
            locations=InvariantIgnoreCase.distinct(p.all_locations()),
        )
        for p in providers
    ]


def providers_by_location(providers: Sequence[Provider]) -> list[LocationProviders]:
    """Per distinct location (ascending), the providers available there."""
    all_locations = InvariantIgnoreCase.distinct(
        loc for p in providers for loc in p.all_locations()
    )
    # folded location set per provider, computed once
    folded = [(p.namespace, set(iter_folded(p.all_locations()))) for p in providers]

    result: list[LocationProviders] = []
    for location in InvariantIgnoreCase.sort(all_locations):
        key = InvariantIgnoreCase.key(location)
        result.append(
            LocationProviders(
                location=location,
                providers=[ns for ns, keys in folded if key in keys],
            )
        )
    return result


def build_report(providers: Sequence[Provider]) -> dict[str, Any]:
    """Response body for the providers-and-locations endpoint."""
    return {
        "locationsByProvider": [v.to_dict() for v in locations_by_provider(providers)],
        "providersByLocation": [v.to_dict() for v in providers_by_location(providers)],
    }
