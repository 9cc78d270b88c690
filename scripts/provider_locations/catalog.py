"""Resource provider listing with page-by-page pagination."""

from __future__ import annotations

import logging
import time
from typing import Iterable, Optional

from azure.core.exceptions import ResourceNotFoundError

from scripts.provider_locations.client import ManagementClientProvider
from scripts.provider_locations.errors import ProviderNotFoundError
from scripts.provider_locations.models import Provider

logger = logging.getLogger("provider_locations.catalog")


def registered_providers(providers: Iterable[Provider]) -> list[Provider]:
    """Keep only providers in the "Registered" state (case-insensitive)."""
    return [p for p in providers if p.is_registered]


class ProviderCatalog:
    """Reads resource providers for the client's subscription."""

    def __init__(self, clients: ManagementClientProvider) -> None:
        self._clients = clients

    def list_resource_providers(
        self,
        provider_name: Optional[str] = None,
        list_available: bool = True,
    ) -> list[Provider]:
        """List providers, or fetch exactly one by namespace.

        With ``list_available=False`` only registered providers are returned.
        The filter does not apply to a lookup by name.
        """
        if provider_name:
            return [self._get_provider(provider_name)]

        providers = self._list_all()
        return providers if list_available else registered_providers(providers)

    def _get_provider(self, provider_name: str) -> Provider:
        client = self._clients.get()
        logger.debug("Fetching resource provider", extra={"provider": provider_name})
        try:
            sdk_provider = client.providers.get(provider_name)
        except ResourceNotFoundError as exc:
            raise ProviderNotFoundError(provider_name) from exc
        if sdk_provider is None:
            raise ProviderNotFoundError(provider_name)
        return Provider.from_sdk(sdk_provider)

    def _list_all(self) -> list[Provider]:
        """Fetch every page in order; the pager stops once the next link is empty."""
        client = self._clients.get()
        start = time.monotonic()
        results: list[Provider] = []
        page_number = 0
        for page in client.providers.list().by_page():
            page_number += 1
            batch = [Provider.from_sdk(p) for p in page]
            results.extend(batch)
            logger.debug(
                "Fetched provider page",
                extra={"page": page_number, "records": len(batch)},
            )
        logger.info(
            "Listed %d resource providers over %d page(s)",
            len(results),
            page_number,
            extra={
                "records": len(results),
                "duration_s": round(time.monotonic() - start, 3),
            },
        )
        return results
