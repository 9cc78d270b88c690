"""Shared test fixtures: SDK-shaped providers, an ItemPaged-backed fake ARM client."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Callable, Optional

import pytest
from azure.core.exceptions import ResourceNotFoundError
from azure.core.paging import ItemPaged

from scripts.provider_locations.catalog import ProviderCatalog
from scripts.provider_locations.client import ManagementClientProvider
from scripts.provider_locations.config import AppConfig

# cursor -> (items on that page, next link); None is the first page
Pages = dict[Optional[str], tuple[list[Any], Optional[str]]]


def _sdk_provider(namespace: str, state: str = "Registered", *location_lists: list[str]) -> SimpleNamespace:
    """Mimic azure.mgmt.resource Provider: one resource type per location list."""
    return SimpleNamespace(
        id=f"/subscriptions/sub-1/providers/{namespace}",
        namespace=namespace,
        registration_state=state,
        resource_types=[
            SimpleNamespace(resource_type=f"type{i}", locations=list(locs))
            for i, locs in enumerate(location_lists)
        ],
    )


class FakeProviderOperations:
    """Stands in for ``client.providers``; ``list()`` returns a real ItemPaged."""

    def __init__(self, pages: Pages, by_name: Optional[dict[str, Any]] = None, raise_404: bool = False) -> None:
        self.pages = pages
        self.by_name = by_name or {}
        self.raise_404 = raise_404
        self.list_calls = 0
        self.requested: list[Optional[str]] = []
        self.get_calls: list[str] = []

    def _get_next(self, next_link: Optional[str] = None) -> tuple[list[Any], Optional[str]]:
        self.requested.append(next_link)
        return self.pages[next_link]

    @staticmethod
    def _extract_data(response: tuple[list[Any], Optional[str]]):
        items, next_link = response
        # same normalisation as the generated SDK operations
        return next_link or None, iter(items)

    def list(self) -> ItemPaged:
        self.list_calls += 1
        return ItemPaged(self._get_next, self._extract_data)

    def get(self, resource_provider_namespace: str) -> Any:
        self.get_calls.append(resource_provider_namespace)
        if resource_provider_namespace in self.by_name:
            return self.by_name[resource_provider_namespace]
        if self.raise_404:
            raise ResourceNotFoundError(
                message=f"Provider '{resource_provider_namespace}' was not found"
            )
        return None


def _catalog_for(operations: Any) -> ProviderCatalog:
    client = SimpleNamespace(providers=operations)
    clients = ManagementClientProvider(
        config_loader=AppConfig,
        client_factory=lambda config: client,
    )
    return ProviderCatalog(clients)


@pytest.fixture
def sdk_provider() -> Callable[..., SimpleNamespace]:
    return _sdk_provider


@pytest.fixture
def provider_operations() -> Callable[..., FakeProviderOperations]:
    """Factory: ``provider_operations(pages, by_name=..., raise_404=...)``."""
    return FakeProviderOperations


@pytest.fixture
def make_catalog() -> Callable[[Any], ProviderCatalog]:
    return _catalog_for


@pytest.fixture
def sample_providers() -> list[SimpleNamespace]:
    return [
        _sdk_provider("A", "Registered", ["East US", "west us"]),
        _sdk_provider("B", "NotRegistered", ["East US"]),
    ]


@pytest.fixture
def single_page_catalog(sample_providers) -> ProviderCatalog:
    return _catalog_for(FakeProviderOperations({None: (sample_providers, None)}))
