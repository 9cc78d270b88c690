"""Authenticated Azure Resource Manager client, built once per process."""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, Optional

from azure.identity import ClientSecretCredential, DefaultAzureCredential
from azure.mgmt.resource import ResourceManagementClient, SubscriptionClient

from scripts.provider_locations.comparers import InvariantIgnoreCase
from scripts.provider_locations.config import (
    AUTH_MODE_DEFAULT,
    AppConfig,
    AzureCredentialsConfig,
    load_config,
)
from scripts.provider_locations.errors import SubscriptionResolutionError

logger = logging.getLogger("provider_locations.client")

ENABLED_STATE_NAME = "Enabled"


def build_credential(creds: AzureCredentialsConfig) -> Any:
    if creds.auth_mode == AUTH_MODE_DEFAULT:
        # Managed identity / az login / environment: discovered by azure-identity
        return DefaultAzureCredential()
    return ClientSecretCredential(
        tenant_id=creds.tenant_id,
        client_id=creds.client_id,
        client_secret=creds.client_secret,
    )


def resolve_default_subscription(credential: Any) -> str:
    """First enabled subscription visible to the credential, else the first listed."""
    subscriptions = list(SubscriptionClient(credential).subscriptions.list())
    if not subscriptions:
        raise SubscriptionResolutionError(
            "No subscriptions are visible to the configured credentials"
        )
    for sub in subscriptions:
        state = getattr(sub, "state", None)
        # SubscriptionState is a str enum; compare on its value
        if InvariantIgnoreCase.equals(str(getattr(state, "value", state) or ""), ENABLED_STATE_NAME):
            return sub.subscription_id
    return subscriptions[0].subscription_id


class ManagementClientProvider:
    """Hands out one ResourceManagementClient, created on first use.

    Construct once at process start and inject where the client is needed.
    Concurrent first calls build the client exactly once; a failed build is
    not cached, so the next call tries again.
    """

    def __init__(
        self,
        config_loader: Callable[[], AppConfig] = load_config,
        client_factory: Optional[Callable[[AppConfig], Any]] = None,
    ) -> None:
        self._config_loader = config_loader
        self._client_factory = client_factory or _create_client
        self._client: Any = None
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._client is not None

    def get(self) -> Any:
        client = self._client
        if client is not None:
            return client
        with self._lock:
            if self._client is None:
                start = time.monotonic()
                config = self._config_loader()
                self._client = self._client_factory(config)
                logger.info(
                    "Resource management client initialised",
                    extra={"duration_s": round(time.monotonic() - start, 3)},
                )
            return self._client


def _create_client(config: AppConfig) -> ResourceManagementClient:
    creds = config.credentials
    credential = build_credential(creds)
    subscription_id = creds.subscription_id or resolve_default_subscription(credential)
    logger.info("Using subscription %s (auth_mode=%s)", subscription_id, creds.auth_mode)
    return ResourceManagementClient(credential, subscription_id)
