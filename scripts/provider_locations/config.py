"""Configuration via environment variables with Key Vault secret support.

Supports:
  - Function App settings / local.settings.json (Azure Functions host)
  - Environment variables or a .env file (local dev)
  - Key Vault references (keyvault://vault-name/secret-name)
  - DefaultAzureCredential (managed identity, az login) when AuthMode=default
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from scripts.provider_locations.errors import ConfigurationError
from scripts.provider_locations.secrets import resolve_secret

AUTH_MODE_SERVICE_PRINCIPAL = "service_principal"
AUTH_MODE_DEFAULT = "default"
AUTH_MODES = (AUTH_MODE_SERVICE_PRINCIPAL, AUTH_MODE_DEFAULT)


@dataclass(frozen=True)
class AzureCredentialsConfig:
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    tenant_id: Optional[str] = None
    auth_mode: str = AUTH_MODE_SERVICE_PRINCIPAL
    # None = resolve the account's default subscription
    subscription_id: Optional[str] = None


@dataclass(frozen=True)
class AppConfig:
    credentials: AzureCredentialsConfig = field(default_factory=AzureCredentialsConfig)


def _setting(name: str) -> Optional[str]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    return resolve_secret(raw)


def load_config() -> AppConfig:
    """Load configuration from environment variables.

    Service-principal mode needs ClientId, ClientSecret and TenantId; all
    missing names are reported together. Default mode hands credential
    discovery to azure-identity and needs none of them.
    """
    load_dotenv()

    auth_mode = os.environ.get("AuthMode", AUTH_MODE_SERVICE_PRINCIPAL).strip().lower()
    if auth_mode not in AUTH_MODES:
        raise ConfigurationError(
            f"AuthMode must be one of {', '.join(AUTH_MODES)}, got {auth_mode!r}"
        )

    client_id = _setting("ClientId")
    client_secret = _setting("ClientSecret")
    tenant_id = _setting("TenantId")

    if auth_mode == AUTH_MODE_SERVICE_PRINCIPAL:
        missing = [
            name
            for name, value in (
                ("ClientId", client_id),
                ("ClientSecret", client_secret),
                ("TenantId", tenant_id),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"Missing required settings: {', '.join(missing)}"
            )

    credentials = AzureCredentialsConfig(
        client_id=client_id,
        client_secret=client_secret,
        tenant_id=tenant_id,
        auth_mode=auth_mode,
        subscription_id=_setting("SubscriptionId"),
    )

    return AppConfig(credentials=credentials)
