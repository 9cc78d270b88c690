"""Key Vault secret resolution.

Settings may hold a reference to an Azure Key Vault secret instead of the
plaintext value, so the service-principal secret never has to live in the
Function App configuration.
"""

from __future__ import annotations

import logging

from scripts.provider_locations.errors import ConfigurationError

logger = logging.getLogger("provider_locations.secrets")

# Prefix that indicates a Key Vault secret reference
_KEYVAULT_PREFIX = "keyvault://"


def resolve_secret(value: str) -> str:
    """Resolve a secret reference to its plaintext value.

    Supported formats:
      - "keyvault://vault-name/secret-name"          -> latest version
      - "keyvault://vault-name/secret-name/version"  -> pinned version
      - anything else                                -> returned as-is
    """
    if value.startswith(_KEYVAULT_PREFIX):
        return _resolve_keyvault_secret(value[len(_KEYVAULT_PREFIX):])
    return value


def _parse_keyvault_ref(ref: str) -> tuple[str, str, str | None]:
    parts = [p for p in ref.split("/") if p]
    if len(parts) not in (2, 3):
        raise ConfigurationError(
            f"Invalid Key Vault reference {ref!r}; expected vault-name/secret-name[/version]"
        )
    vault, name = parts[0], parts[1]
    version = parts[2] if len(parts) == 3 else None
    return vault, name, version


def _vault_url(vault: str) -> str:
    if "." in vault:
        return f"https://{vault}"
    return f"https://{vault}.vault.azure.net"


def _resolve_keyvault_secret(ref: str) -> str:
    """Fetch a secret from Azure Key Vault with the ambient identity."""
    from azure.identity import DefaultAzureCredential
    from azure.keyvault.secrets import SecretClient

    vault, name, version = _parse_keyvault_ref(ref)
    client = SecretClient(vault_url=_vault_url(vault), credential=DefaultAzureCredential())
    logger.debug("Resolving Key Vault secret %s from %s", name, vault)
    secret = client.get_secret(name, version=version)
    return secret.value or ""
