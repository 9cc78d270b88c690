"""Exception hierarchy for the providers/locations function."""

from __future__ import annotations


class ProviderLocationsError(Exception):
    """Base class for errors raised by this package."""


class ProviderNotFoundError(ProviderLocationsError, KeyError):
    """A provider looked up by namespace does not exist."""

    def __init__(self, provider_name: str) -> None:
        super().__init__(f"{provider_name} not found")
        self.provider_name = provider_name

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class ConfigurationError(ProviderLocationsError, ValueError):
    """Required settings are missing or invalid."""


class SubscriptionResolutionError(ProviderLocationsError):
    """No default subscription could be determined for the credentials."""
