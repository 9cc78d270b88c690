"""Provider records and the derived per-provider / per-location views."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from scripts.provider_locations.comparers import InvariantIgnoreCase

REGISTERED_STATE_NAME = "Registered"


@dataclass(frozen=True)
class ResourceType:
    resource_type: str
    locations: tuple[str, ...] = ()

    @classmethod
    def from_sdk(cls, sdk_type: Any) -> "ResourceType":
        return cls(
            resource_type=getattr(sdk_type, "resource_type", None) or "",
            locations=tuple(getattr(sdk_type, "locations", None) or ()),
        )


@dataclass(frozen=True)
class Provider:
    namespace: str
    registration_state: str = ""
    resource_types: tuple[ResourceType, ...] = ()
    id: Optional[str] = None

    @classmethod
    def from_sdk(cls, sdk_provider: Any) -> "Provider":
        """Build from an ``azure.mgmt.resource`` ``Provider`` model."""
        return cls(
            namespace=getattr(sdk_provider, "namespace", None) or "",
            registration_state=getattr(sdk_provider, "registration_state", None) or "",
            resource_types=tuple(
                ResourceType.from_sdk(rt)
                for rt in (getattr(sdk_provider, "resource_types", None) or ())
            ),
            id=getattr(sdk_provider, "id", None),
        )

    @property
    def is_registered(self) -> bool:
        return InvariantIgnoreCase.equals(REGISTERED_STATE_NAME, self.registration_state)

    def all_locations(self) -> list[str]:
        """Every resource-type location in order, duplicates included."""
        return [loc for rt in self.resource_types for loc in rt.locations]

    def to_dict(self) -> dict[str, Any]:
        return {
            "namespace": self.namespace,
            "registrationState": self.registration_state,
            "locations": InvariantIgnoreCase.distinct(self.all_locations()),
        }


@dataclass(frozen=True)
class ProviderLocations:
    namespace: str
    locations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"namespaceProperty": self.namespace, "locations": list(self.locations)}


@dataclass(frozen=True)
class LocationProviders:
    location: str
    providers: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"location": self.location, "providers": list(self.providers)}
