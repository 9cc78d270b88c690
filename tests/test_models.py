from __future__ import annotations

from types import SimpleNamespace

from scripts.provider_locations.models import Provider, ResourceType


def test_from_sdk_copies_fields(sdk_provider):
    provider = Provider.from_sdk(sdk_provider("Microsoft.Web", "Registered", ["East US"], ["West US"]))

    assert provider.namespace == "Microsoft.Web"
    assert provider.registration_state == "Registered"
    assert provider.id == "/subscriptions/sub-1/providers/Microsoft.Web"
    assert provider.resource_types == (
        ResourceType("type0", ("East US",)),
        ResourceType("type1", ("West US",)),
    )


def test_from_sdk_tolerates_missing_collections():
    raw = SimpleNamespace(
        namespace="Microsoft.Null",
        registration_state=None,
        resource_types=[SimpleNamespace(resource_type="things", locations=None)],
    )

    provider = Provider.from_sdk(raw)

    assert provider.registration_state == ""
    assert provider.all_locations() == []
    assert provider.id is None
    assert not provider.is_registered


def test_to_dict_dedupes_locations(sdk_provider):
    provider = Provider.from_sdk(sdk_provider("A", "Registered", ["East US"], ["east us", "West US"]))

    assert provider.to_dict() == {
        "namespace": "A",
        "registrationState": "Registered",
        "locations": ["East US", "West US"],
    }
