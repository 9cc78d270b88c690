"""Azure Functions entry point; the host indexes ``app`` from this module."""

from scripts.provider_locations.entrypoints.azure_function import app  # noqa: F401
