"""Azure Functions HTTP trigger for the providers-and-locations report.

Deployed with the Python v2 programming model; the Functions host picks up
``app`` through the repository-root ``function_app.py``.

  GET|POST /api/ProvidersAndLocations
    -> {"locationsByProvider": [...], "providersByLocation": [...]}

Method and body are ignored.
"""

from __future__ import annotations

import json
import logging
import os

import azure.functions as func

from scripts.provider_locations.catalog import ProviderCatalog
from scripts.provider_locations.client import ManagementClientProvider
from scripts.provider_locations.indexing import build_report
from scripts.provider_locations.logging_config import configure_logging

logger = logging.getLogger("provider_locations.function")

FUNCTION_NAME = "ProvidersAndLocations"


def handle_providers_and_locations(
    req: func.HttpRequest, catalog: ProviderCatalog
) -> func.HttpResponse:
    """Build the report. Upstream errors are logged and re-raised for the host."""
    logger.info("%s invoked with %s", FUNCTION_NAME, req.method)
    try:
        providers = catalog.list_resource_providers(None, True)
        body = build_report(providers)
    except Exception as exc:
        logger.error("%s failed: %s", FUNCTION_NAME, exc, exc_info=True)
        raise

    logger.info(
        "%s complete",
        FUNCTION_NAME,
        extra={
            "records": len(body["locationsByProvider"]),
            "locations": len(body["providersByLocation"]),
        },
    )
    return func.HttpResponse(
        json.dumps(body),
        status_code=200,
        mimetype="application/json",
    )


def create_app(catalog: ProviderCatalog) -> func.FunctionApp:
    """Register the trigger against an already-built catalog."""
    app = func.FunctionApp(http_auth_level=func.AuthLevel.FUNCTION)

    @app.function_name(name=FUNCTION_NAME)
    @app.route(route=FUNCTION_NAME, methods=[func.HttpMethod.GET, func.HttpMethod.POST])
    def providers_and_locations(req: func.HttpRequest) -> func.HttpResponse:
        return handle_providers_and_locations(req, catalog)

    return app


configure_logging(os.environ.get("LOG_LEVEL", "INFO"))

# Built once per worker process; the client itself is created on first request
catalog = ProviderCatalog(ManagementClientProvider())
app = create_app(catalog)
