"""CLI entry point: report, providers."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

from scripts.provider_locations.catalog import ProviderCatalog
from scripts.provider_locations.client import ManagementClientProvider
from scripts.provider_locations.errors import ProviderLocationsError
from scripts.provider_locations.indexing import build_report
from scripts.provider_locations.logging_config import configure_logging

logger = logging.getLogger("provider_locations.cli")


def cmd_report(args: argparse.Namespace, catalog: ProviderCatalog) -> None:
    """Print the same body the HTTP endpoint returns."""
    providers = catalog.list_resource_providers(None, True)
    print(json.dumps(build_report(providers), indent=args.indent))


def cmd_providers(args: argparse.Namespace, catalog: ProviderCatalog) -> None:
    """Print one provider, or all (optionally registered only)."""
    providers = catalog.list_resource_providers(
        args.name,
        list_available=not args.registered_only,
    )
    print(json.dumps([p.to_dict() for p in providers], indent=args.indent))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="provider-locations",
        description="Azure resource providers and the locations they are available in",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indent (default: 2)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # report command
    report_parser = subparsers.add_parser(
        "report", help="Print locationsByProvider and providersByLocation"
    )
    report_parser.set_defaults(func=cmd_report)

    # providers command
    providers_parser = subparsers.add_parser("providers", help="List resource providers")
    providers_parser.add_argument(
        "--name", "-n",
        default=None,
        help="Provider namespace to fetch, e.g. Microsoft.Storage",
    )
    providers_parser.add_argument(
        "--registered-only",
        action="store_true",
        help="Only providers registered in the subscription",
    )
    providers_parser.set_defaults(func=cmd_providers)

    return parser


def main(argv: list[str] | None = None, catalog: ProviderCatalog | None = None) -> int:
    """Main CLI entry point."""
    configure_logging(os.environ.get("LOG_LEVEL", "INFO"))

    args = build_parser().parse_args(argv)
    if catalog is None:
        catalog = ProviderCatalog(ManagementClientProvider())

    try:
        args.func(args, catalog)
    except ProviderLocationsError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
