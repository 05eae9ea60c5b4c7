#!/usr/bin/env python3
"""Print dashboard statistics for a provider.

Builds a provider context from the environment, optionally adds a
synthetic portfolio on top of the demonstration fixtures, and prints the
dashboard counters as a table or as JSON.

Environment variables (see ``DashboardConfig.from_env``) supply defaults;
command line flags override them.
"""

import argparse
import asyncio
import json

from propdash.config import DashboardConfig, GeneratorConfig
from propdash.exceptions import ConfigurationError
from propdash.logging import get_logger, setup_logging
from propdash.models import DashboardStats
from propdash.providers import ProviderContext
from propdash.scenarios import PortfolioScenario
from propdash.serialization import to_dict

logger = get_logger(__name__)


def format_table(stats: DashboardStats) -> str:
    """Render stats as an aligned two-column table."""
    rows = [
        ("Total properties", str(stats.total_properties)),
        ("Occupied", str(stats.occupied_properties)),
        ("Vacant", str(stats.vacant_properties)),
        ("Occupancy rate", f"{stats.occupancy_rate:.1f}%"),
        ("Total tenants", str(stats.total_tenants)),
        ("Active tenants", str(stats.active_tenants)),
        ("Monthly revenue", f"${stats.total_monthly_revenue:,.2f}"),
        ("Pending payments", str(stats.pending_payments)),
        ("Overdue payments", str(stats.overdue_payments)),
        ("Open maintenance", str(stats.open_maintenance_requests)),
    ]
    width = max(len(label) for label, _ in rows)
    return "\n".join(f"{label:<{width}}  {value}" for label, value in rows)


async def run(context: ProviderContext, generator: GeneratorConfig, populate: bool) -> DashboardStats:
    """Optionally populate the context's provider, then compute stats."""
    provider = context.get()

    if populate:
        counts = await PortfolioScenario(generator).populate(provider)
        logger.info("Added synthetic portfolio: %s", counts)

    return await provider.get_dashboard_stats()


def build_parser(config: DashboardConfig) -> argparse.ArgumentParser:
    """Build the argument parser with defaults taken from ``config``."""
    parser = argparse.ArgumentParser(description="Print property dashboard statistics")
    parser.add_argument(
        "--provider",
        type=str,
        default=config.provider.provider_type,
        help=f"Provider variant (default: {config.provider.provider_type})",
    )
    parser.add_argument(
        "--populate",
        type=int,
        default=0,
        metavar="N",
        help="Add a synthetic portfolio of N properties (default: 0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.generator.seed,
        help="Random seed for the synthetic portfolio",
    )
    parser.add_argument(
        "--no-fixtures",
        action="store_true",
        help="Start from an empty provider instead of the demonstration data",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print stats as JSON",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        help=f"Log level (default: {config.log_level})",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    try:
        config = DashboardConfig.from_env()
    except ConfigurationError as e:
        raise SystemExit(f"dashboard_summary: error: {e}") from e

    parser = build_parser(config)
    args = parser.parse_args(argv)

    config.provider.provider_type = args.provider
    config.provider.seed_fixtures = not args.no_fixtures
    config.generator.seed = args.seed
    if args.populate:
        config.generator.num_properties = args.populate

    try:
        setup_logging(args.log_level, config.log_format)
        context = ProviderContext(config.provider)
    except ConfigurationError as e:
        parser.error(str(e))

    stats = asyncio.run(run(context, config.generator, populate=args.populate > 0))

    if args.json:
        print(json.dumps(to_dict(stats), indent=2))
    else:
        print(format_table(stats))


if __name__ == "__main__":
    main()
