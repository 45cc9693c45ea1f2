"""Hypermarket console entry point.

Usage:
    hypermarket
    hypermarket --no-sample-data
    hypermarket --log-level DEBUG
"""

import argparse
import sys

import structlog
from rich.console import Console

from hypermarket import __version__
from hypermarket.catalog import Hypermarket
from hypermarket.cli import CatalogMenu
from hypermarket.infrastructure.config import Settings, settings
from hypermarket.infrastructure.logging import configure_logging

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="hypermarket",
        description="Manage an in-memory catalog of categories and products",
    )
    parser.add_argument(
        "--no-sample-data",
        action="store_true",
        help="Start with an empty root category",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Logging level (default: {settings.log_level})",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def apply_arguments(args: argparse.Namespace, base: Settings) -> Settings:
    """Overlay command-line flags on the loaded settings.

    Args:
        args: Parsed command-line arguments.
        base: Settings loaded from the environment.

    Returns:
        Settings with the flags applied.
    """
    overrides: dict[str, object] = {}
    if args.no_sample_data:
        overrides["load_sample_data"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level
    return base.model_copy(update=overrides)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments (default: ``sys.argv[1:]``).

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)
    config = apply_arguments(args, settings)
    configure_logging(config.log_level, json=config.log_json)

    logger.info(
        "Starting Hypermarket",
        version=__version__,
        sample_data=config.load_sample_data,
    )

    market = Hypermarket(config.root_category_name)
    if config.load_sample_data:
        market.initialize_sample_data()

    CatalogMenu(market.root_category, Console(), config).run()

    logger.info("Shutting down Hypermarket")
    return 0


if __name__ == "__main__":
    sys.exit(main())
