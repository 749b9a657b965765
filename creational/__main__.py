"""
Creational Patterns CLI

Run one or more pattern examples from the catalog and print their output.
"""

import argparse
import logging
import sys
from typing import List, Optional

from creational.core.catalog_manager import CatalogManager
from creational.core.config_manager import ConfigManager
from creational.core.exceptions import ConstructionFailure

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None):
    logging_settings = ConfigManager.get_instance().get_logging_settings()
    logging.basicConfig(
        level=getattr(logging, level or logging_settings["level"]),
        format=logging_settings["format"],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="creational",
        description="Run creational design pattern examples",
    )
    parser.add_argument(
        "examples",
        nargs="*",
        metavar="NAME",
        help="Examples to run (default: all)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the available examples and exit",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        configure_logging(args.log_level)
        catalog = CatalogManager.get_instance()
    except ConstructionFailure as e:
        print(f"Startup failed: {e}", file=sys.stderr)
        return 2

    if args.list:
        for name, description in catalog.describe_examples().items():
            print(f"{name:<16} {description}")
        return 0

    names = args.examples or catalog.list_examples()
    unknown = [name for name in names if not catalog.has_example(name)]
    if unknown:
        logger.error(f"Unknown example(s): {', '.join(unknown)}")
        print(f"Unknown example(s): {', '.join(unknown)}", file=sys.stderr)
        return 2

    for name in names:
        print(f"== {name} ==")
        for line in catalog.run_example(name):
            print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
