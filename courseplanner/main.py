"""
Course Planner
==============
Entry point for the interactive course planner.

Usage:
    courseplanner [catalog_file]
    python -m courseplanner [catalog_file]

Options:
    --help          Show help
    catalog_file    Course file to load before the menu starts
                    (default: $COURSEPLANNER_CATALOG, if set)
"""
import logging
import sys
from typing import Optional

from .catalog.course_catalog import CourseCatalog
from .cli.shell import CoursePlannerShell
from .config import PlannerConfig
from .core.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def print_help():
    print("""
Course Planner

Usage:
    courseplanner [catalog_file]      Interactive menu

Options:
    --help          Show this help
    catalog_file    Course file loaded before the menu starts

Environment:
    COURSEPLANNER_CATALOG      Default course file
    COURSEPLANNER_CACHE_SIZE   Lookup cache size (default 256)
    COURSEPLANNER_LOG_LEVEL    Logging level (default WARNING)

Course file format (one course per line):
    CSCI200, Data Structures, CSCI101, MATH201
""")


def configure_logging(level: int) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point of the application."""
    args = sys.argv[1:] if argv is None else list(argv)

    if "--help" in args or "-h" in args:
        print_help()
        return 0

    if len(args) > 1 or (args and args[0].startswith("-")):
        print(f"Error: unexpected arguments: {' '.join(args)}", file=sys.stderr)
        print("Use --help for usage information", file=sys.stderr)
        return 2

    try:
        config = PlannerConfig.from_env()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args:
        config.catalog_file = args[0]

    configure_logging(config.logging_level)

    catalog = CourseCatalog(lookup_cache_size=config.lookup_cache_size)
    shell = CoursePlannerShell(catalog)
    if config.catalog_file:
        shell.preload(config.catalog_file)

    shell.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
