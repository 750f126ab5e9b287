# main.py

"""Entry point for the catalog_admin dashboard (TUI or headless CLI)."""

import argparse
import asyncio
import logging
import sys

from catalog_admin.config.logging_config import setup_logging
from catalog_admin.config.settings import Settings
from catalog_admin.filters.product_sorter import SORT_FIELDS

logger = logging.getLogger("catalog_admin.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="catalog_admin",
        description="Product catalog admin dashboard.",
        epilog=f"API: {Settings.API_BASE_URL} (override with CATALOG_API_URL)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        default=False,
        dest="headless",
        help="Print one page of products instead of launching the TUI.",
    )
    parser.add_argument(
        "-q",
        "--search",
        default=None,
        help="Case-insensitive title filter.",
    )
    parser.add_argument(
        "--sort",
        choices=sorted(SORT_FIELDS),
        default=None,
        dest="sort_field",
        help="Field to sort by.",
    )
    parser.add_argument(
        "--descending",
        action="store_true",
        default=False,
        help="Sort descending instead of ascending.",
    )
    parser.add_argument(
        "--page",
        type=int,
        default=1,
        help="Page number to show (default: 1).",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=Settings.DEFAULT_PAGE_SIZE,
        dest="page_size",
        help=f"Products per page (default: {Settings.DEFAULT_PAGE_SIZE}).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="table",
        dest="output_format",
        help="Output format (default: table).",
    )
    parser.add_argument(
        "--export",
        action="store_true",
        default=False,
        help="Also write the page to exports/products_page_<N>.csv.",
    )
    parser.add_argument(
        "--health",
        action="store_true",
        default=False,
        help="Check connectivity to the products API.",
    )
    return parser


def _run_tui() -> None:
    """Launch the interactive Textual TUI."""
    from catalog_admin.ui.app import CatalogAdminApp

    try:
        app = CatalogAdminApp()
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("catalog_admin TUI shutting down")


def _run_cli(args: argparse.Namespace) -> None:
    """Print one page of products and exit."""
    from catalog_admin.cli.runner import cli_list

    exit_code = asyncio.run(
        cli_list(
            query=args.search,
            sort_field=args.sort_field,
            descending=args.descending,
            page=args.page,
            page_size=args.page_size,
            output_format=args.output_format,
            export=args.export,
        )
    )
    sys.exit(exit_code)


def _run_health_check() -> None:
    """Run the API connectivity check."""
    from catalog_admin.cli.runner import run_health_check

    exit_code = asyncio.run(run_health_check())
    sys.exit(exit_code)


def main() -> None:
    """Route to TUI (no flags), headless listing, or health check."""
    log_file = setup_logging()
    logger.info("catalog_admin starting, log file: %s", log_file)

    parser = _build_parser()
    args = parser.parse_args()

    if args.health:
        _run_health_check()
    elif args.headless or args.export:
        _run_cli(args)
    else:
        _run_tui()


if __name__ == "__main__":
    main()
