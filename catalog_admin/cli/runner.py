# catalog_admin/cli/runner.py

"""Headless CLI runner that reuses the dashboard controller."""

import json
import logging
import math
import sys

from rich.console import Console
from rich.table import Table

from catalog_admin.filters.product_sorter import SORT_FIELDS
from catalog_admin.models.product import Product
from catalog_admin.models.view_state import SortDirection
from catalog_admin.services.dashboard import DashboardController
from catalog_admin.services.product_gateway import GatewayError

logger = logging.getLogger("catalog_admin.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _products_to_dicts(products: list[Product]) -> list[dict[str, object]]:
    """Serialise a product list to plain dicts for JSON output."""
    return [
        {
            "id": p.id,
            "title": p.title,
            "price": None if math.isnan(p.price) else p.price,
            "category": p.category_name,
            "description": p.description,
            "image": p.image_url,
        }
        for p in products
    ]


def _print_table(products: list[Product], title: str) -> None:
    """Render a Rich table of one page of products to stdout."""
    table = Table(
        title=title,
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Title", max_width=50)
    table.add_column("Price", justify="right", style="green")
    table.add_column("Category", style="magenta")
    table.add_column("Image", overflow="fold", style="dim")

    for p in products:
        table.add_row(
            str(p.id),
            p.title,
            p.display_price,
            p.category_name,
            p.image_url or "—",
        )

    Console().print(table)


async def cli_list(
    query: str | None,
    sort_field: str | None,
    descending: bool,
    page: int,
    page_size: int,
    output_format: str,
    export: bool,
    controller: DashboardController | None = None,
) -> int:
    """Load, derive and print one page; return an exit code (0=ok, 1=fail)."""
    if sort_field is not None and sort_field not in SORT_FIELDS:
        valid = ", ".join(sorted(SORT_FIELDS))
        _err.print(f"[red]Unknown sort field: {sort_field}[/red]")
        _err.print(f"[dim]Available: {valid}[/dim]")
        return 1

    dashboard = controller or DashboardController()
    store = dashboard.store

    try:
        store.set_page_size(page_size)
    except ValueError as exc:
        _err.print(f"[red]{exc}[/red]")
        return 1

    _err.print(f"[bold]Loading products from[/bold] {dashboard.gateway.base_url}")
    try:
        await dashboard.load()
    except GatewayError as exc:
        logger.error("Load failed: %s", exc, exc_info=True)
        _err.print(f"[red]Could not load products: {exc}[/red]")
        return 1

    if query:
        store.apply_search(query)
    if sort_field is not None:
        direction = SortDirection.DESC if descending else SortDirection.ASC
        store.apply_sort(sort_field, direction)

    if page != 1 and not store.go_to_page(page):
        _err.print(
            f"[red]Page {page} is out of range "
            f"(1-{max(1, store.total_pages)})[/red]"
        )
        return 1

    products = store.page_window()
    _err.print(
        f"[green]✓ page {store.current_page}/{max(1, store.total_pages)}: "
        f"{len(products)} of {len(store.view)} matching products"
        f" ({len(store.products)} total)[/green]"
    )

    if export:
        try:
            path = dashboard.export_page()
        except OSError as exc:
            logger.error("Export failed: %s", exc, exc_info=True)
            _err.print(f"[red]Export failed: {exc}[/red]")
            return 1
        _err.print(f"[dim]Exported → {path}[/dim]")

    if output_format == "table":
        _print_table(products, f"Products, page {store.current_page}")
    else:
        json.dump(
            _products_to_dicts(products),
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    return 0


async def run_health_check() -> int:
    """Probe the products endpoint and print a status table."""
    from catalog_admin.services.health_checker import HealthChecker

    _err.print("[bold]Running API health check...[/bold]")
    checker = HealthChecker()
    r = await checker.check()

    table = Table(
        title="API Health Check",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("Endpoint", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Latency", justify="right")
    table.add_column("Notes", style="dim")

    if r.status == "ok":
        status = "[green]✅ OK[/green]"
    elif r.status == "slow":
        status = "[yellow]⚠️  SLOW[/yellow]"
    else:
        status = "[red]❌ DOWN[/red]"

    latency = f"{r.latency_ms:.0f}ms" if r.latency_ms > 0 else "—"
    table.add_row(r.endpoint, status, latency, r.message)

    Console().print(table)
    return 1 if r.status == "down" else 0
