# catalog_admin/ui/app.py

"""Terminal UI for the product catalog dashboard."""

import functools
import logging
from typing import TypeVar

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.widget import Widget
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    Select,
    Static,
)

from catalog_admin.config.settings import Settings
from catalog_admin.models.product import Product, ProductDraft
from catalog_admin.models.view_state import SortDirection
from catalog_admin.services.dashboard import DashboardController
from catalog_admin.services.product_gateway import GatewayError
from catalog_admin.ui.screens import DetailScreen, ProductFormScreen
from catalog_admin.ui.widgets import Paginator, ProductTable

logger = logging.getLogger("catalog_admin.ui")

WidgetType = TypeVar("WidgetType", bound=Widget)


class CatalogAdminApp(App[object]):
    """Browse, search, sort, page, edit and export remote products."""

    CSS_PATH = "styles.tcss"
    TITLE = "Product Catalog Admin"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("n", "new_product", "New"),
        Binding("e", "export", "Export CSV"),
        Binding("r", "reload", "Reload"),
        Binding("left_square_bracket", "previous_page", "Prev page"),
        Binding("right_square_bracket", "next_page", "Next page"),
    ]

    def __init__(self, controller: DashboardController | None = None) -> None:
        super().__init__()
        self.settings = Settings()
        self.controller = controller or DashboardController()

    def compose(self) -> ComposeResult:
        """Build the widget tree for the TUI."""
        sort_buttons = [
            Button(
                col["label"],
                id=f"sort_{col['field']}",
                classes="sort-btn",
            )
            for col in self.settings.SORTABLE_COLUMNS
        ]
        page_sizes = [
            (f"{n} / page", n) for n in self.settings.PAGE_SIZE_OPTIONS
        ]

        yield Header()
        yield Container(
            Horizontal(
                Input(placeholder="Search by title...", id="search_input"),
                Select(
                    page_sizes,
                    value=self.controller.store.page_size,
                    allow_blank=False,
                    id="page_size",
                ),
                Button("New", variant="success", id="new_btn"),
                Button("Export CSV", id="export_btn"),
                id="toolbar",
            ),
            Horizontal(*sort_buttons, id="sort_bar"),
            Static("Ready", id="status"),
            ProductTable(id="product_table"),
            Paginator(id="pagination"),
            id="main_container",
        )
        yield Footer()

    def _find(self, selector: str, expect_type: type[WidgetType]) -> WidgetType:
        # Dashboard widgets live on the bottom screen, under any open modal
        return self.screen_stack[0].query_one(selector, expect_type)

    def on_mount(self) -> None:
        """Kick off the initial load without blocking the first paint."""
        self._find("#pagination", Paginator).display = False
        self.run_worker(self.load_products(), group="load")

    # ── Loading & rendering ──────────────────────────────

    async def load_products(self) -> None:
        """Refetch products and re-render; keep the old table on failure."""
        status = self._find("#status", Static)
        status.update("⏳ Loading products...")
        try:
            applied = await self.controller.load()
        except GatewayError as exc:
            logger.error("Loading products failed: %s", exc, exc_info=True)
            self.notify(f"Could not load products: {exc}", severity="error")
            status.update("❌ Could not load products")
            return

        if not applied:
            return
        # The store dropped its search query with the old data
        self._find("#search_input", Input).value = ""
        self.refresh_view()

    def refresh_view(self) -> None:
        """Project the current page of the store onto the widgets."""
        store = self.controller.store
        self._find("#product_table", ProductTable).show_products(
            store.page_window()
        )
        self._find("#pagination", Paginator).show(store.pagination())
        self._update_sort_labels()

        total_pages = max(1, store.total_pages)
        self._find("#status", Static).update(
            f"📦 {len(store.view)} of {len(store.products)} products"
            f" · page {store.current_page}/{total_pages}"
        )

    def _update_sort_labels(self) -> None:
        state = self.controller.store.state
        arrow = "▲" if state.sort_direction is SortDirection.ASC else "▼"
        for col in self.settings.SORTABLE_COLUMNS:
            button = self._find(f"#sort_{col['field']}", Button)
            if col["field"] == state.sort_field:
                button.label = f"{col['label']} {arrow}"
            else:
                button.label = col["label"]

    # ── Event handlers ───────────────────────────────────

    def on_input_changed(self, event: Input.Changed) -> None:
        """Filter live as the search box changes."""
        if event.input.id != "search_input":
            return
        self.controller.store.apply_search(event.value)
        self.refresh_view()

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id != "page_size" or not isinstance(event.value, int):
            return
        self.controller.store.set_page_size(event.value)
        self.refresh_view()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle toolbar and sort button clicks."""
        button_id = event.button.id or ""
        if button_id.startswith("sort_"):
            self.controller.store.apply_sort(button_id.removeprefix("sort_"))
            self.refresh_view()
        elif button_id == "new_btn":
            self.action_new_product()
        elif button_id == "export_btn":
            self.action_export()

    def on_paginator_page_selected(
        self, event: Paginator.PageSelected
    ) -> None:
        if self.controller.store.go_to_page(event.page):
            self.refresh_view()

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Open the detail view for the selected row."""
        window = self.controller.store.page_window()
        if not 0 <= event.cursor_row < len(window):
            return
        product = self.controller.store.find(window[event.cursor_row].id)
        if product is not None:
            self.show_detail(product)

    # ── Detail / edit / create workflows ─────────────────

    def show_detail(self, product: Product) -> None:
        """Open the detail view; chain into the edit form once it closes."""

        def after_detail(result: str | None) -> None:
            if result == "edit":
                self.open_edit_form(product)

        self.push_screen(DetailScreen(product), after_detail)

    def open_edit_form(self, product: Product) -> None:
        def after_edit(saved: bool | None) -> None:
            if saved:
                self.run_worker(self.load_products(), group="load")
                self.notify("Product updated")

        self.push_screen(
            ProductFormScreen(
                f"Edit product #{product.id}",
                functools.partial(self._submit_update, product.id),
                product=product,
            ),
            after_edit,
        )

    def action_new_product(self) -> None:
        """Open an empty create form."""

        def after_create(saved: bool | None) -> None:
            if saved:
                self.run_worker(self.load_products(), group="load")
                self.notify("Product created")

        self.push_screen(
            ProductFormScreen("New product", self._submit_create),
            after_create,
        )

    async def _submit_create(self, draft: ProductDraft) -> bool:
        try:
            await self.controller.create_product(draft)
        except GatewayError as exc:
            logger.error("Create failed: %s", exc, exc_info=True)
            self.notify(f"Create failed: {exc}", severity="error")
            return False
        return True

    async def _submit_update(self, product_id: int, draft: ProductDraft) -> bool:
        try:
            await self.controller.update_product(product_id, draft)
        except GatewayError as exc:
            logger.error(
                "Update of product %d failed: %s",
                product_id,
                exc,
                exc_info=True,
            )
            self.notify(f"Update failed: {exc}", severity="error")
            return False
        return True

    # ── Actions ──────────────────────────────────────────

    def action_reload(self) -> None:
        self.run_worker(self.load_products(), group="load")

    def action_previous_page(self) -> None:
        store = self.controller.store
        if store.go_to_page(store.current_page - 1):
            self.refresh_view()

    def action_next_page(self) -> None:
        store = self.controller.store
        if store.go_to_page(store.current_page + 1):
            self.refresh_view()

    def action_export(self) -> None:
        """Export the visible page to CSV."""
        try:
            path = self.controller.export_page()
            logger.info("Exported page to %s", path)
            self.notify(f"Exported to {path}")
        except OSError as e:
            logger.error("Failed to export page", exc_info=True)
            self.notify(f"Export failed: {e}", severity="error")
