# catalog_admin/ui/widgets.py

"""Product table and pagination bar widgets."""

from rich.style import Style
from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.coordinate import Coordinate
from textual.message import Message
from textual.widgets import Button, DataTable

from catalog_admin.config.settings import Settings
from catalog_admin.models.product import Product
from catalog_admin.models.view_state import PageInfo

TABLE_COLUMNS = ("ID", "Title", "Price", "Category", "Image", "Action")


def image_cell(url: str) -> Text:
    """Terminal hyperlink to the product's first image."""
    if not url:
        return Text("—", style="dim")
    return Text("🖼 open", style=Style(link=url))


class ProductTable(DataTable[str | Text]):
    """One row per product on the current page.

    Hovering a row shows its full description as the table tooltip;
    leaving the table clears it again.
    """

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__(id=id, zebra_stripes=True, cursor_type="row")
        self.descriptions: list[str] = []

    def on_mount(self) -> None:
        self.add_columns(*TABLE_COLUMNS)
        self.watch(self, "hover_coordinate", self._show_description, init=False)

    def show_products(self, products: list[Product]) -> None:
        """Replace every row with *products*."""
        self.clear()
        self.tooltip = None
        self.descriptions = [p.description for p in products]
        for p in products:
            self.add_row(
                str(p.id),
                p.title[:60],
                Text(p.display_price, style="green"),
                Text(f" {p.category_name} ", style="bold white on blue"),
                image_cell(p.image_url),
                Text("👁 View", style="bold cyan"),
            )

    def _show_description(self, coordinate: Coordinate) -> None:
        row = coordinate.row
        if 0 <= row < len(self.descriptions) and self.descriptions[row]:
            self.tooltip = self.descriptions[row]
        else:
            self.tooltip = None

    def on_leave(self, event: events.Leave) -> None:
        self.tooltip = None


class Paginator(Horizontal):
    """Prev/next and numbered page buttons, hidden for a single page.

    The buttons are composed once and relabelled on every render, so
    overlapping refreshes never race on mounting.
    """

    SLOTS = 2 * Settings.PAGINATION_RADIUS + 1

    class PageSelected(Message):
        """The user picked a page."""

        def __init__(self, page: int) -> None:
            super().__init__()
            self.page = page

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self._targets: dict[str, int] = {}

    def compose(self) -> ComposeResult:
        yield Button("« Prev", id="page_prev", classes="page-prev")
        for slot in range(self.SLOTS):
            yield Button("", id=f"page_slot_{slot}", classes="page-link")
        yield Button("Next »", id="page_next", classes="page-next")

    def show(self, info: PageInfo) -> None:
        """Relabel the buttons for *info*."""
        self.display = info.visible
        self._targets = {
            "page_prev": info.current - 1,
            "page_next": info.current + 1,
        }
        self.query_one("#page_prev", Button).disabled = not info.has_previous
        self.query_one("#page_next", Button).disabled = not info.has_next

        for slot in range(self.SLOTS):
            button = self.query_one(f"#page_slot_{slot}", Button)
            if slot < len(info.pages):
                page = info.pages[slot]
                self._targets[button.id or ""] = page
                button.label = str(page)
                button.variant = "primary" if page == info.current else "default"
                button.display = True
            else:
                button.display = False

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        page = self._targets.get(event.button.id or "")
        if page is not None:
            self.post_message(self.PageSelected(page))
