# catalog_admin/ui/screens.py

"""Modal screens for product detail, create and edit."""

import math
from collections.abc import Awaitable, Callable

from rich.style import Style
from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Rule, Static

from catalog_admin.config.settings import Settings
from catalog_admin.models.product import Product, ProductDraft

SubmitHandler = Callable[[ProductDraft], Awaitable[bool]]


def _price_input_value(price: float) -> str:
    if math.isnan(price):
        return ""
    if price.is_integer():
        return str(int(price))
    return str(price)


class DetailScreen(ModalScreen[str | None]):
    """Read-only view of one product.

    Dismisses with ``"edit"`` when the user asks to edit the product,
    ``None`` otherwise.
    """

    BINDINGS = [Binding("escape", "close_detail", "Close")]

    def __init__(self, product: Product) -> None:
        super().__init__()
        self.product = product

    def compose(self) -> ComposeResult:
        p = self.product
        image = (
            Text(p.image_url, style=Style(link=p.image_url))
            if p.image_url
            else Text("No image", style="dim")
        )
        with Vertical(id="detail_dialog", classes="dialog"):
            yield Static(Text(p.title, style="bold"), id="detail_title")
            yield Static(image, id="detail_image")
            yield Static(f"ID: {p.id}", id="detail_id")
            yield Static(f"Price: {p.display_price}", id="detail_price")
            yield Static(
                Text(f"Category: {p.category_name}"), id="detail_category"
            )
            yield Rule()
            yield Static("Description:")
            yield Static(Text(p.description), id="detail_description")
            with Horizontal(classes="dialog-buttons"):
                yield Button("Edit", variant="warning", id="edit_btn")
                yield Button("Close", id="detail_close")

    def on_mount(self) -> None:
        # The edit control is usable every time the detail view opens
        self.query_one("#edit_btn", Button).disabled = False

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "edit_btn":
            event.button.disabled = True
            self.dismiss("edit")
        elif event.button.id == "detail_close":
            self.dismiss(None)

    def action_close_detail(self) -> None:
        self.dismiss(None)


class ProductFormScreen(ModalScreen[bool]):
    """Create or edit form.

    ``submit_handler`` performs the remote call and returns True on success;
    the screen then dismisses with True.  On failure the screen stays
    open with everything the user typed.
    """

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(
        self,
        heading: str,
        submit_handler: SubmitHandler,
        product: Product | None = None,
    ) -> None:
        super().__init__()
        self.heading = heading
        self.submit_handler = submit_handler
        self.product = product
        self.submitting = False

    def compose(self) -> ComposeResult:
        p = self.product
        with Vertical(id="form_dialog", classes="dialog"):
            yield Static(self.heading, id="form_heading")
            if p is not None:
                yield Input(value=str(p.id), id="form_id", disabled=True)
            yield Input(
                value=p.title if p else "",
                placeholder="Title",
                id="form_title",
            )
            yield Input(
                value=_price_input_value(p.price) if p else "",
                placeholder="Price",
                id="form_price",
            )
            yield Input(
                value=p.description if p else "",
                placeholder="Description",
                id="form_description",
            )
            if p is not None:
                yield Input(
                    value=p.category.name if p.category else "",
                    placeholder="Category",
                    id="form_category",
                    disabled=True,
                )
            yield Input(
                value=p.image_url if p else "",
                placeholder="Image URL",
                id="form_image",
            )
            with Horizontal(classes="dialog-buttons"):
                yield Button("Save", variant="primary", id="form_save")
                yield Button("Cancel", id="form_cancel")

    def read_draft(self) -> ProductDraft:
        """Collect the form fields, coercing the price to a float.

        Raises ``ValueError`` when the price is not a finite number.
        """
        raw_price = self.query_one("#form_price", Input).value.strip()
        try:
            price = float(raw_price)
        except ValueError:
            msg = f"Price must be a number, got '{raw_price}'"
            raise ValueError(msg) from None
        if not math.isfinite(price):
            msg = f"Price must be a finite number, got '{raw_price}'"
            raise ValueError(msg)

        return ProductDraft(
            title=self.query_one("#form_title", Input).value,
            price=price,
            description=self.query_one("#form_description", Input).value,
            image_url=self.query_one("#form_image", Input).value,
            category_id=Settings.DEFAULT_CATEGORY_ID,
        )

    async def submit_form(self) -> None:
        """Validate, hand the draft to ``submit_handler`` and close on success."""
        if self.submitting:
            return
        try:
            draft = self.read_draft()
        except ValueError as exc:
            self.app.notify(str(exc), severity="warning")
            return

        self.submitting = True
        save_btn = self.query_one("#form_save", Button)
        save_btn.disabled = True
        try:
            saved = await self.submit_handler(draft)
        finally:
            self.submitting = False
            save_btn.disabled = False

        if saved:
            self.dismiss(True)

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "form_save":
            await self.submit_form()
        elif event.button.id == "form_cancel":
            self.dismiss(False)

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        await self.submit_form()

    def action_cancel(self) -> None:
        self.dismiss(False)
