# catalog_admin/models/view_state.py

"""View state and pagination metadata for the product dashboard."""

from dataclasses import dataclass, field
from enum import Enum

from catalog_admin.config.settings import Settings


class SortDirection(Enum):
    """Direction of the active sort."""

    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        """Return the opposite direction."""
        if self is SortDirection.ASC:
            return SortDirection.DESC
        return SortDirection.ASC


@dataclass
class ViewState:
    """What the user is currently looking at."""

    query: str = ""
    page: int = 1
    page_size: int = Settings.DEFAULT_PAGE_SIZE
    sort_field: str | None = None
    sort_direction: SortDirection = SortDirection.ASC


@dataclass
class PageInfo:
    """Pagination metadata handed to the renderer."""

    current: int
    total_pages: int
    pages: list[int] = field(default_factory=lambda: list[int]())

    @property
    def has_previous(self) -> bool:
        return self.current > 1

    @property
    def has_next(self) -> bool:
        return self.current < self.total_pages

    @property
    def visible(self) -> bool:
        """Pagination controls are only shown for more than one page."""
        return self.total_pages > 1
