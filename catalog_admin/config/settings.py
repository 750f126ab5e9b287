# catalog_admin/config/settings.py

"""Central configuration for the catalog_admin dashboard."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the catalog_admin dashboard."""

    # --- Remote API ---
    API_BASE_URL: str = os.getenv(
        "CATALOG_API_URL", "https://api.escuelajs.co/api/v1"
    ).rstrip("/")
    PRODUCTS_PATH: str = "/products"
    REQUEST_TIMEOUT: float | None = None  # None = wait indefinitely
    HEALTH_TIMEOUT: float = 10.0        # Seconds for --health probes
    SLOW_THRESHOLD_MS: float = 5000.0   # Probe latency flagged as slow

    # --- Browser Impersonation ---
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json",
        "Accept-Language": "en-US,en;q=0.9",
    }

    # --- Products ---
    DEFAULT_CATEGORY_ID: int = 1        # Category assigned on create/update
    MISSING_LABEL: str = "N/A"

    # --- View ---
    PAGE_SIZE_OPTIONS: list[int] = [5, 10, 20, 50]
    DEFAULT_PAGE_SIZE: int = 10
    PAGINATION_RADIUS: int = 2          # Page links shown either side
    SORTABLE_COLUMNS: list[dict[str, str]] = [
        {"field": "id", "label": "ID"},
        {"field": "title", "label": "Title"},
        {"field": "price", "label": "Price"},
        {"field": "category", "label": "Category"},
    ]

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    EXPORTS_DIR: Path = BASE_DIR / "exports"
    LOGS_DIR: Path = BASE_DIR / "logs"
