"""
Paths and runtime settings for the catalog browser.

Single source of truth for:
- TEMPLATES_DIR / STATIC_DIR: HTML templates and static assets of the web views
- CatalogSettings:            upstream API, revalidation, price filter and paging knobs

Every setting can be overridden with a CATALOG_* environment variable.
Unset or unparseable values fall back to the defaults below.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

PACKAGE_DIR: Path = Path(__file__).resolve().parent
TEMPLATES_DIR: Path = PACKAGE_DIR / "web" / "templates"
STATIC_DIR: Path = PACKAGE_DIR / "web" / "static"

DEFAULT_API_BASE_URL = "https://fakestoreapi.com"

SITE_TITLE = "E-commerce Product Catalog - Telecom Store"
SITE_DESCRIPTION = (
    "Browse our collection of products with advanced filtering options. "
    "Find the perfect items with our price range filters."
)


def _read_env_float(name: str, default: float) -> float:
    """Read env var as float; return default if unset or invalid."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _read_env_int(name: str, default: int, minimum: int | None = None) -> int:
    """Read env var as int; return default if unset, invalid or below minimum."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    if minimum is not None and value < minimum:
        return default
    return value


@dataclass(frozen=True)
class PriceBounds:
    """Outer limits of the price filter inputs."""

    min_price: float = 0.0
    max_price: float = 1000.0
    step: float = 0.01

    def __post_init__(self) -> None:
        if self.min_price < 0 or self.min_price > self.max_price:
            raise ValueError(
                f"Invalid price bounds: {self.min_price} - {self.max_price}"
            )


@dataclass(frozen=True)
class CatalogSettings:
    api_base_url: str = DEFAULT_API_BASE_URL
    api_timeout: float = 10.0
    # Seconds a fetched list / detail stays fresh before it is requested again.
    products_ttl: float = 300.0
    product_ttl: float = 3600.0
    price_bounds: PriceBounds = field(default_factory=PriceBounds)
    default_page_size: int = 20
    max_page_size: int = 100

    def __post_init__(self) -> None:
        if self.default_page_size < 1 or self.max_page_size < 1:
            raise ValueError(
                f"Page sizes must be at least 1, got "
                f"{self.default_page_size} / {self.max_page_size}"
            )

    @classmethod
    def from_env(cls) -> "CatalogSettings":
        """Build settings from CATALOG_* env vars, falling back to defaults."""
        return cls(
            api_base_url=os.getenv("CATALOG_API_BASE_URL") or DEFAULT_API_BASE_URL,
            api_timeout=_read_env_float("CATALOG_API_TIMEOUT", 10.0),
            products_ttl=_read_env_float("CATALOG_PRODUCTS_TTL", 300.0),
            product_ttl=_read_env_float("CATALOG_PRODUCT_TTL", 3600.0),
            price_bounds=PriceBounds(
                min_price=_read_env_float("CATALOG_PRICE_MIN", 0.0),
                max_price=_read_env_float("CATALOG_PRICE_MAX", 1000.0),
                step=_read_env_float("CATALOG_PRICE_STEP", 0.01),
            ),
            default_page_size=_read_env_int("CATALOG_PAGE_SIZE", 20, minimum=1),
            max_page_size=_read_env_int("CATALOG_MAX_PAGE_SIZE", 100, minimum=1),
        )
