from .client import CatalogClient
from .errors import (
    CatalogError,
    InvalidPayloadError,
    ProductNotFoundError,
    UpstreamHTTPError,
    UpstreamUnavailableError,
)

__all__ = [
    "CatalogClient",
    "CatalogError",
    "InvalidPayloadError",
    "ProductNotFoundError",
    "UpstreamHTTPError",
    "UpstreamUnavailableError",
]
