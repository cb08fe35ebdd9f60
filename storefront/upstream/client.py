"""
Store API client: fetches products and validates them against the models.

The upstream exposes two endpoints, `/products` and `/products/{id}`. Every
response is checked against the pydantic contract before it reaches a view, so
templates never see a half-formed product.

Failure mapping:
  - transport errors (timeout, DNS, refused)   -> UpstreamUnavailableError
  - 404, or an empty/null body for a detail    -> ProductNotFoundError
  - any other non-2xx status                   -> UpstreamHTTPError
  - non-JSON body or schema mismatch           -> InvalidPayloadError

Successful results are kept for the configured TTL (see RevalidatingCache).
Failures are logged and re-raised, never cached.
"""
from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from models import Product
from storefront.config import CatalogSettings

from .cache import RevalidatingCache
from .errors import (
    InvalidPayloadError,
    ProductNotFoundError,
    UpstreamHTTPError,
    UpstreamUnavailableError,
)

logger = logging.getLogger(__name__)

_PRODUCT_LIST = TypeAdapter(list[Product])
_PRODUCTS_KEY = "products"


class CatalogClient:
    """Read-only access to the upstream store API."""

    def __init__(
        self,
        settings: CatalogSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.settings = settings or CatalogSettings.from_env()
        self._transport = transport
        self._http: httpx.AsyncClient | None = None
        self._cache = RevalidatingCache(clock=clock)

    def _client(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(
                base_url=self.settings.api_base_url,
                timeout=self.settings.api_timeout,
                transport=self._transport,
                headers={"Accept": "application/json"},
            )
        return self._http

    async def aclose(self) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def get_products(self) -> list[Product]:
        cached = self._cache.get(_PRODUCTS_KEY)
        if cached is not None:
            logger.debug("Serving product list from cache")
            return list(cached)

        response = await self._get("/products")
        if not response.is_success:
            logger.error("Error fetching products: HTTP %d", response.status_code)
            raise UpstreamHTTPError(response.status_code)

        payload = self._decode(response)
        try:
            products = _PRODUCT_LIST.validate_python(payload)
        except ValidationError as exc:
            logger.error("Validation error: %s", exc.errors())
            raise InvalidPayloadError() from exc

        self._cache.set(_PRODUCTS_KEY, products, ttl=self.settings.products_ttl)
        return list(products)

    async def get_product(self, product_id: int) -> Product:
        if product_id <= 0:
            raise ProductNotFoundError(product_id)

        key = f"products/{product_id}"
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Serving product %d from cache", product_id)
            return cached

        response = await self._get(f"/products/{product_id}")
        if response.status_code == 404:
            logger.info("Product %d not found upstream", product_id)
            raise ProductNotFoundError(product_id)
        if not response.is_success:
            logger.error(
                "Error fetching product %d: HTTP %d", product_id, response.status_code
            )
            raise UpstreamHTTPError(response.status_code)

        payload = self._decode(response)
        # FakeStore answers unknown ids with 200 and an empty body.
        if payload is None:
            logger.info("Product %d not found upstream (empty body)", product_id)
            raise ProductNotFoundError(product_id)

        try:
            product = Product.model_validate(payload)
        except ValidationError as exc:
            logger.error("Validation error: %s", exc.errors())
            raise InvalidPayloadError() from exc

        self._cache.set(key, product, ttl=self.settings.product_ttl)
        return product

    def invalidate(self) -> None:
        self._cache.invalidate()

    async def _get(self, path: str) -> httpx.Response:
        try:
            return await self._client().get(path)
        except httpx.RequestError as exc:
            logger.error("Error fetching %s: %s", path, exc)
            raise UpstreamUnavailableError(
                f"Could not reach product API at {self.settings.api_base_url}"
            ) from exc

    def _decode(self, response: httpx.Response) -> Any:
        if not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as exc:
            logger.error("Response from %s is not JSON", response.request.url)
            raise InvalidPayloadError() from exc
