"""
Read-only JSON product API.
"""

from fastapi import APIRouter, Depends, Query

from models import Product, ProductPage
from storefront.config import CatalogSettings
from storefront.deps import get_catalog, get_settings
from storefront.ids import require_id_number
from storefront.pricing import PriceFilter, calculate_price_range, parse_price
from storefront.upstream import CatalogClient

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/api/products", response_model=ProductPage)
async def list_products(
    min_price: str | None = Query(None, alias="minPrice"),
    max_price: str | None = Query(None, alias="maxPrice"),
    limit: int | None = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    catalog: CatalogClient = Depends(get_catalog),
    settings: CatalogSettings = Depends(get_settings),
) -> ProductPage:
    price_filter = PriceFilter(
        bounds=settings.price_bounds,
        min_price=parse_price(min_price),
        max_price=parse_price(max_price),
    ).applied()

    products = await catalog.get_products()
    matching = price_filter.apply_to(products)
    page_size = min(limit or settings.default_page_size, settings.max_page_size)
    return ProductPage(
        items=matching[offset : offset + page_size],
        total=len(matching),
        offset=offset,
        limit=page_size,
        price_range=calculate_price_range(products),
    )


@router.get("/api/products/{product_id}", response_model=Product)
async def get_product(
    product_id: str,
    catalog: CatalogClient = Depends(get_catalog),
) -> Product:
    return await catalog.get_product(require_id_number(product_id))
