"""
Server-rendered catalog pages: the filterable product grid and product detail.
"""
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from storefront.config import CatalogSettings
from storefront.deps import get_catalog, get_settings
from storefront.ids import require_id_number
from storefront.pricing import PriceFilter
from storefront.upstream import CatalogClient

from .templating import templates

router = APIRouter(include_in_schema=False)


@router.get("/", response_class=HTMLResponse, name="home")
async def home(
    request: Request,
    catalog: CatalogClient = Depends(get_catalog),
    settings: CatalogSettings = Depends(get_settings),
) -> Response:
    params = request.query_params
    price_filter = PriceFilter.from_query(params, settings.price_bounds).applied()

    # Keep the address bar in sync with what is actually applied.
    if price_filter.to_query(params) != urlencode(params.multi_items()):
        return RedirectResponse(price_filter.url(request.url.path, params), status_code=302)

    products = await catalog.get_products()
    visible = price_filter.apply_to(products)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "products": products,
            "visible": visible,
            "price_filter": price_filter,
            "bounds": settings.price_bounds,
            "clear_url": price_filter.cleared().url(request.url.path, params),
        },
    )


@router.get("/products", response_class=HTMLResponse)
async def products_index() -> Response:
    raise HTTPException(status_code=404)


@router.get("/products/{product_id}", response_class=HTMLResponse, name="product_detail")
async def product_detail(
    request: Request,
    product_id: str,
    catalog: CatalogClient = Depends(get_catalog),
) -> Response:
    product = await catalog.get_product(require_id_number(product_id))
    return templates.TemplateResponse(request, "product_detail.html", {"product": product})
