"""
Exception handlers that turn catalog failures into pages or JSON bodies.

Browser routes get rendered HTML; anything under /api/ keeps FastAPI's
`{"detail": ...}` JSON shape.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.upstream.errors import CatalogError, ProductNotFoundError

from .templating import templates

logger = logging.getLogger(__name__)


def _is_api_request(request: Request) -> bool:
    return request.url.path.startswith("/api/")


async def handle_product_not_found(request: Request, exc: ProductNotFoundError) -> Response:
    if _is_api_request(request):
        return JSONResponse({"detail": str(exc)}, status_code=404)
    return templates.TemplateResponse(
        request, "product_not_found.html", {}, status_code=404
    )


async def handle_catalog_error(request: Request, exc: CatalogError) -> Response:
    logger.warning("Failed to serve %s: %s", request.url.path, exc)
    if _is_api_request(request):
        return JSONResponse({"detail": str(exc)}, status_code=502)
    return templates.TemplateResponse(
        request, "error.html", {"retry_url": str(request.url)}, status_code=502
    )


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == 404 and not _is_api_request(request):
        return templates.TemplateResponse(request, "not_found.html", {}, status_code=404)
    return await http_exception_handler(request, exc)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProductNotFoundError, handle_product_not_found)
    app.add_exception_handler(CatalogError, handle_catalog_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
