import contextlib
import logging

import httpx
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from storefront.api import router as api_router
from storefront.config import STATIC_DIR, CatalogSettings
from storefront.upstream import CatalogClient
from storefront.web import install_error_handlers, router as web_router

logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Serving catalog from %s", app.state.settings.api_base_url)
    yield
    await app.state.catalog.aclose()


def create_app(
    settings: CatalogSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build the catalog app. `transport` replaces the network for the store API."""
    settings = settings or CatalogSettings.from_env()

    app = FastAPI(title="Product Catalog", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.catalog = CatalogClient(settings, transport=transport)

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    app.include_router(api_router)
    app.include_router(web_router)
    install_error_handlers(app)
    return app


app = create_app()
