from fastapi import Request

from storefront.config import CatalogSettings
from storefront.upstream import CatalogClient


def get_settings(request: Request) -> CatalogSettings:
    return request.app.state.settings


def get_catalog(request: Request) -> CatalogClient:
    return request.app.state.catalog
