class CatalogError(Exception):
    """Base class for failures while loading catalog data."""


class UpstreamHTTPError(CatalogError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP error! status: {status_code}")
        self.status_code = status_code


class UpstreamUnavailableError(CatalogError):
    """The store API could not be reached (timeout, refused connection, ...)."""


class InvalidPayloadError(CatalogError):
    def __init__(self) -> None:
        super().__init__("Invalid data format received from API")


class ProductNotFoundError(CatalogError):
    def __init__(self, product_id: int | str) -> None:
        super().__init__(f"Product with ID {product_id} not found")
        self.product_id = product_id
