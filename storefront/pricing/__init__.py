from .price_filter import MAX_PARAM, MIN_PARAM, PriceFilter, parse_price
from .price_utils import (
    calculate_price_range,
    filter_products_by_price,
    format_price,
    is_valid_price_range,
)

__all__ = [
    "MAX_PARAM",
    "MIN_PARAM",
    "PriceFilter",
    "calculate_price_range",
    "filter_products_by_price",
    "format_price",
    "is_valid_price_range",
    "parse_price",
]
