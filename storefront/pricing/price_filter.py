"""
Price filter whose state lives in the URL.

The list view keeps `minPrice` / `maxPrice` in the query string so a filtered
catalog can be bookmarked, shared and reloaded. A PriceFilter is built from the
incoming query, clamped the way the "Apply Filter" action clamps, and written
back with `to_query`. A bound that sits on its limit is left out of the URL, so
"no filter" always has exactly one spelling: no parameters.
"""
from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

from models import Product
from storefront.config import PriceBounds

from .price_utils import filter_products_by_price, format_price

MIN_PARAM = "minPrice"
MAX_PARAM = "maxPrice"

# Leading decimal number, the rest of the string is ignored ("12.5abc" -> 12.5).
_LEADING_NUMBER = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII
)


def parse_price(raw: str | None) -> float | None:
    if not raw:
        return None
    match = _LEADING_NUMBER.match(raw)
    if match is None:
        return None
    value = float(match.group(1))
    if not math.isfinite(value):
        return None
    return value


def format_query_number(value: float) -> str:
    """10.0 -> "10", 10.5 -> "10.5"."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _query_pairs(params: Any) -> list[tuple[str, str]]:
    """Pairs from QueryParams, a plain mapping or any iterable of pairs."""
    if hasattr(params, "multi_items"):
        return list(params.multi_items())
    if isinstance(params, Mapping):
        return list(params.items())
    return list(params)


@dataclass(frozen=True)
class PriceFilter:
    bounds: PriceBounds
    # None means the input is empty and the bound applies.
    min_price: float | None = None
    max_price: float | None = None

    @classmethod
    def from_query(cls, params: Mapping[str, str], bounds: PriceBounds) -> "PriceFilter":
        return cls(
            bounds=bounds,
            min_price=parse_price(params.get(MIN_PARAM)),
            max_price=parse_price(params.get(MAX_PARAM)),
        )

    @property
    def effective_min(self) -> float:
        return self.bounds.min_price if self.min_price is None else self.min_price

    @property
    def effective_max(self) -> float:
        return self.bounds.max_price if self.max_price is None else self.max_price

    @property
    def is_active(self) -> bool:
        return (
            self.effective_min > self.bounds.min_price
            or self.effective_max < self.bounds.max_price
        )

    @property
    def range_label(self) -> str:
        return f"{format_price(self.effective_min)} - {format_price(self.effective_max)}"

    def applied(self) -> "PriceFilter":
        """
        Clamp both values into the bounds.

        A zero or missing value falls back to its bound, so a maximum that
        clamps down to 0 is dropped as well. min > max is kept as is; such a
        filter simply matches nothing.
        """
        lo, hi = self.bounds.min_price, self.bounds.max_price
        valid_min = max(lo, min(self.min_price or lo, hi))
        valid_max = min(hi, max(self.max_price or hi, lo))
        return PriceFilter(
            bounds=self.bounds,
            min_price=valid_min if valid_min > lo else None,
            max_price=valid_max if valid_max and valid_max < hi else None,
        )

    def cleared(self) -> "PriceFilter":
        return PriceFilter(bounds=self.bounds)

    def apply_to(self, products: list[Product]) -> list[Product]:
        return filter_products_by_price(products, self.effective_min, self.effective_max)

    def to_query(self, params: Mapping[str, str] | Iterable[tuple[str, str]] = ()) -> str:
        """
        Rebuild a query string carrying this filter.

        Other parameters keep their order. An existing minPrice / maxPrice is
        replaced in place; repeated ones collapse into the first.
        """
        wanted: dict[str, str | None] = {MIN_PARAM: None, MAX_PARAM: None}
        if self.effective_min > self.bounds.min_price:
            wanted[MIN_PARAM] = format_query_number(self.effective_min)
        if self.effective_max < self.bounds.max_price:
            wanted[MAX_PARAM] = format_query_number(self.effective_max)

        pairs = _query_pairs(params)
        query: list[tuple[str, str]] = []
        written: set[str] = set()
        for key, value in pairs:
            if key not in wanted:
                query.append((key, value))
                continue
            if key in written or wanted[key] is None:
                continue
            query.append((key, wanted[key]))
            written.add(key)
        for key, value in wanted.items():
            if value is not None and key not in written:
                query.append((key, value))
        return urlencode(query)

    def url(self, path: str, params: Mapping[str, str] | Iterable[tuple[str, str]] = ()) -> str:
        query = self.to_query(params)
        return f"{path}?{query}" if query else path
