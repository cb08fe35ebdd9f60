"""Tests for price filtering, range and formatting helpers."""

import unittest

from models import Product, Rating
from storefront.pricing import (
    calculate_price_range,
    filter_products_by_price,
    format_price,
    is_valid_price_range,
)


def _make_product(product_id: int, price: float, rate: float = 4.0, count: int = 10) -> Product:
    return Product(
        id=product_id,
        title=f"Product {product_id}",
        price=price,
        description=f"Test product {product_id}",
        category="test",
        image=f"https://example.com/{product_id}.jpg",
        rating=Rating(rate=rate, count=count),
    )


MOCK_PRODUCTS = [
    _make_product(1, 10.99, rate=4.5, count=10),
    _make_product(2, 25.5, rate=4.0, count=5),
    _make_product(3, 99.99, rate=3.5, count=15),
]


class TestFilterProductsByPrice(unittest.TestCase):

    def test_filters_products_within_price_range(self) -> None:
        result = filter_products_by_price(MOCK_PRODUCTS, 20, 50)

        self.assertEqual(len(result), 1)
        self.assertEqual(result[0].id, 2)
        self.assertEqual(result[0].price, 25.5)

    def test_returns_all_products_when_range_includes_all_prices(self) -> None:
        result = filter_products_by_price(MOCK_PRODUCTS, 0, 100)

        self.assertEqual(len(result), 3)

    def test_returns_empty_list_when_no_products_match(self) -> None:
        result = filter_products_by_price(MOCK_PRODUCTS, 200, 300)

        self.assertEqual(result, [])

    def test_includes_products_at_exact_price_boundaries(self) -> None:
        result = filter_products_by_price(MOCK_PRODUCTS, 10.99, 25.5)

        self.assertEqual([p.id for p in result], [1, 2])

    def test_inverted_range_matches_nothing(self) -> None:
        result = filter_products_by_price(MOCK_PRODUCTS, 50, 20)

        self.assertEqual(result, [])

    def test_does_not_modify_input(self) -> None:
        products = list(MOCK_PRODUCTS)
        filter_products_by_price(products, 20, 50)

        self.assertEqual([p.id for p in products], [1, 2, 3])


class TestCalculatePriceRange(unittest.TestCase):

    def test_calculates_min_and_max_prices(self) -> None:
        result = calculate_price_range(MOCK_PRODUCTS)

        self.assertEqual(result.min, 10.99)
        self.assertEqual(result.max, 99.99)

    def test_returns_zeros_for_empty_list(self) -> None:
        result = calculate_price_range([])

        self.assertEqual(result.min, 0)
        self.assertEqual(result.max, 0)

    def test_handles_single_product(self) -> None:
        result = calculate_price_range([MOCK_PRODUCTS[0]])

        self.assertEqual(result.min, 10.99)
        self.assertEqual(result.max, 10.99)


class TestFormatPrice(unittest.TestCase):

    def test_formats_with_dollar_sign_and_two_decimals(self) -> None:
        self.assertEqual(format_price(10.99), "$10.99")
        self.assertEqual(format_price(5), "$5.00")
        self.assertEqual(format_price(99.999), "$100.00")

    def test_handles_zero_price(self) -> None:
        self.assertEqual(format_price(0), "$0.00")


class TestIsValidPriceRange(unittest.TestCase):

    def test_valid_ranges(self) -> None:
        self.assertTrue(is_valid_price_range(0, 100))
        self.assertTrue(is_valid_price_range(10, 10))
        self.assertTrue(is_valid_price_range(5.99, 25.5))

    def test_invalid_ranges(self) -> None:
        self.assertFalse(is_valid_price_range(100, 50))
        self.assertFalse(is_valid_price_range(-10, 50))
        self.assertFalse(is_valid_price_range(10, -5))
