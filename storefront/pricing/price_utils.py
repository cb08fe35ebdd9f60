from models import PriceRange, Product


def filter_products_by_price(
    products: list[Product], min_price: float, max_price: float
) -> list[Product]:
    """Products priced within [min_price, max_price], both ends inclusive."""
    return [p for p in products if min_price <= p.price <= max_price]


def calculate_price_range(products: list[Product]) -> PriceRange:
    if not products:
        return PriceRange(min=0, max=0)
    prices = [p.price for p in products]
    return PriceRange(min=min(prices), max=max(prices))


def format_price(price: float) -> str:
    return f"${price:.2f}"


def is_valid_price_range(min_price: float, max_price: float) -> bool:
    return min_price >= 0 and max_price >= 0 and min_price <= max_price
