from urllib.parse import urlsplit

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr, field_validator

# Upstream numbers must arrive as JSON numbers; "12.5" is a format error, not a price.


class Rating(BaseModel):
    rate: StrictFloat
    count: StrictInt


class Product(BaseModel):
    # Shape of a FakeStore-style product; unknown keys are dropped.
    id: StrictInt
    title: StrictStr
    price: StrictFloat
    description: StrictStr
    category: StrictStr
    image: StrictStr
    rating: Rating

    @field_validator("image")
    @classmethod
    def _require_absolute_url(cls, v: str) -> str:
        parts = urlsplit(v)
        if not parts.scheme or not parts.netloc:
            raise ValueError(f"Image '{v}' is not an absolute URL")
        return v


class PriceRange(BaseModel):
    min: float
    max: float


class ProductPage(BaseModel):
    """One page of the (optionally price-filtered) catalog."""

    items: list[Product] = Field(default_factory=list)
    total: int = Field(ge=0)
    offset: int = Field(ge=0)
    limit: int = Field(ge=1)
    price_range: PriceRange
