from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional

LOW_STOCK_THRESHOLD = 5

TILE = "tile"
SANITARY = "sanitary"
OTHERS = "others"


def category_of(product_type: Optional[str]) -> str:
    """Bucket a free-form product type into tile, sanitary or others."""
    t = (product_type or "").lower()
    if t in (TILE, SANITARY):
        return t
    return OTHERS


def matches_category(product_type: Optional[str], category: Optional[str]) -> bool:
    if category is None:
        return True
    wanted = category.strip().lower()
    if wanted == OTHERS:
        return category_of(product_type) == OTHERS
    return (product_type or "").lower() == wanted


def finite_float(value) -> float:
    """Parse a number, rejecting booleans, NaN and infinities with ValueError."""
    if isinstance(value, bool):
        raise ValueError(f"Expected a number. Received: {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Expected a finite number. Received: {value!r}")
    return number


def _non_negative(field_name: str, value) -> None:
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{field_name} must be >= 0. Received: {value}")


@dataclass(frozen=True)
class Product:
    serial: str
    name: str
    type: Optional[str] = None
    brand: str = ""
    size: Optional[str] = None
    num_boxes: int = 0
    num_pieces: int = 0
    price_per_box: float = 0.0
    stock: int = 0

    def __post_init__(self):
        _non_negative("num_boxes", self.num_boxes)
        _non_negative("num_pieces", self.num_pieces)
        _non_negative("price_per_box", self.price_per_box)
        _non_negative("stock", self.stock)

    @property
    def boxes_value(self) -> float:
        return self.num_boxes * self.price_per_box

    @property
    def is_low_stock(self) -> bool:
        return self.stock <= LOW_STOCK_THRESHOLD


@dataclass(frozen=True)
class Sale:
    serial: str
    name: str
    type: Optional[str]
    quantity: int
    total: float
    date: str

    def __post_init__(self):
        if self.quantity <= 0:
            raise ValueError(f"quantity must be >= 1. Received: {self.quantity}")
        _non_negative("total", self.total)


@dataclass(frozen=True)
class Summary:
    product_count: int
    total_stock_units: int
    total_sales_value: float
    low_stock_products: tuple[Product, ...]
