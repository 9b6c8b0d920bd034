from .models import Product, Sale, Summary, LOW_STOCK_THRESHOLD
from .errors import (
    AppError,
    ValidationError,
    InvalidSale,
    UnknownSerialError,
    InvalidQuantityError,
    InsufficientStockError,
    PersistenceError,
)

__all__ = [
    "Product",
    "Sale",
    "Summary",
    "LOW_STOCK_THRESHOLD",
    "AppError",
    "ValidationError",
    "InvalidSale",
    "UnknownSerialError",
    "InvalidQuantityError",
    "InsufficientStockError",
    "PersistenceError",
]
