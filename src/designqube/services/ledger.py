from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import replace
from datetime import date
from typing import Callable, Iterable, Iterator, Optional

from designqube.domain.errors import (
    InsufficientStockError,
    InvalidQuantityError,
    PersistenceError,
    UnknownSerialError,
)
from designqube.domain.models import Product, Sale, Summary, matches_category
from designqube.repositories.codec import (
    CodecError,
    decode_products,
    decode_sales,
    encode_products,
    encode_sales,
)
from designqube.repositories.store import PRODUCTS_KEY, SALES_KEY, PersistentStore

log = logging.getLogger(__name__)
sales_log = logging.getLogger("designqube.sales")


class InventoryLedger:
    """Authoritative in-memory products and sales, mirrored to a store.

    Every mutation is followed by a flush of both collections. If the flush
    fails the in-memory state is put back the way it was and the
    PersistenceError propagates.
    """

    def __init__(
        self,
        store: PersistentStore,
        clock: Callable[[], date] | None = None,
        date_format: str = "%d/%m/%Y",
    ):
        self.store = store
        self.clock = clock or date.today
        self.date_format = date_format
        self._products: list[Product] = []
        self._sales: list[Sale] = []

    # ---------- loading / saving ----------
    def initialize(self) -> None:
        self._products = self._load(PRODUCTS_KEY, decode_products)
        self._sales = self._load(SALES_KEY, decode_sales)
        log.info("ledger_loaded products=%s sales=%s", len(self._products), len(self._sales))

    def _load(self, key: str, decode) -> list:
        blob = self.store.get(key)
        if blob is None:
            return []
        try:
            return decode(blob)
        except CodecError as e:
            log.warning("stored_data_discarded key=%s error=%s", key, e)
            return []

    def flush(self) -> None:
        self.store.set(PRODUCTS_KEY, encode_products(self._products))
        self.store.set(SALES_KEY, encode_sales(self._sales))

    @contextmanager
    def _mutation(self) -> Iterator[None]:
        products, sales = list(self._products), list(self._sales)
        try:
            yield
            self.flush()
        except PersistenceError:
            self._products, self._sales = products, sales
            log.exception("flush_failed_rolled_back")
            raise
        except Exception:
            self._products, self._sales = products, sales
            raise

    # ---------- sales ----------
    @staticmethod
    def _parse_quantity(quantity) -> int:
        if isinstance(quantity, bool):
            raise InvalidQuantityError("Quantity must be a number.")
        if isinstance(quantity, int):
            qty = quantity
        else:
            value = quantity.strip() if isinstance(quantity, str) else quantity
            try:
                qty = int(value, 10) if isinstance(value, str) else None
            except ValueError:
                qty = None
            if qty is None:
                try:
                    number = float(value)
                except (TypeError, ValueError):
                    raise InvalidQuantityError(f"Quantity must be a number. Received: {quantity!r}") from None
                # NaN and infinities are not integers either
                if not number.is_integer():
                    raise InvalidQuantityError(f"Quantity must be a whole number. Received: {quantity!r}")
                qty = int(number)
        if qty <= 0:
            raise InvalidQuantityError("Quantity must be >= 1.")
        return qty

    def record_sale(self, serial: str, quantity) -> Sale:
        idx = self._index_of(serial)
        if idx is None:
            raise UnknownSerialError(f"Unknown serial: {serial}")
        product = self._products[idx]

        qty = self._parse_quantity(quantity)
        if qty > product.stock:
            raise InsufficientStockError(f"Not enough stock for {product.serial}. Available: {product.stock}")

        sale = Sale(
            serial=product.serial,
            name=product.name,
            type=product.type,
            quantity=qty,
            total=qty * product.price_per_box,
            date=self.clock().strftime(self.date_format),
        )
        with self._mutation():
            self._products[idx] = replace(product, stock=product.stock - qty)
            self._sales.append(sale)

        sales_log.info("sale_recorded serial=%s qty=%s total=%.2f", sale.serial, qty, sale.total)
        return sale

    # ---------- catalog ----------
    def import_products(self, products: Iterable[Product]) -> tuple[int, int]:
        """
        Upsert by serial. Incoming stock is added to what is already on hand;
        descriptive fields and price are replaced.
        """
        added = 0
        updated = 0
        with self._mutation():
            for p in products:
                idx = self._index_of(p.serial)
                if idx is None:
                    self._products.append(p)
                    added += 1
                else:
                    existing = self._products[idx]
                    self._products[idx] = replace(p, stock=existing.stock + p.stock)
                    updated += 1
        log.info("products_imported added=%s updated=%s", added, updated)
        return added, updated

    def _index_of(self, serial: str) -> Optional[int]:
        for i, p in enumerate(self._products):
            if p.serial == serial:
                return i
        return None

    def find_product(self, serial: str) -> Optional[Product]:
        idx = self._index_of(serial)
        return None if idx is None else self._products[idx]

    # ---------- read model ----------
    def list_products(self, category: Optional[str] = None) -> Iterator[Product]:
        return (p for p in self._products if matches_category(p.type, category))

    def list_sales(self, category: Optional[str] = None) -> Iterator[Sale]:
        return (s for s in self._sales if matches_category(s.type, category))

    def aggregate_summary(self) -> Summary:
        return Summary(
            product_count=len(self._products),
            total_stock_units=sum(p.stock for p in self._products),
            total_sales_value=sum(s.total for s in self._sales),
            low_stock_products=tuple(p for p in self._products if p.is_low_stock),
        )
