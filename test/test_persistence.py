from pathlib import Path

import pytest

from conftest import fixed_clock, seeded_ledger
from designqube.domain.errors import PersistenceError
from designqube.repositories.sqlite_store import SqliteStore
from designqube.repositories.store import MemoryStore
from designqube.services.ledger import InventoryLedger


def test_flush_then_initialize_restores_collections(tmp_path: Path):
    store = SqliteStore(tmp_path / "store.db")
    store.init_db()
    ledger = seeded_ledger(store)
    ledger.record_sale("T1", 3)
    ledger.record_sale("S1", 1)

    reloaded = InventoryLedger(store, clock=fixed_clock)
    reloaded.initialize()

    assert list(reloaded.list_products()) == list(ledger.list_products())
    assert list(reloaded.list_sales()) == list(ledger.list_sales())


def test_empty_store_gives_empty_ledger(tmp_path: Path):
    store = SqliteStore(tmp_path / "empty.db")
    store.init_db()
    ledger = InventoryLedger(store)
    ledger.initialize()

    assert list(ledger.list_products()) == []
    assert list(ledger.list_sales()) == []


def test_malformed_data_is_discarded():
    store = MemoryStore({
        "products": "{not json",
        "sales": '[{"serial": "T1", "name": "Marble", "quantity": 1, "total": 200, "date": "01/01/2024"}]',
    })
    ledger = InventoryLedger(store)
    ledger.initialize()

    assert list(ledger.list_products()) == []
    assert len(list(ledger.list_sales())) == 1


def test_negative_stock_in_storage_is_not_coerced():
    store = MemoryStore({"products": '[{"serial": "T1", "name": "Marble", "stock": -4}]'})
    ledger = InventoryLedger(store)
    ledger.initialize()

    assert list(ledger.list_products()) == []


def test_missing_numbers_in_storage_default_to_zero():
    store = MemoryStore({"products": '[{"serial": "T1", "name": "Marble", "type": "tile"}]'})
    ledger = InventoryLedger(store)
    ledger.initialize()

    product = ledger.find_product("T1")
    assert product.stock == 0
    assert product.price_per_box == 0.0
    assert product.size is None


def test_storage_uses_original_field_names():
    store = MemoryStore()
    ledger = seeded_ledger(store)
    ledger.record_sale("T1", 1)

    assert '"pricePerBox": 200.0' in store.get("products")
    assert '"numBoxes": 4' in store.get("products")
    assert '"quantity": 1' in store.get("sales")


class FailingStore(MemoryStore):
    fail = False

    def set(self, key: str, blob: str) -> None:
        if self.fail:
            raise PersistenceError("disk full")
        super().set(key, blob)


def test_failed_flush_rolls_back_in_memory_sale():
    store = FailingStore()
    ledger = seeded_ledger(store)
    store.fail = True

    with pytest.raises(PersistenceError):
        ledger.record_sale("T1", 3)

    assert ledger.find_product("T1").stock == 10
    assert list(ledger.list_sales()) == []


def test_sqlite_store_overwrites_keys(tmp_path: Path):
    store = SqliteStore(tmp_path / "kv.db")
    store.init_db()
    store.init_db()

    store.set("products", "[]")
    store.set("products", '[{"serial": "A"}]')

    assert store.get("products") == '[{"serial": "A"}]'
    assert store.get("sales") is None


def test_sqlite_store_write_failure_raises_persistence_error(tmp_path: Path):
    store = SqliteStore(tmp_path / "no_schema.db")

    with pytest.raises(PersistenceError):
        store.set("products", "[]")


@pytest.mark.parametrize("blobs", [
    {"sales": '[{"serial": "T1", "name": "Marble", "quantity": "NaN", "total": 200, "date": "01/01/2024"}]'},
    {"sales": '[{"serial": "T1", "name": "Marble", "quantity": Infinity, "total": 200, "date": "01/01/2024"}]'},
    {"products": '[{"serial": "T1", "name": "Marble", "stock": Infinity}]'},
    {"products": '[{"serial": "T1", "name": "Marble", "numBoxes": "1e999"}]'},
])
def test_non_finite_numbers_in_storage_are_discarded(blobs):
    ledger = InventoryLedger(MemoryStore(blobs))
    ledger.initialize()

    assert list(ledger.list_products()) == []
    assert list(ledger.list_sales()) == []


def test_negative_sale_in_storage_is_discarded():
    store = MemoryStore({
        "sales": '[{"serial": "T1", "name": "Marble", "quantity": -3, "total": -600, "date": "01/01/2024"}]',
    })
    ledger = InventoryLedger(store)
    ledger.initialize()

    assert list(ledger.list_sales()) == []


def test_empty_type_and_size_survive_reload():
    from designqube.domain.models import Product

    store = MemoryStore()
    ledger = seeded_ledger(store, products=[Product(serial="E1", name="Plain", type="", size="", stock=1)])

    reloaded = InventoryLedger(store, clock=fixed_clock)
    reloaded.initialize()

    assert list(reloaded.list_products()) == list(ledger.list_products())
    assert reloaded.find_product("E1").size == ""


def test_ledger_events_stay_out_of_sales_logger(caplog):
    import logging

    with caplog.at_level(logging.INFO):
        ledger = seeded_ledger()
        ledger.record_sale("T1", 1)

    by_message = {r.getMessage().split()[0]: r.name for r in caplog.records}
    assert by_message["sale_recorded"] == "designqube.sales"
    assert by_message["ledger_loaded"] == "designqube.services.ledger"
    assert by_message["products_imported"] == "designqube.services.ledger"
