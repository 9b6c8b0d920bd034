from conftest import seeded_ledger
from designqube.domain.models import Product


def test_list_products_filters_by_category_case_insensitively():
    ledger = seeded_ledger()

    assert [p.serial for p in ledger.list_products("tile")] == ["T1"]
    assert [p.serial for p in ledger.list_products("TILE")] == ["T1"]
    assert [p.serial for p in ledger.list_products("sanitary")] == ["S1"]
    assert [p.serial for p in ledger.list_products("others")] == ["O1"]
    assert [p.serial for p in ledger.list_products()] == ["T1", "S1", "O1"]


def test_products_without_type_fall_into_others():
    ledger = seeded_ledger(products=[Product(serial="N1", name="Untyped")])

    assert [p.serial for p in ledger.list_products("others")] == ["N1"]
    assert list(ledger.list_products("tile")) == []


def test_listing_is_fresh_and_restartable():
    ledger = seeded_ledger()

    first = ledger.list_products()
    list(first)
    assert list(first) == []
    assert len(list(ledger.list_products())) == 3


def test_list_sales_by_category():
    ledger = seeded_ledger()
    ledger.record_sale("T1", 1)
    ledger.record_sale("S1", 1)
    ledger.record_sale("O1", 1)

    assert [s.serial for s in ledger.list_sales("tile")] == ["T1"]
    assert [s.serial for s in ledger.list_sales("others")] == ["O1"]
    assert [s.serial for s in ledger.list_sales()] == ["T1", "S1", "O1"]


def test_summary_low_stock_uses_threshold_of_five():
    ledger = seeded_ledger(products=[
        Product(serial="A", name="A", stock=3),
        Product(serial="B", name="B", stock=6),
    ])

    summary = ledger.aggregate_summary()

    assert [p.serial for p in summary.low_stock_products] == ["A"]
    assert summary.product_count == 2
    assert summary.total_stock_units == 9


def test_summary_counts_missing_stock_as_low():
    ledger = seeded_ledger(products=[Product(serial="Z", name="No stock field")])

    assert [p.serial for p in ledger.aggregate_summary().low_stock_products] == ["Z"]


def test_total_sales_value_matches_sales_and_is_idempotent():
    ledger = seeded_ledger()
    ledger.record_sale("T1", 3)
    ledger.record_sale("O1", 2)

    first = ledger.aggregate_summary()
    second = ledger.aggregate_summary()

    assert first.total_sales_value == sum(s.total for s in ledger.list_sales()) == 1300.0
    assert first == second
