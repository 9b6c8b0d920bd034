from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from designqube.repositories.sqlite_store import SqliteStore
from designqube.services.excel_service import ExcelService
from designqube.services.ledger import InventoryLedger
from designqube.services.reporting_service import ReportingService


@dataclass(frozen=True)
class AppContainer:
    store: SqliteStore
    ledger: InventoryLedger
    excel: ExcelService
    reporting: ReportingService


def build_container(store_path: Path | str) -> AppContainer:
    store = SqliteStore(store_path)
    store.init_db()

    ledger = InventoryLedger(store)
    ledger.initialize()

    return AppContainer(
        store=store,
        ledger=ledger,
        excel=ExcelService(ledger),
        reporting=ReportingService(ledger),
    )
