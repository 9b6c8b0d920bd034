from .ledger import InventoryLedger
from .excel_service import ExcelService
from .reporting_service import ReportingService

__all__ = [
    "InventoryLedger",
    "ExcelService",
    "ReportingService",
]
