from __future__ import annotations

from openpyxl import load_workbook

from designqube.domain.errors import ValidationError
from designqube.domain.models import Product, finite_float
import logging

log = logging.getLogger(__name__)


class ExcelService:
    def __init__(self, ledger):
        self.ledger = ledger

    def import_products_excel(self, path: str) -> tuple[int, int]:
        """
        Excel rows ADD stock to existing serials, new serials are created.
        Headers (case-insensitive):
          serial | type | brand | name | size | numBoxes | numPieces | pricePerBox | stock
        Only serial and name are required.
        """
        wb = load_workbook(path, read_only=True, data_only=True)
        try:
            ws = wb.active
            rows = ws.iter_rows(values_only=True)
            header_row = next(rows, None)
            if header_row is None:
                raise ValidationError("Spreadsheet is empty.")

            headers = {}
            for col, v in enumerate(header_row):
                if isinstance(v, str):
                    headers[v.strip().lower()] = col

            for r in ("serial", "name"):
                if r not in headers:
                    raise ValidationError(f"Missing column header: {r}")

            def cell(values, header):
                col = headers.get(header.lower())
                if col is None or col >= len(values):
                    return None
                return values[col]

            products: list[Product] = []
            skipped = 0
            for row_no, values in enumerate(rows, start=2):
                try:
                    serial = cell(values, "serial")
                    name = cell(values, "name")
                    if serial is None or str(serial).strip() == "" or not name:
                        skipped += 1
                        continue

                    size = cell(values, "size")
                    kind = cell(values, "type")
                    products.append(
                        Product(
                            serial=str(serial).strip(),
                            name=str(name).strip(),
                            type=str(kind).strip() or None if kind else None,
                            brand=str(cell(values, "brand") or "").strip(),
                            size=str(size).strip() if size not in (None, "") else None,
                            num_boxes=int(finite_float(cell(values, "numBoxes") or 0)),
                            num_pieces=int(finite_float(cell(values, "numPieces") or 0)),
                            price_per_box=finite_float(cell(values, "pricePerBox") or 0),
                            stock=int(finite_float(cell(values, "stock") or 0)),
                        )
                    )
                except (TypeError, ValueError) as e:
                    log.warning("Excel import skipped row %s: %s", row_no, e)
                    skipped += 1
        finally:
            wb.close()

        if products:
            self.ledger.import_products(products)
        return len(products), skipped
