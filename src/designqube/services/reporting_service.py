from __future__ import annotations

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.table import Table, TableStyleInfo


class ReportingService:
    def __init__(self, ledger):
        self.ledger = ledger

    def export_report_excel(self, path: str) -> None:
        wb = Workbook()

        def money(cell):
            cell.number_format = "#,##0.00"

        def bold_row(ws, r):
            for c in ws[r]:
                c.font = Font(bold=True)

        def set_widths(ws, widths: dict[str, int]):
            for col, w in widths.items():
                ws.column_dimensions[col].width = w

        def add_table(ws, name: str, start_row: int, end_row: int, end_col: int):
            ref = f"A{start_row}:{get_column_letter(end_col)}{end_row}"
            tab = Table(displayName=name, ref=ref)
            tab.tableStyleInfo = TableStyleInfo(
                name="TableStyleMedium9",
                showRowStripes=True,
                showColumnStripes=False,
            )
            ws.add_table(tab)

        summary = self.ledger.aggregate_summary()

        # -------- 1) Dashboard --------
        ws = wb.active
        ws.title = "Dashboard"
        ws["A1"] = "Dashboard"
        ws["A1"].font = Font(bold=True, size=14)

        ws["A3"] = "Total products"
        ws["B3"] = int(summary.product_count)
        ws["A4"] = "Total stock"
        ws["B4"] = int(summary.total_stock_units)
        ws["A5"] = "Total sales (₹)"
        ws["B5"] = float(summary.total_sales_value)
        money(ws["B5"])

        ws["A7"] = "Low stock"
        ws["A7"].font = Font(bold=True)
        ws.append(["Serial", "Name", "Stock"])
        bold_row(ws, 8)
        for p in summary.low_stock_products:
            ws.append([p.serial, p.name, int(p.stock)])
        set_widths(ws, {"A": 22, "B": 34, "C": 10})

        # -------- 2) Products --------
        ws2 = wb.create_sheet("Products")
        ws2.append([
            "Serial", "Type", "Brand", "Name", "Size",
            "Boxes", "Pieces", "Price/Box", "Value", "Stock",
        ])
        bold_row(ws2, 1)
        for r, p in enumerate(self.ledger.list_products(), start=2):
            ws2.append([
                p.serial, p.type or "", p.brand, p.name, p.size or "-",
                int(p.num_boxes), int(p.num_pieces), float(p.price_per_box),
                float(p.boxes_value), int(p.stock),
            ])
            money(ws2[f"H{r}"])
            money(ws2[f"I{r}"])
        ws2.freeze_panes = "A2"
        set_widths(ws2, {
            "A": 14, "B": 12, "C": 16, "D": 30, "E": 12,
            "F": 8, "G": 8, "H": 12, "I": 14, "J": 8,
        })
        if ws2.max_row >= 2:
            add_table(ws2, "ProductsDetail", 1, ws2.max_row, 10)

        # -------- 3) Sales --------
        ws3 = wb.create_sheet("Sales")
        ws3.append(["Serial", "Name", "Type", "Quantity", "Total", "Date"])
        bold_row(ws3, 1)
        for r, s in enumerate(self.ledger.list_sales(), start=2):
            ws3.append([s.serial, s.name, s.type or "", int(s.quantity), float(s.total), s.date])
            money(ws3[f"E{r}"])
        ws3.freeze_panes = "A2"
        set_widths(ws3, {"A": 14, "B": 30, "C": 12, "D": 10, "E": 14, "F": 14})
        if ws3.max_row >= 2:
            add_table(ws3, "SalesDetail", 1, ws3.max_row, 6)

        wb.save(path)
