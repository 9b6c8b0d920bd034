from __future__ import annotations

from tkinter import ttk, filedialog
from datetime import date
import logging

from designqube.domain.errors import AppError

log = logging.getLogger(__name__)


class ReportsView:
    def __init__(self, notebook: ttk.Notebook, app):
        self.app = app
        self.frame = ttk.Frame(notebook)
        notebook.add(self.frame, text="Excel + Reports")

        box1 = ttk.LabelFrame(self.frame, text="Add stock from Excel")
        box1.pack(fill="x", padx=10, pady=10)
        ttk.Label(
            box1,
            text="Headers: serial | type | brand | name | size | numBoxes | numPieces | pricePerBox | stock",
        ).pack(anchor="w", padx=10, pady=(8, 4))
        ttk.Button(box1, text="Choose file and import", style="Big.TButton", command=self.import_excel)\
            .pack(anchor="w", padx=10, pady=(0, 10))

        box2 = ttk.LabelFrame(self.frame, text="Export report to Excel")
        box2.pack(fill="x", padx=10, pady=10)
        ttk.Button(box2, text="Export report", style="Big.TButton", command=self.export_report)\
            .pack(anchor="w", padx=10, pady=10)

    def refresh(self):
        pass

    def import_excel(self):
        path = filedialog.askopenfilename(filetypes=[("Excel", "*.xlsx")])
        if not path:
            return
        try:
            ok, skipped = self.app.excel.import_products_excel(path)
        except AppError as e:
            self.app.toast(str(e), kind="error", ms=4000)
            return
        except Exception as e:
            log.exception("Excel import failed: %s", e)
            self.app.toast("Excel import failed.", kind="error")
            return
        self.app.refresh_all()
        self.app.toast(f"Imported {ok} rows, skipped {skipped}.", kind="success")

    def export_report(self):
        path = filedialog.asksaveasfilename(
            defaultextension=".xlsx",
            initialfile=f"designqube_report_{date.today().isoformat()}.xlsx",
            filetypes=[("Excel", "*.xlsx")],
        )
        if not path:
            return
        try:
            self.app.reporting.export_report_excel(path)
        except Exception as e:
            log.exception("Report export failed: %s", e)
            self.app.toast("Report export failed.", kind="error")
            return
        self.app.toast("Report exported.", kind="success")
