from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox, simpledialog
import logging
from pathlib import Path

from designqube.domain.errors import InvalidSale, PersistenceError
from designqube.domain.models import OTHERS, SANITARY, TILE
from designqube.ui.views.dashboard_view import DashboardView
from designqube.ui.views.products_view import ProductsView
from designqube.ui.views.sales_view import SalesHistoryView, SalesView
from designqube.ui.views.reports_view import ReportsView

log = logging.getLogger(__name__)


class App(tk.Tk):
    def __init__(
        self,
        ledger,
        excel_service,
        reporting_service,
        store_path: str,
        logs_dir: str,
    ):
        super().__init__()
        self.title("DesignQube - Tiles & Sanitaryware")
        self.geometry("1200x700")
        self.minsize(1024, 600)

        self.ledger = ledger
        self.excel = excel_service
        self.reporting = reporting_service

        self.store_path = store_path
        self.logs_dir = logs_dir

        self.status_var = tk.StringVar(value="")
        self._toast_after_id = None

        self._build_styles()

        main = ttk.Frame(self)
        main.pack(fill="both", expand=True, padx=12, pady=10)

        self.sidebar = ttk.Frame(main)
        self.sidebar.pack(side="left", fill="y", padx=(0, 10))

        self.content = ttk.Frame(main)
        self.content.pack(side="right", fill="both", expand=True)

        self.nb = ttk.Notebook(self.content, style="Side.TNotebook")
        self.nb.pack(fill="both", expand=True)

        # Sections (tabs hidden, switched from the sidebar)
        self.sections = {
            "dashboard": DashboardView(self.nb, self),
            "tiles-page": ProductsView(self.nb, self, TILE, "Tiles"),
            "sanitary-page": ProductsView(self.nb, self, SANITARY, "Sanitary"),
            "others-page": ProductsView(self.nb, self, OTHERS, "Others"),
            "sales": SalesView(self.nb, self),
            "sales-history": SalesHistoryView(self.nb, self),
            "reports": ReportsView(self.nb, self),
        }

        self._build_sidebar()
        self._build_status_bar()

        self.show_section("dashboard")

    def _build_styles(self):
        style = ttk.Style(self)
        style.layout("Side.TNotebook.Tab", [])
        style.configure("Side.TNotebook", tabmargins=0)
        style.configure("Big.TButton", padding=(14, 10))
        style.configure("Title.TLabel", font=("Segoe UI", 12, "bold"))
        style.configure("KPIValue.TLabel", font=("Segoe UI", 11, "bold"))

    def _build_sidebar(self):
        box = ttk.LabelFrame(self.sidebar, text="Sections")
        box.pack(fill="x")

        buttons = [
            ("Dashboard", "dashboard"),
            ("Tiles", "tiles-page"),
            ("Sanitary", "sanitary-page"),
            ("Others", "others-page"),
            ("Sales", "sales"),
            ("Sales History", "sales-history"),
            ("Excel + Reports", "reports"),
        ]
        for i, (text, section) in enumerate(buttons):
            ttk.Button(
                box, text=text, style="Big.TButton",
                command=lambda s=section: self.show_section(s)
            ).pack(fill="x", padx=10, pady=(10 if i == 0 else 4, 4))

    def _build_status_bar(self):
        bar = ttk.Frame(self)
        bar.pack(fill="x", padx=12, pady=(0, 10))
        ttk.Label(bar, textvariable=self.status_var).pack(side="left")
        ttk.Label(bar, text=f"Store: {Path(self.store_path).name} | Logs: {self.logs_dir}").pack(side="right")

    def toast(self, msg: str, kind: str = "info", ms: int = 2500):
        prefix = {"info": "ℹ ", "success": "✅ ", "warn": "⚠ ", "error": "❌ "}.get(kind, "")
        self.status_var.set(prefix + msg)
        if self._toast_after_id is not None:
            self.after_cancel(self._toast_after_id)
        self._toast_after_id = self.after(ms, lambda: self.status_var.set(""))

    # ---------- Navigation ----------
    def show_section(self, section: str):
        view = self.sections[section]
        self.nb.select(view.frame)
        view.refresh()

    def refresh_all(self):
        for view in self.sections.values():
            view.refresh()

    # ---------- New sale ----------
    def prepare_new_sales(self, category: str):
        recorded = 0
        more = True
        while more:
            serial = simpledialog.askstring("New sale", f"Enter serial number of {category} product:", parent=self)
            if serial is None:
                break
            quantity = simpledialog.askstring("New sale", "Enter quantity sold:", parent=self)
            if quantity is None:
                break

            try:
                sale = self.ledger.record_sale(serial.strip(), quantity)
            except InvalidSale as e:
                log.info("sale_rejected serial=%s reason=%s", serial, e)
                messagebox.showerror("New sale", "Invalid serial or insufficient stock")
                more = messagebox.askyesno("New sale", "Do you want to continue adding sales?")
                continue
            except PersistenceError as e:
                messagebox.showerror("New sale", f"Could not save the sale: {e}")
                break

            recorded += 1
            more = messagebox.askyesno("New sale", f"Sale recorded! (₹{sale.total:.2f}) Add another?")

        self.refresh_all()
        if recorded:
            self.toast(f"{recorded} sale(s) recorded.", kind="success")
