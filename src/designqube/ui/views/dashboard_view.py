from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from designqube.ui.tables import dashboard_values, low_stock_line


class DashboardView:
    def __init__(self, notebook: ttk.Notebook, app):
        self.app = app
        self.frame = ttk.Frame(notebook)
        notebook.add(self.frame, text="Dashboard")

        kpi = ttk.LabelFrame(self.frame, text="Summary")
        kpi.pack(fill="x", padx=10, pady=10)

        self.values: dict[str, ttk.Label] = {}
        labels = [
            ("total_products", "Total products"),
            ("total_stock", "Total stock"),
            ("total_sales", "Total sales (₹)"),
        ]
        for i, (key, text) in enumerate(labels):
            ttk.Label(kpi, text=text).grid(row=i, column=0, sticky="w", padx=10, pady=4)
            value = ttk.Label(kpi, text="-", style="KPIValue.TLabel")
            value.grid(row=i, column=1, sticky="e", padx=10, pady=4)
            self.values[key] = value
        kpi.columnconfigure(0, weight=1)

        lowbox = ttk.LabelFrame(self.frame, text="Low stock (5 or fewer)")
        lowbox.pack(fill="both", expand=True, padx=10, pady=(0, 10))
        self.low_list = tk.Listbox(lowbox, height=12)
        self.low_list.pack(fill="both", expand=True, padx=10, pady=10)

    def refresh(self):
        summary = self.app.ledger.aggregate_summary()
        for key, text in dashboard_values(summary).items():
            self.values[key].config(text=text)

        self.low_list.delete(0, tk.END)
        for p in summary.low_stock_products:
            self.low_list.insert(tk.END, low_stock_line(p))
