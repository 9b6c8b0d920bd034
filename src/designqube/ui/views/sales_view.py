from __future__ import annotations

from tkinter import ttk

from designqube.domain.models import OTHERS, SANITARY, TILE
from designqube.ui.tables import SALE_COLUMNS, sale_row


def _sales_tree(parent) -> ttk.Treeview:
    cols = ("serial", "name", "qty", "total", "date")
    tree = ttk.Treeview(parent, columns=cols, show="headings", height=14)
    widths = {"serial": 110, "name": 320, "qty": 80, "total": 110, "date": 110}
    for c, head in zip(cols, SALE_COLUMNS):
        tree.heading(c, text=head)
        tree.column(c, width=widths[c], anchor="w")
    return tree


class SalesView:
    """Sales split into tile / sanitary / others tabs, each with its own
    New Sale entry point."""

    def __init__(self, notebook: ttk.Notebook, app):
        self.app = app
        self.frame = ttk.Frame(notebook)
        notebook.add(self.frame, text="Sales")

        self.tabs = ttk.Notebook(self.frame)
        self.tabs.pack(fill="both", expand=True, padx=10, pady=10)

        self.trees: dict[str, ttk.Treeview] = {}
        for category, title in ((TILE, "Tiles"), (SANITARY, "Sanitary"), (OTHERS, "Others")):
            tab = ttk.Frame(self.tabs)
            self.tabs.add(tab, text=title)

            ttk.Button(
                tab, text=f"New {title} sale", style="Big.TButton",
                command=lambda c=category: self.app.prepare_new_sales(c)
            ).pack(anchor="w", padx=10, pady=10)

            tree = _sales_tree(tab)
            tree.pack(fill="both", expand=True, padx=10, pady=(0, 10))
            self.trees[category] = tree

    def refresh(self):
        for category, tree in self.trees.items():
            tree.delete(*tree.get_children())
            for s in self.app.ledger.list_sales(category):
                tree.insert("", "end", values=sale_row(s))


class SalesHistoryView:
    def __init__(self, notebook: ttk.Notebook, app):
        self.app = app
        self.frame = ttk.Frame(notebook)
        notebook.add(self.frame, text="Sales History")

        ttk.Label(self.frame, text="Sales History", style="Title.TLabel").pack(anchor="w", padx=10, pady=(10, 4))
        self.tree = _sales_tree(self.frame)
        self.tree.pack(fill="both", expand=True, padx=10, pady=(0, 10))

    def refresh(self):
        self.tree.delete(*self.tree.get_children())
        for s in self.app.ledger.list_sales():
            self.tree.insert("", "end", values=sale_row(s))
