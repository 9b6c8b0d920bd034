from __future__ import annotations

from tkinter import ttk

from designqube.ui.tables import PRODUCT_COLUMNS, product_row


class ProductsView:
    def __init__(self, notebook: ttk.Notebook, app, category: str, title: str):
        self.app = app
        self.category = category
        self.frame = ttk.Frame(notebook)
        notebook.add(self.frame, text=title)

        ttk.Label(self.frame, text=title, style="Title.TLabel").pack(anchor="w", padx=10, pady=(10, 4))

        heads = PRODUCT_COLUMNS[category]
        cols = tuple(f"c{i}" for i in range(len(heads)))
        self.tree = ttk.Treeview(self.frame, columns=cols, show="headings", height=20)
        for c, head in zip(cols, heads):
            self.tree.heading(c, text=head)
            self.tree.column(c, width=220 if head == "Name" else 100, anchor="w")

        yscroll = ttk.Scrollbar(self.frame, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=yscroll.set)
        self.tree.pack(side="left", fill="both", expand=True, padx=(10, 0), pady=(0, 10))
        yscroll.pack(side="right", fill="y", padx=(0, 10), pady=(0, 10))

    def refresh(self):
        self.tree.delete(*self.tree.get_children())
        for p in self.app.ledger.list_products(self.category):
            self.tree.insert("", "end", values=product_row(p, self.category))
