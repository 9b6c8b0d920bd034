from __future__ import annotations

from designqube.domain.models import OTHERS, SANITARY, TILE, Product, Sale, Summary


def money(value: float) -> str:
    return f"₹{float(value or 0):.2f}"


PRODUCT_COLUMNS = {
    TILE: ("Serial", "Brand", "Name", "Size", "Boxes", "Pieces", "Price/Box", "Total"),
    SANITARY: ("Serial", "Brand", "Name", "Boxes", "Pieces", "Price/Box", "Total"),
    OTHERS: ("Serial", "Type", "Brand", "Name", "Size", "Boxes", "Pieces", "Price/Box", "Total"),
}

SALE_COLUMNS = ("Serial", "Name", "Quantity", "Total", "Date")


def product_row(p: Product, category: str) -> tuple[str, ...]:
    """One table row for a product. Sanitary tables have no size column,
    the catch-all table shows the raw type."""
    counts = (str(p.num_boxes), str(p.num_pieces), money(p.price_per_box), money(p.boxes_value))
    if category == TILE:
        return (p.serial, p.brand, p.name, p.size or "-") + counts
    if category == SANITARY:
        return (p.serial, p.brand, p.name) + counts
    return (p.serial, p.type or "", p.brand, p.name, p.size or "-") + counts


def sale_row(s: Sale) -> tuple[str, ...]:
    return (s.serial, s.name, str(s.quantity), money(s.total), s.date)


def low_stock_line(p: Product) -> str:
    return f"{p.name} - Stock: {p.stock}"


def dashboard_values(summary: Summary) -> dict[str, str]:
    return {
        "total_products": str(summary.product_count),
        "total_stock": str(summary.total_stock_units),
        "total_sales": f"{summary.total_sales_value:.2f}",
    }
