from .dashboard_view import DashboardView
from .products_view import ProductsView
from .sales_view import SalesView, SalesHistoryView
from .reports_view import ReportsView

__all__ = ["DashboardView", "ProductsView", "SalesView", "SalesHistoryView", "ReportsView"]
