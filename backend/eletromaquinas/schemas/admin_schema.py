# backend/eletromaquinas/schemas/admin_schema.py
"""
Esquemas de respuesta del panel de administración.
"""

from datetime import datetime
from typing import Any, Dict, List

from .base_schema import CamelModel


class DashboardStats(CamelModel):
    """Indicadores del panel, calculados en cada petición."""
    total_products: int
    active_products: int
    total_clients: int
    total_sales: int
    total_revenue: float
    pending_orders: int
    low_stock_products: int


class BackupExport(CamelModel):
    generated_at: datetime
    users: List[Dict[str, Any]]
    products: List[Dict[str, Any]]
    categories: List[str]
    orders: List[Dict[str, Any]]
    settings: Dict[str, Any]
