"""Warehousing domain API package."""

from warehousing.api.errors import register_error_handlers
from warehousing.api.routes import dashboard_router, item_router, warehouse_router

__all__ = ["warehouse_router", "item_router", "dashboard_router", "register_error_handlers"]
