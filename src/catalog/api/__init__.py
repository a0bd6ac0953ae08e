"""Catalog domain API package."""

from catalog.api.errors import register_catalog_exception_handlers
from catalog.api.routes import metrics_router, product_router

__all__ = ["product_router", "metrics_router", "register_catalog_exception_handlers"]
