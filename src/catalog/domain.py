"""Catalog bounded context: products, stock status and inventory health.

Owns the product lifecycle (add, update, reprice, delete), name uniqueness
across the catalog, the stock-status classification of quantities and the
health verdict summarizing the whole catalog.
"""

from protean.domain import Domain

from catalog.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
catalog = Domain(name="catalog")
