"""Read-side product operations.

Plain functions over ``ProductRepository``; they need an active catalog
domain context. Lookups return ``None`` for a missing product and leave the
fallback to the caller.
"""

import structlog
from protean.utils.globals import current_domain

from catalog.product.product import Product
from catalog.product.repository import ProductPage
from catalog.product.stock import StockStatus, classify

logger = structlog.get_logger(__name__)

DEFAULT_PAGE_SIZE = 4
DEFAULT_SEARCH_PAGE_SIZE = 10


def _repository():
    return current_domain.repository_for(Product)


def find_product(product_id: str) -> Product | None:
    logger.debug("Finding product by ID", product_id=product_id)
    return _repository().find_by_id(product_id)


def find_product_by_name(name: str) -> Product | None:
    logger.debug("Finding product by name", name=name)
    return _repository().find_by_exact_name(name)


def list_products() -> list[Product]:
    logger.debug("Finding all products")
    return _repository().find_all()


def list_products_page(
    page: int = 0,
    size: int = DEFAULT_PAGE_SIZE,
    sort_field: str = "id",
    sort_direction: str = "asc",
) -> ProductPage:
    logger.debug(
        "Finding products page",
        page=page,
        size=size,
        sort_field=sort_field,
        sort_direction=sort_direction,
    )
    return _repository().find_page(page, size, sort_field, sort_direction)


def search_products(name: str) -> list[Product]:
    logger.debug("Searching products by name containing", name=name)
    return _repository().search_by_name(name)


def search_products_page(
    name: str,
    page: int = 0,
    size: int = DEFAULT_SEARCH_PAGE_SIZE,
    sort_field: str = "id",
    sort_direction: str = "asc",
) -> ProductPage:
    logger.debug(
        "Searching products page",
        name=name,
        page=page,
        size=size,
        sort_field=sort_field,
        sort_direction=sort_direction,
    )
    return _repository().search_page(name, page, size, sort_field, sort_direction)


def product_stock_status(product_id: str) -> StockStatus | None:
    """Stock status of a product, or None when the product does not exist."""
    product = find_product(product_id)
    if product is None:
        return None
    return classify(product.quantity)
